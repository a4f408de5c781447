from wktparse.factory import (
    Capabilities,
    geojson_factory_generator,
    GeoJSONFactory,
)


class Bare:
    pass


def test_capabilities_probes_factory():
    caps = Capabilities.of(GeoJSONFactory(supports_z=True))
    assert caps == Capabilities(z=True, m=False)


def test_capabilities_defaults_to_unsupported():
    assert Capabilities.of(Bare()) == Capabilities(z=False, m=False)


def test_factory_builds_point():
    assert GeoJSONFactory().point(1.0, 2.0) == \
        {'type': 'Point', 'coordinates': [1.0, 2.0]}


def test_factory_adds_srid_to_geometry():
    geom = GeoJSONFactory(srid='4326').line_string([])
    assert geom['meta'] == {'srid': 4326}


def test_factory_builds_polygon_from_rings():
    f = GeoJSONFactory()
    outer = f.linear_ring([f.point(0, 0), f.point(1, 0), f.point(0, 0)])
    hole = f.linear_ring([f.point(0, 0)])
    assert f.polygon(outer, [hole])['coordinates'] == \
        [[[0, 0], [1, 0], [0, 0]], [[0, 0]]]


def test_factory_builds_empty_polygon():
    f = GeoJSONFactory()
    assert f.polygon(f.linear_ring([]), []) == \
        {'type': 'Polygon', 'coordinates': []}


def test_factory_builds_collection():
    f = GeoJSONFactory()
    geom = f.collection([f.point(1, 2)])
    assert geom == {'type': 'GeometryCollection',
                    'geometries': [{'type': 'Point', 'coordinates': [1, 2]}]}


def test_generator_treats_unknown_dimensions_as_absent():
    f = geojson_factory_generator(srid=3857, support_z=True)
    assert f == GeoJSONFactory(srid=3857, supports_z=True, supports_m=False)
    assert geojson_factory_generator() == GeoJSONFactory()


def test_factory_marks_m_only_geometries():
    f = GeoJSONFactory(srid=4326, supports_m=True)
    assert f.point(1.0, 2.0, 3.0)['meta'] == {'srid': 4326, 'dims': 'xym'}
    assert 'meta' not in GeoJSONFactory(supports_z=True,
                                        supports_m=True).point(1, 2, 3, 4)
