import attr
from attr import converters


@attr.s(frozen=True)
class Capabilities:
    """The coordinate axes a geometry factory can represent."""
    z = attr.ib(default=False, converter=bool)
    m = attr.ib(default=False, converter=bool)

    @classmethod
    def of(cls, factory):
        """Probe a factory for its ``supports_z`` and ``supports_m`` flags.

        Factories that do not declare a flag are assumed not to support
        that axis.
        """
        return cls(z=getattr(factory, 'supports_z', False),
                   m=getattr(factory, 'supports_m', False))


@attr.s(frozen=True)
class GeoJSONFactory:
    """A geometry factory producing GeoJSON-like dictionaries.

    The output is the same structure ``geomet`` reads and writes, so a
    parsed geometry can be passed straight to ``geomet.wkt.dumps`` or
    ``json.dump``. When ``srid`` is set, each geometry carries it in a
    ``meta`` member::

        GeoJSONFactory(srid=4326).point(1.0, 2.0)
        # {'type': 'Point', 'coordinates': [1.0, 2.0], 'meta': {'srid': 4326}}

    A factory supporting M but not Z puts M in the third coordinate, which
    GeoJSON would read as Z. Its geometries are marked with
    ``meta: {'dims': 'xym'}``.

    Linear rings are only an intermediate value used to build polygons.
    """
    srid = attr.ib(default=None, converter=converters.optional(int))
    supports_z = attr.ib(default=False, converter=bool)
    supports_m = attr.ib(default=False, converter=bool)

    def point(self, x, y, *extra):
        return self._geometry('Point', [x, y, *extra])

    def line_string(self, points):
        return self._geometry('LineString', _coords(points))

    def linear_ring(self, points):
        return self._geometry('LinearRing', _coords(points))

    def polygon(self, outer_ring, inner_rings=()):
        rings = [outer_ring, *inner_rings]
        if not outer_ring['coordinates'] and len(rings) == 1:
            return self._geometry('Polygon', [])
        return self._geometry('Polygon', _coords(rings))

    def multi_point(self, points):
        return self._geometry('MultiPoint', _coords(points))

    def multi_line_string(self, line_strings):
        return self._geometry('MultiLineString', _coords(line_strings))

    def multi_polygon(self, polygons):
        return self._geometry('MultiPolygon', _coords(polygons))

    def collection(self, geometries):
        geom = {'type': 'GeometryCollection', 'geometries': list(geometries)}
        return self._with_meta(geom)

    def _geometry(self, _type, coordinates):
        return self._with_meta({'type': _type, 'coordinates': coordinates})

    def _with_meta(self, geom):
        meta = {}
        if self.srid is not None:
            meta['srid'] = self.srid
        if self.supports_m and not self.supports_z:
            meta['dims'] = 'xym'
        if meta:
            geom['meta'] = meta
        return geom


def geojson_factory_generator(srid=None, support_z=None, support_m=None):
    """Factory generator returning a :class:`GeoJSONFactory`.

    The returned factory supports exactly the requested axes. An axis that
    has not been determined yet (``None``) is treated as absent.
    """
    return GeoJSONFactory(srid=srid, supports_z=bool(support_z),
                          supports_m=bool(support_m))


def _coords(geometries):
    return [g['coordinates'] for g in geometries]
