import pytest

from wktparse.factory import geojson_factory_generator, GeoJSONFactory
from wktparse.parser import WKTParser


class RecordingGenerator:
    """Factory generator that remembers how it was called."""
    def __init__(self, generator=geojson_factory_generator):
        self.generator = generator
        self.calls = []

    def __call__(self, srid=None, support_z=None, support_m=None):
        self.calls.append((srid, support_z, support_m))
        return self.generator(srid=srid, support_z=support_z,
                              support_m=support_m)


@pytest.fixture
def parser():
    return WKTParser()


@pytest.fixture
def xyz_factory():
    return GeoJSONFactory(supports_z=True)


@pytest.fixture
def xyzm_factory():
    return GeoJSONFactory(supports_z=True, supports_m=True)


@pytest.fixture
def generator():
    return RecordingGenerator()


@pytest.fixture
def wkt12_parser(generator):
    return WKTParser(support_wkt12=True, factory_generator=generator)


@pytest.fixture
def ewkt_parser(generator):
    return WKTParser(support_ewkt=True, factory_generator=generator)
