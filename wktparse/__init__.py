"""
wktparse
"""


#: Geometry type tags the parser dispatches on, in lower case.
TYPE_TAGS = (
    'point',
    'linestring',
    'polygon',
    'geometrycollection',
    'multipoint',
    'multilinestring',
    'multipolygon',
)

#: SFS 1.2 dimension tokens that may follow a type tag. The EWKT fused
#: suffix is always ``m``.
DIMENSION_MARKERS = ('z', 'm', 'zm')
