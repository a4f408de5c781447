import re

import attr

from wktparse import DIMENSION_MARKERS, TYPE_TAGS
from wktparse.factory import Capabilities, GeoJSONFactory
from wktparse.lexer import Kind, Lexer, ParseError


__all__ = ('ParseContext', 'ParseError', 'WKTParser')

srid_prefix = re.compile(r'srid=(\d+);')


@attr.s
class ParseContext:
    """State for a single call to :meth:`WKTParser.parse`.

    ``expect_z`` and ``expect_m`` start out as ``None`` (unknown) and are
    fixed to ``True`` or ``False`` for the rest of the parse the first time
    either a dimension tag or a coordinate tuple is seen.
    """
    srid = attr.ib(default=None)
    expect_z = attr.ib(default=None)
    expect_m = attr.ib(default=None)
    factory = attr.ib(default=None)
    capabilities = attr.ib(default=None)
    tokens = attr.ib(default=None)


class WKTParser:
    """Parser for WKT, with optional EWKT and SFS 1.2 extensions.

    Create an instance with the desired settings and call :meth:`parse`::

        parser = WKTParser(support_wkt12=True,
                           default_factory=GeoJSONFactory(supports_z=True))
        parser.parse('POINT Z (1 2 3)')

    The following options can be passed to the constructor or set on the
    instance between parses:

    ``default_factory``
        Factory used when there is no ``factory_generator``, or when the
        generator returns ``None``. Defaults to a 2D
        :class:`wktparse.factory.GeoJSONFactory`.
    ``factory_generator``
        Callable accepting the keyword arguments ``srid``, ``support_z``
        and ``support_m`` and returning a factory. It is called at most
        once per parse, as soon as a factory is needed. The dimension
        arguments may still be ``None`` at that point if nothing in the
        input has determined them yet.
    ``support_ewkt``
        Recognize the PostGIS ``SRID=<n>;`` prefix and ``M`` suffixed type
        tags such as ``POINTM``.
    ``support_wkt12``
        Recognize the SFS 1.2 ``Z``, ``M`` and ``ZM`` tokens following a
        type tag.
    ``strict_wkt11``
        Only allow X and Y values. Has no effect if either of the two
        extensions above is enabled.
    ``ignore_extra_tokens``
        Do not fail when input remains after a complete geometry.

    No parse state is kept on the instance, so a configured parser may be
    shared between threads.
    """
    def __init__(self, default_factory=None, factory_generator=None,
                 support_ewkt=False, support_wkt12=False, strict_wkt11=False,
                 ignore_extra_tokens=False):
        self.default_factory = default_factory
        self.factory_generator = factory_generator
        self.support_ewkt = support_ewkt
        self.support_wkt12 = support_wkt12
        self.strict_wkt11 = strict_wkt11
        self.ignore_extra_tokens = ignore_extra_tokens

    @property
    def default_factory(self):
        return self._default_factory

    @default_factory.setter
    def default_factory(self, value):
        self._default_factory = GeoJSONFactory() if value is None else value

    @property
    def support_ewkt(self):
        return self._support_ewkt

    @support_ewkt.setter
    def support_ewkt(self, value):
        self._support_ewkt = bool(value)

    @property
    def support_wkt12(self):
        return self._support_wkt12

    @support_wkt12.setter
    def support_wkt12(self, value):
        self._support_wkt12 = bool(value)

    @property
    def strict_wkt11(self):
        """Always ``False`` while EWKT or SFS 1.2 support is enabled."""
        if self.support_ewkt or self.support_wkt12:
            return False
        return self._strict_wkt11

    @strict_wkt11.setter
    def strict_wkt11(self, value):
        self._strict_wkt11 = bool(value)

    @property
    def ignore_extra_tokens(self):
        return self._ignore_extra_tokens

    @ignore_extra_tokens.setter
    def ignore_extra_tokens(self, value):
        self._ignore_extra_tokens = bool(value)

    def parse(self, text):
        """Parse a WKT string and return the geometry.

        :raises wktparse.lexer.ParseError: if the input is not valid for
            this parser's configuration
        """
        text = text.lower()
        ctx = ParseContext()
        if self.support_ewkt:
            match = srid_prefix.match(text)
            if match:
                ctx.srid = int(match.group(1))
                text = text[match.end():]
        with Lexer(text) as tokens:
            ctx.tokens = tokens
            geom = self._parse_type_tag(ctx)
            if tokens.token.kind is not Kind.EOF and \
                    not self.ignore_extra_tokens:
                raise ParseError('Extra tokens beginning with {}.'.format(
                    tokens.token))
        return geom

    def _resolve_factory(self, ctx):
        if ctx.factory is None:
            factory = None
            if self.factory_generator is not None:
                factory = self.factory_generator(srid=ctx.srid,
                                                 support_z=ctx.expect_z,
                                                 support_m=ctx.expect_m)
            ctx.factory = self.default_factory if factory is None else factory
            ctx.capabilities = Capabilities.of(ctx.factory)
        return ctx.factory

    def _check_capabilities(self, ctx):
        if ctx.expect_z and not ctx.capabilities.z:
            raise ParseError("Geometry calls for Z coordinate but factory "
                             "doesn't support it.")
        if ctx.expect_m and not ctx.capabilities.m:
            raise ParseError("Geometry calls for M coordinate but factory "
                             "doesn't support it.")

    def _parse_type_tag(self, ctx):
        tokens = ctx.tokens
        word = tokens.expect(Kind.WORD).value
        marker = ''
        if self.support_ewkt and len(word) > 1 and word.endswith('m'):
            _type, marker = word[:-1], 'm'
        else:
            _type = word
        tokens.advance()
        if not marker and self.support_wkt12 and \
                tokens.token.kind is Kind.WORD and \
                tokens.token.value in DIMENSION_MARKERS:
            marker = tokens.token.value
            tokens.advance()
        if _type not in TYPE_TAGS:
            raise ParseError('Unknown type tag: {!r}.'.format(_type))
        if marker or self.strict_wkt11:
            self._declare_dimensions(ctx, marker.startswith('z'),
                                     marker.endswith('m'))
        if _type == 'point':
            return self._parse_point(ctx, convert_empty=True)
        elif _type == 'linestring':
            return self._parse_line_string(ctx)
        elif _type == 'polygon':
            return self._parse_polygon(ctx)
        elif _type == 'geometrycollection':
            return self._parse_geometry_collection(ctx)
        elif _type == 'multipoint':
            return self._parse_multi_point(ctx)
        elif _type == 'multilinestring':
            return self._parse_multi_line_string(ctx)
        return self._parse_multi_polygon(ctx)

    def _declare_dimensions(self, ctx, has_z, has_m):
        if ctx.expect_z is None:
            ctx.expect_z = has_z
            ctx.expect_m = has_m
            self._resolve_factory(ctx)
            self._check_capabilities(ctx)
            return
        if has_z != ctx.expect_z:
            raise ParseError(_mismatch('Z', ctx.expect_z))
        if has_m != ctx.expect_m:
            raise ParseError(_mismatch('M', ctx.expect_m))

    def _parse_coords(self, ctx):
        tokens = ctx.tokens
        x = tokens.expect(Kind.NUMBER).value
        tokens.advance()
        y = tokens.expect(Kind.NUMBER).value
        tokens.advance()
        extra = []
        if ctx.expect_z is None:
            while tokens.token.kind is Kind.NUMBER:
                extra.append(tokens.token.value)
                tokens.advance()
            ctx.expect_z = len(extra) > 0
            ctx.expect_m = len(extra) > 1
            self._resolve_factory(ctx)
            caps = ctx.capabilities
            if len(extra) > 2 or (ctx.expect_z and not caps.z) or \
                    (ctx.expect_m and not caps.m):
                raise ParseError('Found {} coordinates, which is too many '
                                 'for this factory.'.format(len(extra) + 2))
        else:
            z = self._parse_ordinate(ctx) if ctx.expect_z else 0.0
            m = self._parse_ordinate(ctx) if ctx.expect_m else 0.0
            if ctx.capabilities.z:
                extra.append(z)
            if ctx.capabilities.m:
                extra.append(m)
        return ctx.factory.point(x, y, *extra)

    def _parse_ordinate(self, ctx):
        value = ctx.tokens.expect(Kind.NUMBER).value
        ctx.tokens.advance()
        return value

    def _parse_elements(self, ctx, element, allow_none=False):
        """Parse ``EMPTY`` or a bracketed, comma separated element list."""
        tokens = ctx.tokens
        elements = []
        if not tokens.is_word('empty'):
            tokens.expect(Kind.BEGIN)
            tokens.advance()
            while not (allow_none and not elements and
                       tokens.token.kind is Kind.END):
                elements.append(element(ctx))
                if tokens.token.kind is Kind.END:
                    break
                tokens.expect(Kind.COMMA)
                tokens.advance()
        tokens.advance()
        return elements

    def _parse_point(self, ctx, convert_empty=False):
        tokens = ctx.tokens
        if convert_empty and tokens.is_word('empty'):
            point = self._resolve_factory(ctx).multi_point([])
        else:
            tokens.expect(Kind.BEGIN)
            tokens.advance()
            point = self._parse_coords(ctx)
            tokens.expect(Kind.END)
        tokens.advance()
        return point

    def _parse_line_string(self, ctx):
        points = self._parse_elements(ctx, self._parse_coords,
                                      allow_none=True)
        return self._resolve_factory(ctx).line_string(points)

    def _parse_ring(self, ctx):
        points = self._parse_elements(ctx, self._parse_coords,
                                      allow_none=True)
        return self._resolve_factory(ctx).linear_ring(points)

    def _parse_polygon(self, ctx):
        rings = self._parse_elements(ctx, self._parse_ring)
        factory = self._resolve_factory(ctx)
        if not rings:
            return factory.polygon(factory.linear_ring([]), [])
        return factory.polygon(rings[0], rings[1:])

    def _parse_geometry_collection(self, ctx):
        geometries = self._parse_elements(ctx, self._parse_type_tag)
        return self._resolve_factory(ctx).collection(geometries)

    def _parse_multi_point(self, ctx):
        points = self._parse_elements(ctx, self._parse_member_point)
        return self._resolve_factory(ctx).multi_point(points)

    def _parse_member_point(self, ctx):
        if ctx.tokens.token.kind is Kind.NUMBER:
            return self._parse_coords(ctx)
        return self._parse_point(ctx)

    def _parse_multi_line_string(self, ctx):
        lines = self._parse_elements(ctx, self._parse_line_string)
        return self._resolve_factory(ctx).multi_line_string(lines)

    def _parse_multi_polygon(self, ctx):
        polygons = self._parse_elements(ctx, self._parse_polygon)
        return self._resolve_factory(ctx).multi_polygon(polygons)


def _mismatch(axis, established):
    if established:
        return "Surrounding collection has {} but contained geometry " \
               "doesn't.".format(axis)
    return "Contained geometry has {} but surrounding collection " \
           "doesn't.".format(axis)
