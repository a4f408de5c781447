import json

import click
from geomet import wkt

from wktparse.factory import GeoJSONFactory, geojson_factory_generator
from wktparse.parser import ParseError, WKTParser


DIMS = ('auto', 'xy', 'xyz', 'xym', 'xyzm')


@click.group()
@click.version_option()
def main():
    pass


@main.command()
@click.argument('text', metavar='WKT', required=False, default='-')
@click.option('--ewkt', is_flag=True, envvar='WKT_SUPPORT_EWKT',
              help="Accept PostGIS EWKT: an SRID=<n>; prefix and M suffixed "
                   "type tags such as POINTM.")
@click.option('--wkt12', is_flag=True, envvar='WKT_SUPPORT_WKT12',
              help="Accept SFS 1.2 Z, M and ZM tokens after the type tag.")
@click.option('--strict', is_flag=True, envvar='WKT_STRICT_WKT11',
              help="Only allow X and Y values. Ignored when --ewkt or "
                   "--wkt12 is set.")
@click.option('--ignore-extra-tokens', is_flag=True,
              envvar='WKT_IGNORE_EXTRA_TOKENS',
              help="Do not fail on input left over after the geometry.")
@click.option('--dims', type=click.Choice(DIMS), default='auto',
              envvar='WKT_DIMS',
              help="Coordinate axes the output geometry may carry. The "
                   "default, auto, picks them from the input. Default "
                   "value: auto")
@click.option('--format', 'fmt', type=click.Choice(('geojson', 'wkt')),
              default='geojson', help="Output format. Default value: geojson")
def parse(text, ewkt, wkt12, strict, ignore_extra_tokens, dims, fmt):
    """Parse WKT and print the geometry.

    The WKT is read from standard input when the argument is omitted or
    is "-".
    """
    if text == '-':
        text = click.get_text_stream('stdin').read()
    parser = WKTParser(support_ewkt=ewkt, support_wkt12=wkt12,
                       strict_wkt11=strict,
                       ignore_extra_tokens=ignore_extra_tokens)
    if dims == 'auto':
        parser.factory_generator = geojson_factory_generator
    else:
        parser.default_factory = GeoJSONFactory(supports_z='z' in dims,
                                                supports_m='m' in dims)
    try:
        geom = parser.parse(text)
    except ParseError as e:
        raise click.ClickException(str(e))
    if fmt == 'wkt':
        if geom.get('meta', {}).get('dims') == 'xym':
            raise click.ClickException(
                "WKT output cannot carry M values without Z. Use --format "
                "geojson instead.")
        click.echo(wkt.dumps(geom))
    else:
        click.echo(json.dumps(geom))
