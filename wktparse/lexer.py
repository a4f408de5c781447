import enum
import re

import attr


_chunk = re.compile(r'\s*([()\[\],]|[^\s()\[\],]+)')
_number = re.compile(r'[-+]?(\d+(\.\d*)?|\.\d+)(e[-+]?\d+)?')
_word = re.compile(r'[a-z]+')


class Kind(enum.Enum):
    NUMBER = 'number'
    WORD = 'word'
    BEGIN = 'begin'
    END = 'end'
    COMMA = 'comma'
    EOF = 'end of input'


PUNCTUATION = {
    '(': Kind.BEGIN,
    '[': Kind.BEGIN,
    ')': Kind.END,
    ']': Kind.END,
    ',': Kind.COMMA,
}


@attr.s(frozen=True)
class Token:
    """A single classified token.

    ``value`` is a float for numbers and the matched string for words. It
    is ``None`` for everything else. ``text`` is the matched input and is
    only used when reporting errors.
    """
    kind = attr.ib(validator=attr.validators.instance_of(Kind))
    value = attr.ib(default=None)
    text = attr.ib(default='')

    def __str__(self):
        if self.kind is Kind.EOF:
            return self.kind.value
        return repr(self.text)


def classify(chunk):
    """Turn a chunk of input into a :class:`Token`.

    Numbers are tried before words, and words before punctuation.
    """
    if _number.fullmatch(chunk):
        return Token(Kind.NUMBER, float(chunk), chunk)
    elif _word.fullmatch(chunk):
        return Token(Kind.WORD, chunk, chunk)
    elif chunk in PUNCTUATION:
        return Token(PUNCTUATION[chunk], text=chunk)
    raise ParseError('Bad token: {!r}.'.format(chunk))


class Lexer:
    """Single lookahead token stream over lower-cased WKT.

    The current token is always available as ``token``. Calling
    :meth:`advance` replaces it with the next one. A lexer can be used as
    a context manager, in which case it is closed on exit::

        with Lexer('point (1 2)') as tokens:
            tokens.expect(Kind.WORD)

    """
    def __init__(self, text):
        self.text = text
        self.pos = 0
        self.token = None
        self.advance()

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()

    def advance(self):
        match = _chunk.match(self.text, self.pos)
        if match is None:
            self.pos = len(self.text)
            self.token = Token(Kind.EOF)
        else:
            self.pos = match.end()
            self.token = classify(match.group(1))
        return self.token

    def expect(self, kind):
        """Raise a :class:`ParseError` unless the current token is ``kind``."""
        if self.token.kind is not kind:
            raise ParseError('{} expected but {} found.'.format(
                kind.value.capitalize(), self.token))
        return self.token

    def is_word(self, value):
        return self.token.kind is Kind.WORD and self.token.value == value

    def close(self):
        self.text = None
        self.token = None


class ParseError(Exception):
    """Errors related to parsing WKT."""
    pass
