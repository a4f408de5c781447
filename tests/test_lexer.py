import pytest

from wktparse.lexer import classify, Kind, Lexer, ParseError, Token


def kinds(text):
    found = []
    with Lexer(text) as tokens:
        while tokens.token.kind is not Kind.EOF:
            found.append(tokens.token.kind)
            tokens.advance()
    return found


def test_classify_returns_number():
    assert classify('-2.5e-1') == Token(Kind.NUMBER, -0.25, '-2.5e-1')
    assert classify('.5').value == 0.5
    assert classify('+1.').value == 1.0


def test_classify_returns_word():
    assert classify('point') == Token(Kind.WORD, 'point', 'point')


def test_classify_maps_brackets_to_begin_and_end():
    assert classify('(').kind is Kind.BEGIN
    assert classify('[').kind is Kind.BEGIN
    assert classify(')').kind is Kind.END
    assert classify(']').kind is Kind.END
    assert classify(',').kind is Kind.COMMA


def test_classify_raises_on_bad_token():
    with pytest.raises(ParseError, match="Bad token: '1.2.3'"):
        classify('1.2.3')
    with pytest.raises(ParseError, match="Bad token: 'point1'"):
        classify('point1')


def test_lexer_splits_on_whitespace_and_punctuation():
    assert kinds('point(1 2)') == [Kind.WORD, Kind.BEGIN, Kind.NUMBER,
                                   Kind.NUMBER, Kind.END]
    assert kinds('  multipoint [ 1\t2,3\n4 ]  ') == [
        Kind.WORD, Kind.BEGIN, Kind.NUMBER, Kind.NUMBER, Kind.COMMA,
        Kind.NUMBER, Kind.NUMBER, Kind.END]


def test_lexer_ends_with_eof():
    tokens = Lexer('point ')
    assert tokens.token.kind is Kind.WORD
    assert tokens.advance().kind is Kind.EOF
    assert tokens.advance().kind is Kind.EOF
    assert str(tokens.token) == 'end of input'


def test_lexer_expect_reports_expected_and_found():
    tokens = Lexer('foo')
    with pytest.raises(ParseError,
                       match="Begin expected but 'foo' found."):
        tokens.expect(Kind.BEGIN)


def test_lexer_is_word():
    tokens = Lexer('empty')
    assert tokens.is_word('empty')
    assert not tokens.is_word('point')


def test_lexer_releases_input_on_exit():
    with pytest.raises(ParseError):
        with Lexer('point') as tokens:
            tokens.expect(Kind.NUMBER)
    assert tokens.text is None
    assert tokens.token is None
