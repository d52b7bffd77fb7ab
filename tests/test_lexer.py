import string

import pytest
from hypothesis import given
from hypothesis import strategies as st

from minic.minic_constants import TokenKind
from minic.minic_lexer import CharacterStream, Lexer, Token, tokenize


def kinds(source: str) -> list[TokenKind]:
    return [tok.kind for tok in tokenize(source)]


def test_single_char_tokens() -> None:
    code = "+ - * / = ;"
    expected = [
        TokenKind.PLUS,
        TokenKind.MINUS,
        TokenKind.STAR,
        TokenKind.SLASH,
        TokenKind.ASSIGN,
        TokenKind.SEMICOLON,
        TokenKind.END_OF_INPUT,
    ]
    assert kinds(code) == expected


def test_declaration_tokens() -> None:
    tokens = tokenize("int result = 10 + 20;")
    assert tokens == [
        Token(TokenKind.INT_KEYWORD, "int"),
        Token(TokenKind.IDENTIFIER, "result"),
        Token(TokenKind.ASSIGN, "="),
        Token(TokenKind.INTEGER_LITERAL, "10"),
        Token(TokenKind.PLUS, "+"),
        Token(TokenKind.INTEGER_LITERAL, "20"),
        Token(TokenKind.SEMICOLON, ";"),
        Token(TokenKind.END_OF_INPUT, ""),
    ]


def test_number_token_keeps_raw_digits() -> None:
    tok = Lexer("007").next_token()
    assert tok.kind == TokenKind.INTEGER_LITERAL
    assert tok.lexeme == "007"


def test_minus_is_not_part_of_number() -> None:
    assert [t.lexeme for t in tokenize("-5")] == ["-", "5", ""]


def test_identifier_token() -> None:
    tok = Lexer("myVar2").next_token()
    assert tok.kind == TokenKind.IDENTIFIER
    assert tok.lexeme == "myVar2"


@pytest.mark.parametrize("word", ["int2", "Int", "INT", "integer", "in", "x"])  # type: ignore[misc]
def test_keyword_lookalikes_are_identifiers(word: str) -> None:
    tok = Lexer(word).next_token()
    assert tok.kind == TokenKind.IDENTIFIER
    assert tok.lexeme == word


def test_int_keyword() -> None:
    tok = Lexer("int").next_token()
    assert tok.kind == TokenKind.INT_KEYWORD
    assert tok.lexeme == "int"


def test_digits_then_letters_split() -> None:
    assert [(t.kind, t.lexeme) for t in tokenize("12ab")[:2]] == [
        (TokenKind.INTEGER_LITERAL, "12"),
        (TokenKind.IDENTIFIER, "ab"),
    ]


def test_underscore_is_unknown() -> None:
    assert [(t.kind, t.lexeme) for t in tokenize("a_b")] == [
        (TokenKind.IDENTIFIER, "a"),
        (TokenKind.UNKNOWN, "_"),
        (TokenKind.IDENTIFIER, "b"),
        (TokenKind.END_OF_INPUT, ""),
    ]


def test_unrecognized_character_returns_unknown() -> None:
    assert tokenize("@") == [
        Token(TokenKind.UNKNOWN, "@"),
        Token(TokenKind.END_OF_INPUT, ""),
    ]


def test_non_ascii_digits_and_letters_are_unknown() -> None:
    assert kinds("٣é") == [
        TokenKind.UNKNOWN,
        TokenKind.UNKNOWN,
        TokenKind.END_OF_INPUT,
    ]


def test_empty_input_returns_end_of_input() -> None:
    tok = Lexer("").next_token()
    assert tok.kind == TokenKind.END_OF_INPUT
    assert tok.lexeme == ""


def test_whitespace_only_input() -> None:
    assert tokenize(" \t\r\n\v\f ") == [Token(TokenKind.END_OF_INPUT, "")]


def test_end_of_input_repeats() -> None:
    lexer = Lexer("x")
    assert lexer.next_token().kind == TokenKind.IDENTIFIER
    for _ in range(3):
        assert lexer.next_token() == Token(TokenKind.END_OF_INPUT, "")


def test_iteration_stops_after_end_of_input() -> None:
    assert [t.lexeme for t in Lexer("a b")] == ["a", "b", ""]


def test_line_and_column_tracking() -> None:
    tokens = tokenize("int x\n  = 1;")
    assert (tokens[1].line, tokens[1].col) == (1, 5)
    assert (tokens[2].line, tokens[2].col) == (2, 3)
    assert (tokens[-1].line, tokens[-1].col) == (2, 7)


def test_token_repr_and_eq() -> None:
    t1 = Token(TokenKind.INTEGER_LITERAL, "42", 1, 2)
    t2 = Token(TokenKind.INTEGER_LITERAL, "42", 3, 4)
    t3 = Token(TokenKind.IDENTIFIER, "x")

    assert repr(t1) == "Token(INTEGER_LITERAL, '42')"
    assert t1 == t2
    assert t1 != t3
    assert len({t1, t2, t3}) == 2


def test_token_is_immutable() -> None:
    tok = Token(TokenKind.IDENTIFIER, "x")
    with pytest.raises(AttributeError):
        tok.lexeme = "y"  # type: ignore[misc]


def test_character_stream_methods() -> None:
    stream = CharacterStream("a\nb")
    assert stream.peek() == "a"
    assert stream.next() == "a"
    assert stream.next() == "\n"
    assert (stream.line, stream.column) == (2, 1)
    assert stream.peek(5) == ""
    stream.next()
    assert stream.end_of_file()


def test_character_stream_next_past_eof_raises() -> None:
    with pytest.raises(EOFError, match="Attempted to read past end of source"):
        CharacterStream("").next()


@given(st.text(max_size=200))  # type: ignore[misc]
def test_lexer_terminates_on_random_input(text: str) -> None:
    tokens = tokenize(text)
    assert tokens[-1].kind == TokenKind.END_OF_INPUT
    assert all(t.kind != TokenKind.END_OF_INPUT for t in tokens[:-1])
    assert len(tokens) <= len(text) + 1


@given(st.text(max_size=200))  # type: ignore[misc]
def test_every_non_whitespace_character_is_kept(text: str) -> None:
    expected = "".join(ch for ch in text if ch not in string.whitespace)
    assert "".join(t.lexeme for t in tokenize(text)) == expected


@given(st.text(alphabet=st.characters(exclude_characters=string.whitespace)))  # type: ignore[misc]
def test_round_trip_without_whitespace(text: str) -> None:
    assert "".join(t.lexeme for t in tokenize(text)) == text


@given(st.from_regex(r"[A-Za-z][A-Za-z0-9]*", fullmatch=True))  # type: ignore[misc]
def test_keyword_exactness(word: str) -> None:
    tokens = tokenize(word)
    assert len(tokens) == 2
    expected = TokenKind.INT_KEYWORD if word == "int" else TokenKind.IDENTIFIER
    assert tokens[0].kind == expected
    assert tokens[0].lexeme == word
