"""Tests for the CSS tokenizer."""

import pytest

from csslite.errors import InvalidNumber, UnexpectedToken
from csslite.lexer.lexer import Lexer
from csslite.lexer.source import CharacterSource
from csslite.model.token import Token, TokenKind


def _tokens(css: str) -> list[Token]:
    return list(Lexer.from_string(css))


def _kinds(css: str) -> list[TokenKind]:
    return [t.kind for t in _tokens(css)]


# ---------------------------------------------------------------------------
# Token stream protocol
# ---------------------------------------------------------------------------


class TestStream:
    def test_empty_input_is_eof(self) -> None:
        assert _kinds("") == [TokenKind.EOF]

    def test_current_token_is_cached(self) -> None:
        lexer = Lexer.from_string("a b")
        first = lexer.current_token()
        assert lexer.current_token() is first
        assert lexer.produced == 1

    def test_next_token_moves_on(self) -> None:
        lexer = Lexer.from_string("a b")
        assert lexer.current_token().text == "a"
        assert lexer.next_token().kind is TokenKind.WHITESPACE
        assert lexer.next_token().text == "b"
        assert lexer.next_token().is_eof

    def test_eof_repeats(self) -> None:
        lexer = Lexer.from_string("a")
        lexer.next_token()
        assert lexer.next_token().is_eof
        assert lexer.next_token().is_eof

    def test_iteration_stops_after_eof(self) -> None:
        tokens = _tokens("a")
        assert tokens[-1].is_eof
        assert len(tokens) == 2

    def test_texts_reproduce_plain_input(self) -> None:
        css = "a, b { c: d; }"
        assert "".join(str(t) for t in _tokens(css)[:-1]) == css

    @pytest.mark.parametrize("css", ["margin", "-x-y", "12", "0.5", ";", "{", ")"])
    def test_token_text_lexes_to_same_token(self, css: str) -> None:
        token = _tokens(css)[0]
        again = _tokens(token.text)[0]
        assert (again.kind, again.value) == (token.kind, token.value)


# ---------------------------------------------------------------------------
# Comments and whitespace
# ---------------------------------------------------------------------------


class TestCommentsAndWhitespace:
    def test_whitespace_run_is_one_token(self) -> None:
        tokens = _tokens(" \t\n a")
        assert tokens[0] == Token(TokenKind.WHITESPACE, " \t\n ")
        assert tokens[1] == Token(TokenKind.IDENTIFIER, "a")

    def test_comment_skipped(self) -> None:
        assert _tokens("/* note */a")[0] == Token(TokenKind.IDENTIFIER, "a")

    def test_comment_text_yields_no_token(self) -> None:
        assert _tokens("/* comment */ a") == [
            Token(TokenKind.WHITESPACE, " "),
            Token(TokenKind.IDENTIFIER, "a"),
            Token.eof(),
        ]

    def test_comment_between_identifiers(self) -> None:
        assert [t.text for t in _tokens("a/* x */b")] == ["a", "b", ""]

    def test_consecutive_comments(self) -> None:
        assert _kinds("/* a *//* b */c") == [TokenKind.IDENTIFIER, TokenKind.EOF]

    def test_multiline_comment(self) -> None:
        assert _kinds("/* one\ntwo */x") == [TokenKind.IDENTIFIER, TokenKind.EOF]

    def test_unterminated_comment_ends_input(self) -> None:
        assert _kinds("a /* never closed") == [
            TokenKind.IDENTIFIER,
            TokenKind.WHITESPACE,
            TokenKind.EOF,
        ]

    def test_lone_slash_is_error(self) -> None:
        token = _tokens("/")[0]
        assert token.is_error
        assert token.error == UnexpectedToken(found="/")


# ---------------------------------------------------------------------------
# Names, functions and urls
# ---------------------------------------------------------------------------


class TestNames:
    @pytest.mark.parametrize("name", ["color", "h1", "_private", "-webkit-box", "--var", "font-size"])
    def test_identifier(self, name: str) -> None:
        assert _tokens(name)[0] == Token(TokenKind.IDENTIFIER, name)

    def test_escape_kept_verbatim(self) -> None:
        assert _tokens("a\\:b")[0] == Token(TokenKind.IDENTIFIER, "a\\:b")

    def test_minus_before_digit_is_not_a_name(self) -> None:
        tokens = _tokens("-5")
        assert tokens[0].is_error
        assert tokens[1] == Token(TokenKind.INTEGER, "5", 5)

    def test_function(self) -> None:
        tokens = _tokens("rgb(1)")
        assert tokens[0] == Token(TokenKind.FUNCTION, "rgb")
        assert tokens[1] == Token(TokenKind.INTEGER, "1", 1)
        assert tokens[2].kind is TokenKind.RIGHT_PAREN

    def test_url(self) -> None:
        assert _tokens("url(img/a.png)")[0] == Token(TokenKind.URL, "img/a.png")

    def test_url_is_case_insensitive(self) -> None:
        assert _tokens("URL(a)")[0] == Token(TokenKind.URL, "a")

    def test_url_surrounding_whitespace_dropped(self) -> None:
        assert _kinds("url(  a.png  )") == [TokenKind.URL, TokenKind.EOF]
        assert _tokens("url(  a.png  )")[0].text == "a.png"

    def test_quoted_url_is_function(self) -> None:
        assert _kinds("url('a.png')") == [
            TokenKind.FUNCTION,
            TokenKind.STRING,
            TokenKind.RIGHT_PAREN,
            TokenKind.EOF,
        ]

    def test_quoted_url_keeps_one_whitespace(self) -> None:
        assert _kinds("url(   \"a\")")[:3] == [
            TokenKind.FUNCTION,
            TokenKind.WHITESPACE,
            TokenKind.STRING,
        ]

    def test_bad_url_with_inner_whitespace(self) -> None:
        tokens = _tokens("url(a b) c")
        assert tokens[0] == Token(TokenKind.BAD_URL, "a")
        assert tokens[1].kind is TokenKind.WHITESPACE
        assert tokens[2] == Token(TokenKind.IDENTIFIER, "c")

    def test_bad_url_with_quote(self) -> None:
        assert _kinds("url(a'b)") == [TokenKind.BAD_URL, TokenKind.EOF]

    def test_unterminated_url(self) -> None:
        assert _tokens("url(a")[0] == Token(TokenKind.URL, "a")


# ---------------------------------------------------------------------------
# Strings
# ---------------------------------------------------------------------------


class TestStrings:
    def test_double_quoted(self) -> None:
        assert _tokens('"hello"')[0] == Token(TokenKind.STRING, "hello")

    def test_single_quoted(self) -> None:
        assert _tokens("'hello'")[0] == Token(TokenKind.STRING, "hello")

    def test_other_quote_inside(self) -> None:
        assert _tokens("\"it's\"")[0].text == "it's"

    def test_escape_kept_verbatim(self) -> None:
        assert _tokens(r'"a\"b"')[0].text == r"a\"b"

    def test_unterminated_at_eof(self) -> None:
        tokens = _tokens('"abc')
        assert tokens[0].is_error
        assert tokens[0].error == UnexpectedToken(found="EOF", expected='"')
        assert tokens[0].text == '"abc'
        assert tokens[1].is_eof

    def test_unescaped_newline(self) -> None:
        tokens = _tokens("'ab\ncd'")
        assert tokens[0].error == UnexpectedToken(found="\\n", expected="'")
        assert tokens[1] == Token(TokenKind.WHITESPACE, "\n")
        assert tokens[2] == Token(TokenKind.IDENTIFIER, "cd")


# ---------------------------------------------------------------------------
# Numbers
# ---------------------------------------------------------------------------


class TestNumbers:
    def test_integer(self) -> None:
        assert _tokens("42")[0] == Token(TokenKind.INTEGER, "42", 42)

    def test_float(self) -> None:
        assert _tokens("3.25")[0] == Token(TokenKind.FLOAT, "3.25", 3.25)

    def test_trailing_dot_is_not_part_of_number(self) -> None:
        tokens = _tokens("1.")
        assert tokens[0] == Token(TokenKind.INTEGER, "1", 1)
        assert tokens[1].error == UnexpectedToken(found=".")

    def test_unit_is_separate_identifier(self) -> None:
        tokens = _tokens("10px")
        assert tokens[0].value == 10
        assert tokens[1] == Token(TokenKind.IDENTIFIER, "px")

    def test_integer_too_long(self) -> None:
        token = _tokens("9" * 5000)[0]
        assert token.is_error
        assert isinstance(token.error, InvalidNumber)

    def test_float_out_of_range(self) -> None:
        token = _tokens("1" + "0" * 400 + ".5")[0]
        assert token.is_error
        assert isinstance(token.error, InvalidNumber)


# ---------------------------------------------------------------------------
# Punctuation and unknown characters
# ---------------------------------------------------------------------------


class TestPunctuation:
    def test_all_punctuation(self) -> None:
        assert _kinds(",:;{}[]()") == [
            TokenKind.COMMA,
            TokenKind.COLON,
            TokenKind.SEMICOLON,
            TokenKind.LEFT_BRACE,
            TokenKind.RIGHT_BRACE,
            TokenKind.LEFT_BRACKET,
            TokenKind.RIGHT_BRACKET,
            TokenKind.LEFT_PAREN,
            TokenKind.RIGHT_PAREN,
            TokenKind.EOF,
        ]

    def test_unknown_character_is_consumed(self) -> None:
        tokens = _tokens("@a")
        assert tokens[0] == Token.from_error(UnexpectedToken(found="@"), "@")
        assert tokens[1] == Token(TokenKind.IDENTIFIER, "a")


# ---------------------------------------------------------------------------
# Resource handling
# ---------------------------------------------------------------------------


class TestContextManager:
    def test_closes_owned_source(self, tmp_path) -> None:
        path = tmp_path / "a.css"
        path.write_text("a b c")
        with Lexer(CharacterSource.from_path(path)) as lexer:
            assert lexer.current_token().text == "a"
        assert lexer.source._stream.closed
