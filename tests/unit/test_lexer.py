"""Scanner behaviour: token kinds, positions, comments and lexical errors."""

from tau.lexer import Lexer
from tau.tau_token import (
    LET, IDENT, ASSIGN, NUMBER, STRING, GT, GTE, LT, LTE, EQ, NOT_EQ, BANG,
    DEBUG, DO, END, AT, NONE, EOF,
)


def _types(source, reporter):
    return [tok.type for tok in Lexer(source, reporter=reporter).tokenize()]


def test_let_statement_tokens(reporter):
    lexer = Lexer("let answer = 42", reporter=reporter)
    tokens = lexer.tokenize()

    assert [t.type for t in tokens] == [LET, IDENT, ASSIGN, NUMBER, EOF]
    assert tokens[1].literal == "answer"
    assert tokens[3].value == 42.0


def test_comparison_operators_are_distinct(reporter):
    assert _types("> >= < <= == != !", reporter) == [GT, GTE, LT, LTE, EQ, NOT_EQ, BANG, EOF]


def test_string_literal_keeps_raw_text(reporter):
    tokens = Lexer('"hello world"', reporter=reporter).tokenize()
    assert tokens[0].type == STRING
    assert tokens[0].value == "hello world"


def test_number_followed_by_dot_is_property_access(reporter):
    tokens = Lexer("1.5 2.length", reporter=reporter).tokenize()
    assert tokens[0].value == 1.5
    assert tokens[1].value == 2.0
    assert tokens[2].literal == "."
    assert tokens[3].literal == "length"


def test_hash_comment_and_semicolons_are_skipped(reporter):
    assert _types("debug 1; # trailing comment\ndo end", reporter) == [DEBUG, NUMBER, DO, END, EOF]


def test_keywords_and_symbols(reporter):
    assert _types("none @name", reporter) == [NONE, AT, IDENT, EOF]


def test_line_numbers_advance_on_newlines(reporter):
    tokens = Lexer("let a\n\nlet b", reporter=reporter).tokenize()
    assert [t.line for t in tokens[:4]] == [1, 1, 3, 3]


def test_unterminated_string_is_reported(reporter):
    lexer = Lexer('debug "oops', reporter=reporter)
    tokens = lexer.tokenize()

    assert tokens[-1].type == EOF
    assert len(lexer.errors) == 1
    assert lexer.errors[0].message == "Unterminated string."
    assert reporter.had_error


def test_unexpected_character_does_not_stop_scanning(reporter):
    lexer = Lexer("let $ x", reporter=reporter)
    assert [t.type for t in lexer.tokenize()] == [LET, IDENT, EOF]
    assert lexer.errors[0].message == "Unexpected character '$'."
