# src/tau/lexer.py
from .tau_token import *
from .error_reporter import get_error_reporter, TauSyntaxError

_SINGLE_CHAR_TOKENS = {
    '(': LPAREN,
    ')': RPAREN,
    '{': LBRACE,
    '}': RBRACE,
    ',': COMMA,
    '.': DOT,
    ':': COLON,
    '@': AT,
    '+': PLUS,
    '-': MINUS,
    '*': STAR,
    '/': SLASH,
    '[': LBRACKET,
    ']': RBRACKET,
}

# Operators that may be followed by '=' to form a two-character token
_EQUALS_PAIRS = {
    '!': (BANG, NOT_EQ),
    '=': (ASSIGN, EQ),
    '>': (GT, GTE),
    '<': (LT, LTE),
}


class Lexer:
    def __init__(self, source_code, filename="<stdin>", reporter=None):
        self.input = source_code or ""
        self.position = 0
        self.read_position = 0
        self.ch = ""
        self.line = 1
        self.column = 0
        self.filename = filename
        self.errors = []

        self.error_reporter = reporter or get_error_reporter()
        self.error_reporter.register_source(filename, self.input)

        self.read_char()

    def read_char(self):
        if self.read_position >= len(self.input):
            self.ch = ""
        else:
            self.ch = self.input[self.read_position]

        if self.position < len(self.input) and self.input[self.position] == '\n' and self.read_position > 0:
            self.line += 1
            self.column = 1
        else:
            self.column += 1

        self.position = self.read_position
        self.read_position += 1

    def peek_char(self):
        if self.read_position >= len(self.input):
            return ""
        return self.input[self.read_position]

    def tokenize(self):
        """Scan the whole input and return the token list, ending with EOF."""
        tokens = []
        while True:
            tok = self.next_token()
            tokens.append(tok)
            if tok.type == EOF:
                return tokens

    def next_token(self):
        while True:
            self.skip_whitespace()
            if self.ch == '#':
                self.skip_comment()
                continue
            if self.ch == ';':
                self.read_char()
                continue
            break

        current_line = self.line
        current_column = self.column

        if self.ch == "":
            return Token(EOF, "", line=current_line, column=current_column)

        if self.ch in _EQUALS_PAIRS:
            single, double = _EQUALS_PAIRS[self.ch]
            if self.peek_char() == '=':
                ch = self.ch
                self.read_char()
                tok = Token(double, ch + self.ch, line=current_line, column=current_column)
            else:
                tok = Token(single, self.ch, line=current_line, column=current_column)
            self.read_char()
            return tok

        if self.ch in _SINGLE_CHAR_TOKENS:
            tok = Token(_SINGLE_CHAR_TOKENS[self.ch], self.ch, line=current_line, column=current_column)
            self.read_char()
            return tok

        if self.ch == '"':
            text = self.read_string()
            if text is None:
                return Token(EOF, "", line=self.line, column=self.column)
            return Token(STRING, f'"{text}"', value=text, line=current_line, column=current_column)

        if self.is_digit(self.ch):
            number_str = self.read_number()
            return Token(NUMBER, number_str, value=float(number_str), line=current_line, column=current_column)

        if self.is_letter(self.ch):
            ident = self.read_identifier()
            return Token(self.lookup_ident(ident), ident, line=current_line, column=current_column)

        # Unknown character: report it, skip it and keep scanning
        bad = self.ch
        self._error(f"Unexpected character '{bad}'.", current_line, current_column)
        self.read_char()
        return self.next_token()

    def _error(self, message, line, column, suggestion=None):
        error = self.error_reporter.report_error(
            TauSyntaxError,
            message,
            line=line,
            column=column,
            filename=self.filename,
            suggestion=suggestion,
        )
        self.errors.append(error)
        return error

    def skip_comment(self):
        while self.ch != '\n' and self.ch != "":
            self.read_char()

    def read_string(self):
        start_line = self.line
        start_column = self.column
        result = []
        while True:
            self.read_char()
            if self.ch == "":
                self._error("Unterminated string.", start_line, start_column,
                            suggestion='Add a closing quote " to terminate the string.')
                return None
            if self.ch == '"':
                break
            result.append(self.ch)
        # consume the closing quote
        self.read_char()
        return ''.join(result)

    def read_identifier(self):
        start_position = self.position
        while self.is_letter(self.ch) or self.is_digit(self.ch):
            self.read_char()
        return self.input[start_position:self.position]

    def read_number(self):
        start_position = self.position
        while self.is_digit(self.ch):
            self.read_char()

        # A fraction needs at least one digit after the dot, otherwise the dot
        # belongs to a property access.
        if self.ch == '.' and self.is_digit(self.peek_char()):
            self.read_char()
            while self.is_digit(self.ch):
                self.read_char()

        return self.input[start_position:self.position]

    def lookup_ident(self, ident):
        return KEYWORDS.get(ident, IDENT)

    def is_letter(self, char):
        return 'a' <= char <= 'z' or 'A' <= char <= 'Z' or char == '_'

    def is_digit(self, char):
        return '0' <= char <= '9'

    def skip_whitespace(self):
        while self.ch in [' ', '\t', '\n', '\r']:
            self.read_char()
