# src/tau/tau_token.py

# Special
ILLEGAL = "ILLEGAL"
EOF = "EOF"

# Identifiers & literals
IDENT = "IDENT"
NUMBER = "NUMBER"
STRING = "STRING"

# Operators
ASSIGN = "="
PLUS = "+"
MINUS = "-"
STAR = "*"
SLASH = "/"
BANG = "!"
EQ = "=="
NOT_EQ = "!="
LT = "<"
GT = ">"
LTE = "<="
GTE = ">="

# Delimiters
COMMA = ","
DOT = "."
COLON = ":"
AT = "@"
LPAREN = "("
RPAREN = ")"
LBRACE = "{"
RBRACE = "}"
LBRACKET = "["
RBRACKET = "]"

# Keywords
AND = "AND"
OR = "OR"
TRUE = "TRUE"
FALSE = "FALSE"
NONE = "NONE"
LET = "LET"
IF = "IF"
ELSE = "ELSE"
WHILE = "WHILE"
DEF = "DEF"
MODULE = "MODULE"
TYPE = "TYPE"
MAP = "MAP"
DEL = "DEL"
RETURN = "RETURN"
DEBUG = "DEBUG"
DO = "DO"
END = "END"
MATCH = "MATCH"
CASE = "CASE"
DEFAULT = "DEFAULT"
IMPORT = "IMPORT"
ENUM = "ENUM"

KEYWORDS = {
    "and": AND,
    "or": OR,
    "true": TRUE,
    "false": FALSE,
    "let": LET,
    "if": IF,
    "else": ELSE,
    "while": WHILE,
    "def": DEF,
    "module": MODULE,
    "type": TYPE,
    "map": MAP,
    "del": DEL,
    "none": NONE,
    "return": RETURN,
    "debug": DEBUG,
    "do": DO,
    "end": END,
    "match": MATCH,
    "case": CASE,
    "default": DEFAULT,
    "import": IMPORT,
    "enum": ENUM,
}


class Token:
    def __init__(self, type, literal, value=None, line=1, column=1):
        self.type = type
        self.literal = literal
        self.value = value
        self.line = line
        self.column = column

    def __repr__(self):
        return f"Token({self.type}, {self.literal!r}, line={self.line})"
