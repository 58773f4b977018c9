# src/tau/parser/parser.py
import logging

from ..tau_token import *
from ..lexer import Lexer
from ..tau_ast import *
from ..config import config
from ..error_reporter import TauSyntaxError

logger = logging.getLogger(__name__)

# Precedence constants
LOWEST, ASSIGN_PREC, OR_PREC, AND_PREC, EQUALS, LESSGREATER, SUM, PRODUCT, PREFIX, CALL = range(1, 11)

precedences = {
    ASSIGN: ASSIGN_PREC,
    OR: OR_PREC,
    AND: AND_PREC,
    EQ: EQUALS, NOT_EQ: EQUALS,
    LT: LESSGREATER, GT: LESSGREATER, LTE: LESSGREATER, GTE: LESSGREATER,
    PLUS: SUM, MINUS: SUM,
    SLASH: PRODUCT, STAR: PRODUCT,
    LPAREN: CALL,
    DOT: CALL,
}

# Tokens that start a new statement; error recovery stops in front of them
_SYNC_TOKENS = {DEF, MODULE, MAP, LET, IF, WHILE, RETURN, IMPORT, DEBUG, DO, END}


class ParseError(Exception):
    """Unwinds the parser to the enclosing statement after an error was reported."""


class Parser:
    def __init__(self, lexer):
        self.lexer = lexer
        self.errors = []
        self.cur_token = None
        self.peek_token = None

        self.prefix_parse_fns = {
            IDENT: self.parse_variable,
            NUMBER: self.parse_literal,
            STRING: self.parse_literal,
            TRUE: self.parse_boolean,
            FALSE: self.parse_boolean,
            NONE: self.parse_none,
            BANG: self.parse_unary_expression,
            MINUS: self.parse_unary_expression,
            LPAREN: self.parse_grouped_expression,
            LBRACKET: self.parse_array_literal,
            AT: self.parse_symbol,
            DEF: self.parse_function_literal,
        }
        self.infix_parse_fns = {
            PLUS: self.parse_binary_expression,
            MINUS: self.parse_binary_expression,
            SLASH: self.parse_binary_expression,
            STAR: self.parse_binary_expression,
            EQ: self.parse_binary_expression,
            NOT_EQ: self.parse_binary_expression,
            LT: self.parse_binary_expression,
            GT: self.parse_binary_expression,
            LTE: self.parse_binary_expression,
            GTE: self.parse_binary_expression,
            AND: self.parse_logical_expression,
            OR: self.parse_logical_expression,
            ASSIGN: self.parse_assignment_expression,
            LPAREN: self.parse_call_expression,
            DOT: self.parse_get_expression,
        }
        self.next_token()
        self.next_token()

    @classmethod
    def from_source(cls, source, filename="<stdin>", reporter=None):
        return cls(Lexer(source, filename, reporter=reporter))

    def parse_program(self):
        program = Program()
        while not self.cur_token_is(EOF):
            stmt = self.parse_declaration()
            if stmt is not None:
                program.statements.append(stmt)
            self.next_token()
        logger.debug("parsed %d statements, %d errors", len(program.statements), len(self.errors))
        return program

    # === DECLARATIONS ===

    def parse_declaration(self):
        try:
            if self.cur_token_is(LET):
                return self.parse_let_statement()
            if self.cur_token_is(DEF) and self.peek_token_is(IDENT):
                self.next_token()
                return self.parse_function_statement("function")
            if self.cur_token_is(MODULE):
                return self.parse_module_statement()
            if self.cur_token_is(MAP):
                return self.parse_map_statement()
            return self.parse_statement()
        except ParseError:
            self.recover_to_next_statement()
            return None

    def parse_let_statement(self):
        self.expect_peek(IDENT, "Expect variable name.")
        name = self.cur_token
        value = None
        if self.peek_token_is(ASSIGN):
            self.next_token()
            self.next_token()
            value = self.parse_expression(LOWEST)
        return LetStatement(name=name, value=value)

    def parse_function_statement(self, kind):
        # cur_token is the function name
        name = self.cur_token
        return FunctionStatement(name=name, function=self.parse_function_body(kind, name))

    def parse_function_body(self, kind, keyword):
        self.expect_peek(LPAREN, f"Expect '(' after {kind} name.")
        parameters = []
        if self.peek_token_is(RPAREN):
            self.next_token()
        else:
            while True:
                if len(parameters) >= config.max_parameters:
                    self._error(self.peek_token, f"Cannot have more than {config.max_parameters} parameters.")
                self.expect_peek(IDENT, "Expect parameter name.")
                parameters.append(self.cur_token)
                if not self.peek_token_is(COMMA):
                    break
                self.next_token()
            self.expect_peek(RPAREN, "Expect ')' after parameters.")

        self.expect_peek(DO, f"Expect 'do' before {kind} body.")
        body = self.parse_block()
        return FunctionLiteral(keyword=keyword, parameters=parameters, body=body)

    def parse_module_statement(self):
        self.expect_peek(IDENT, "Expected module name.")
        name = self.cur_token
        self.expect_peek(DO, "Expected 'do' before module body.")
        self.next_token()

        methods = []
        while not self.cur_token_is(END) and not self.cur_token_is(EOF):
            # Methods are written like functions; the leading 'def' is optional
            if self.cur_token_is(DEF):
                self.next_token()
            if not self.cur_token_is(IDENT):
                raise self._error(self.cur_token, "Expect method name.")
            methods.append(self.parse_function_statement("method"))
            self.next_token()

        if not self.cur_token_is(END):
            raise self._error(self.cur_token, "Expect 'end' after module body.")
        return ModuleStatement(name=name, methods=methods)

    def parse_map_statement(self):
        self.expect_peek(IDENT, "Expect name of map.")
        name = self.cur_token
        self.expect_peek(DO, "Expected 'do' before map body.")
        self.next_token()

        values = []
        while not self.cur_token_is(END) and not self.cur_token_is(EOF):
            if not self.cur_token_is(IDENT):
                raise self._error(self.cur_token, "Expected map value name.")
            value_name = self.cur_token
            self.expect_peek(COLON, "Expect ':' after name.")
            self.next_token()
            values.append(MapValue(name=value_name, value=self.parse_expression(LOWEST)))
            self.next_token()

        if not self.cur_token_is(END):
            raise self._error(self.cur_token, "Expect 'end' after map body.")
        return MapStatement(name=name, values=values)

    # === STATEMENTS ===

    def parse_statement(self):
        if self.cur_token_is(DEBUG):
            return self.parse_debug_statement()
        if self.cur_token_is(DO):
            return BlockStatement(self.parse_block())
        if self.cur_token_is(IF):
            return self.parse_if_statement()
        if self.cur_token_is(WHILE):
            return self.parse_while_statement()
        if self.cur_token_is(RETURN):
            return self.parse_return_statement()
        if self.cur_token_is(IMPORT):
            return self.parse_import_statement()
        return self.parse_expression_statement()

    def parse_block(self):
        """Parse ``do ... end``; cur_token is DO on entry and END on exit."""
        statements = []
        self.next_token()
        while not self.cur_token_is(END) and not self.cur_token_is(EOF):
            stmt = self.parse_declaration()
            if stmt is not None:
                statements.append(stmt)
            self.next_token()

        if not self.cur_token_is(END):
            raise self._error(self.cur_token, "Expect 'end' after block.")
        return statements

    def parse_debug_statement(self):
        self.next_token()
        return DebugStatement(value=self.parse_expression(LOWEST))

    def parse_if_statement(self):
        self.expect_peek(LPAREN, "Expect '(' before condition.")
        self.next_token()
        condition = self.parse_expression(LOWEST)
        self.expect_peek(RPAREN, "Expect ')' after condition.")
        self.next_token()
        consequence = self.parse_statement()

        alternative = None
        if self.peek_token_is(ELSE):
            self.next_token()
            self.next_token()
            alternative = self.parse_statement()

        return IfStatement(condition=condition, consequence=consequence, alternative=alternative)

    def parse_while_statement(self):
        self.expect_peek(LPAREN, "Expect '(' after 'while'.")
        self.next_token()
        condition = self.parse_expression(LOWEST)
        self.expect_peek(RPAREN, "Expect ')' after condition.")
        self.next_token()
        body = self.parse_statement()
        return WhileStatement(condition=condition, body=body)

    def parse_return_statement(self):
        keyword = self.cur_token
        if self.peek_token_is(END) or self.peek_token_is(EOF):
            return ReturnStatement(keyword=keyword, return_value=None)
        self.next_token()
        return ReturnStatement(keyword=keyword, return_value=self.parse_expression(LOWEST))

    def parse_import_statement(self):
        keyword = self.cur_token
        self.next_token()
        expr = self.parse_expression(LOWEST)
        if isinstance(expr, Literal) and isinstance(expr.value, str):
            return ImportStatement(keyword=keyword, file_path=expr.value)
        self._error(keyword, "Cannot use non-strings in imports.")
        return None

    def parse_expression_statement(self):
        return ExpressionStatement(expression=self.parse_expression(LOWEST))

    def recover_to_next_statement(self):
        while not self.cur_token_is(EOF):
            if self.peek_token.type in _SYNC_TOKENS:
                return
            self.next_token()

    # === EXPRESSIONS ===

    def parse_expression(self, precedence):
        prefix = self.prefix_parse_fns.get(self.cur_token.type)
        if prefix is None:
            raise self._error(self.cur_token, "Expect expression.")
        left_exp = prefix()

        while precedence < self.peek_precedence():
            infix = self.infix_parse_fns.get(self.peek_token.type)
            if infix is None:
                return left_exp
            self.next_token()
            left_exp = infix(left_exp)

        return left_exp

    def parse_variable(self):
        return Variable(name=self.cur_token)

    def parse_literal(self):
        return Literal(value=self.cur_token.value)

    def parse_boolean(self):
        return Literal(value=self.cur_token_is(TRUE))

    def parse_none(self):
        return Literal(value=None)

    def parse_symbol(self):
        self.expect_peek(IDENT, "Expected identifier after '@'.")
        return Literal(value=self.cur_token.literal)

    def parse_unary_expression(self):
        operator = self.cur_token
        self.next_token()
        return Unary(operator=operator, right=self.parse_expression(PREFIX))

    def parse_binary_expression(self, left):
        operator = self.cur_token
        precedence = self.cur_precedence()
        self.next_token()
        return Binary(left=left, operator=operator, right=self.parse_expression(precedence))

    def parse_logical_expression(self, left):
        operator = self.cur_token
        precedence = self.cur_precedence()
        self.next_token()
        return Logical(left=left, operator=operator, right=self.parse_expression(precedence))

    def parse_assignment_expression(self, left):
        equals = self.cur_token
        self.next_token()
        # Right associative: a = b = c
        value = self.parse_expression(ASSIGN_PREC - 1)
        if isinstance(left, Variable):
            return Assign(name=left.name, value=value)
        if isinstance(left, Get):
            return Set(object=left.object, name=left.name, value=value)
        self._error(equals, "Invalid assignment target.")
        return left

    def parse_grouped_expression(self):
        self.next_token()
        expr = self.parse_expression(LOWEST)
        self.expect_peek(RPAREN, "Expect ')' after grouping expression.")
        return Grouping(expression=expr)

    def parse_array_literal(self):
        bracket = self.cur_token
        elements = self.parse_expression_list(RBRACKET, "Expect ']' after list.")
        return ArrayLiteral(bracket=bracket, elements=elements)

    def parse_function_literal(self):
        keyword = self.cur_token
        return self.parse_function_body("function", keyword)

    def parse_call_expression(self, callee):
        arguments = self.parse_expression_list(RPAREN, "Expect ')' after arguments.")
        if len(arguments) > config.max_arguments:
            self._error(self.cur_token, f"Can't have more than {config.max_arguments} arguments on a call.")
        return Call(callee=callee, paren=self.cur_token, arguments=arguments)

    def parse_get_expression(self, left):
        self.expect_peek(IDENT, "Expect property name after '.'.")
        return Get(object=left, name=self.cur_token)

    def parse_expression_list(self, end, message):
        elements = []
        if self.peek_token_is(end):
            self.next_token()
            return elements

        self.next_token()
        elements.append(self.parse_expression(LOWEST))

        while self.peek_token_is(COMMA):
            self.next_token()
            self.next_token()
            elements.append(self.parse_expression(LOWEST))

        self.expect_peek(end, message)
        return elements

    # === TOKEN UTILITIES ===

    def _error(self, token, message):
        error = self.lexer.error_reporter.report_error(
            TauSyntaxError,
            message,
            line=token.line,
            column=token.column,
            filename=self.lexer.filename,
        )
        self.errors.append(error)
        return ParseError(message)

    def next_token(self):
        self.cur_token = self.peek_token
        self.peek_token = self.lexer.next_token()

    def cur_token_is(self, t):
        return self.cur_token.type == t

    def peek_token_is(self, t):
        return self.peek_token.type == t

    def expect_peek(self, t, message):
        if self.peek_token_is(t):
            self.next_token()
            return True
        raise self._error(self.peek_token, message)

    def peek_precedence(self):
        return precedences.get(self.peek_token.type, LOWEST)

    def cur_precedence(self):
        return precedences.get(self.cur_token.type, LOWEST)
