# src/tau/tau_ast.py
#
# Nodes are compared and hashed by identity: the resolver keys its binding
# distances on the node objects themselves.

# Base classes
class Node:
    def __repr__(self):
        return f"{self.__class__.__name__}()"

    def __str__(self):
        return self.__repr__()


class Statement(Node): pass
class Expression(Node): pass


class Program(Node):
    def __init__(self):
        self.statements = []

    def __repr__(self):
        return f"Program(statements={len(self.statements)})"


# Statement Nodes
class ExpressionStatement(Statement):
    def __init__(self, expression):
        self.expression = expression

    def __repr__(self):
        return f"ExpressionStatement(expression={self.expression})"


class DebugStatement(Statement):
    """``debug expr`` prints the stringified value of ``expr``."""
    def __init__(self, value):
        self.value = value

    def __repr__(self):
        return f"DebugStatement(value={self.value})"


class LetStatement(Statement):
    def __init__(self, name, value=None):
        self.name = name    # Token
        self.value = value  # Expression or None

    def __repr__(self):
        return f"LetStatement(name={self.name.literal}, value={self.value})"


class BlockStatement(Statement):
    def __init__(self, statements=None):
        self.statements = statements if statements is not None else []

    def __repr__(self):
        return f"BlockStatement(statements={len(self.statements)})"


class IfStatement(Statement):
    def __init__(self, condition, consequence, alternative=None):
        self.condition = condition
        self.consequence = consequence
        self.alternative = alternative

    def __repr__(self):
        return f"IfStatement(condition={self.condition}, else={self.alternative is not None})"


class WhileStatement(Statement):
    def __init__(self, condition, body):
        self.condition = condition
        self.body = body

    def __repr__(self):
        return f"WhileStatement(condition={self.condition})"


class FunctionStatement(Statement):
    """Named function declaration: ``def name(params) do ... end``."""
    def __init__(self, name, function):
        self.name = name          # Token
        self.function = function  # FunctionLiteral

    def __repr__(self):
        return f"FunctionStatement(name={self.name.literal}, params={len(self.function.parameters)})"


class ReturnStatement(Statement):
    def __init__(self, keyword, return_value=None):
        self.keyword = keyword
        self.return_value = return_value

    def __repr__(self):
        return f"ReturnStatement(return_value={self.return_value})"


class ModuleStatement(Statement):
    def __init__(self, name, methods):
        self.name = name        # Token
        self.methods = methods  # list of FunctionStatement

    def __repr__(self):
        return f"ModuleStatement(name={self.name.literal}, methods={len(self.methods)})"


class MapValue(Statement):
    def __init__(self, name, value):
        self.name = name    # Token
        self.value = value  # Expression, evaluated on every property read

    def __repr__(self):
        return f"MapValue(name={self.name.literal}, value={self.value})"


class MapStatement(Statement):
    def __init__(self, name, values):
        self.name = name
        self.values = values  # list of MapValue

    def __repr__(self):
        return f"MapStatement(name={self.name.literal}, values={len(self.values)})"


class ImportStatement(Statement):
    def __init__(self, keyword, file_path):
        self.keyword = keyword
        self.file_path = file_path  # str

    def __repr__(self):
        return f"ImportStatement(file_path={self.file_path!r})"

    def __str__(self):
        return f'import "{self.file_path}"'


# Expression Nodes
class Literal(Expression):
    def __init__(self, value):
        self.value = value  # None, bool, float or str

    def __repr__(self):
        return f"Literal({self.value!r})"


class Variable(Expression):
    def __init__(self, name):
        self.name = name  # Token

    def __repr__(self):
        return f"Variable({self.name.literal})"


class Assign(Expression):
    def __init__(self, name, value):
        self.name = name
        self.value = value

    def __repr__(self):
        return f"Assign(name={self.name.literal}, value={self.value})"


class Set(Expression):
    """Property assignment ``target.name = value`` on a module instance."""
    def __init__(self, object, name, value):
        self.object = object
        self.name = name
        self.value = value

    def __repr__(self):
        return f"Set(object={self.object}, name={self.name.literal}, value={self.value})"


class Unary(Expression):
    def __init__(self, operator, right):
        self.operator = operator  # Token
        self.right = right

    def __repr__(self):
        return f"Unary({self.operator.literal}{self.right})"


class Binary(Expression):
    def __init__(self, left, operator, right):
        self.left = left
        self.operator = operator
        self.right = right

    def __repr__(self):
        return f"Binary({self.left} {self.operator.literal} {self.right})"


class Logical(Expression):
    def __init__(self, left, operator, right):
        self.left = left
        self.operator = operator
        self.right = right

    def __repr__(self):
        return f"Logical({self.left} {self.operator.literal} {self.right})"


class Grouping(Expression):
    def __init__(self, expression):
        self.expression = expression

    def __repr__(self):
        return f"Grouping({self.expression})"


class Call(Expression):
    def __init__(self, callee, paren, arguments):
        self.callee = callee
        self.paren = paren  # closing ')' token, used for error lines
        self.arguments = arguments

    def __repr__(self):
        return f"Call(callee={self.callee}, arguments={len(self.arguments)})"


class Get(Expression):
    def __init__(self, object, name):
        self.object = object
        self.name = name

    def __repr__(self):
        return f"Get({self.object}.{self.name.literal})"


class ArrayLiteral(Expression):
    def __init__(self, bracket, elements):
        self.bracket = bracket
        self.elements = elements

    def __repr__(self):
        return f"ArrayLiteral(elements={len(self.elements)})"


class FunctionLiteral(Expression):
    def __init__(self, keyword, parameters, body):
        self.keyword = keyword
        self.parameters = parameters  # list of Token
        self.body = body              # list of Statement

    def __repr__(self):
        params = ", ".join(p.literal for p in self.parameters)
        return f"FunctionLiteral(({params}), body={len(self.body)})"
