# src/tau/object.py
import math

from .environment import Environment


class Object:
    def inspect(self):
        raise NotImplementedError("Subclasses must implement this method")

    def type(self):
        raise NotImplementedError("Subclasses must implement this method")

    def __str__(self):
        return self.inspect()


# ---- Plain values -----------------------------------------------------------------

class Nil(Object):
    def inspect(self): return "nil"
    def type(self): return "NIL"


class Boolean(Object):
    def __init__(self, value): self.value = value
    def inspect(self): return "true" if self.value else "false"
    def type(self): return "BOOLEAN"


class Number(Object):
    """Every number is a double; integral values print without a fraction."""

    def __init__(self, value): self.value = float(value)

    def inspect(self):
        value = self.value
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value.is_integer() and abs(value) < 1e16:
            return str(int(value))
        return repr(value)

    def type(self): return "NUMBER"


class String(Object):
    def __init__(self, value): self.value = value
    def inspect(self): return self.value
    def type(self): return "STRING"


# ---- Control values -----------------------------------------------------------------

class ReturnValue(Object):
    """Carries a ``return`` out of nested blocks up to the function call."""

    def __init__(self, value): self.value = value
    def inspect(self): return self.value.inspect()
    def type(self): return "RETURN_VALUE"


class EvaluationError(Object):
    """A runtime error travelling up the evaluator as a value.

    ``line`` may be left empty by native code; the evaluator fills it in from
    the call site before the error reaches the top level.
    """

    def __init__(self, message, line=None):
        self.message = message
        self.line = line

    def inspect(self): return f"ERROR: {self.message}"
    def type(self): return "ERROR"

    def __repr__(self):
        return f"EvaluationError({self.message!r}, line={self.line})"


# ---- Callables --------------------------------------------------------------------

class Callable(Object):
    """Anything that can appear before ``(...)``: functions, modules, natives."""

    def arity(self):
        raise NotImplementedError

    def call(self, evaluator, arguments):
        raise NotImplementedError


class Function(Callable):
    def __init__(self, name, declaration, closure):
        self.name = name                # str or None for function literals
        self.declaration = declaration  # tau_ast.FunctionLiteral
        self.closure = closure          # Environment active at definition

    def arity(self):
        return len(self.declaration.parameters)

    def call(self, evaluator, arguments):
        environment = Environment(outer=self.closure)
        for param, argument in zip(self.declaration.parameters, arguments):
            environment.define(param.literal, argument)

        result = evaluator.execute_block(self.declaration.body, environment)
        if isinstance(result, ReturnValue):
            return result.value
        if isinstance(result, EvaluationError):
            return result
        return NIL

    def inspect(self):
        return f"<fn {self.name}>" if self.name else "<fn>"

    def type(self): return "FUNCTION"


class Builtin(Callable):
    """A host function. ``fn`` receives the evaluated arguments positionally."""

    def __init__(self, fn, name="", arity=0):
        self.fn = fn
        self.name = name
        self._arity = arity

    def arity(self):
        return self._arity

    def call(self, evaluator, arguments):
        return self.fn(*arguments)

    def inspect(self):
        return f"<native fn {self.name}>"

    def type(self): return "BUILTIN"


class Module(Callable):
    """A named method table. Calling it makes a fresh, field-less instance."""

    def __init__(self, name, methods):
        self.name = name
        self.methods = methods  # dict name -> Function

    def find_method(self, name):
        return self.methods.get(name)

    def arity(self):
        return 0

    def call(self, evaluator, arguments):
        return ModuleInstance(self)

    def inspect(self): return self.name
    def type(self): return "MODULE"


# ---- Instances --------------------------------------------------------------------

class ModuleInstance(Object):
    def __init__(self, module):
        self.module = module
        self.fields = {}

    def get(self, name):
        """Field first, then method; None when neither exists."""
        if name in self.fields:
            return self.fields[name]
        return self.module.find_method(name)

    def set(self, name, value):
        self.fields[name] = value
        return value

    def inspect(self): return f"{self.module.name} instance"
    def type(self): return "MODULE_INSTANCE"


class MapInstance(Object):
    """A record whose members are expressions, evaluated again on every read."""

    def __init__(self, name, values):
        self.name = name
        self.values = values  # dict name -> tau_ast.MapValue

    def get(self, name):
        map_value = self.values.get(name)
        if map_value is None:
            return None
        return map_value.value

    def inspect(self): return f"<map {self.name}>"
    def type(self): return "MAP"


class NativeObject(Object):
    """Host-provided object exposing properties by name (IO, System, arrays...).

    Unlike a ModuleInstance it has no Module behind it; each subclass answers
    property reads itself.
    """

    name = "native"

    def get_property(self, name):
        """Return the property value, or an EvaluationError when unknown."""
        raise NotImplementedError

    def inspect(self): return f"<native {self.name}>"
    def type(self): return "NATIVE"


class Array(NativeObject):
    name = "Array"

    def __init__(self, elements):
        self.elements = elements

    def _index(self, index):
        if not isinstance(index, Number) or not math.isfinite(index.value):
            return EvaluationError("Array index must be a number.")
        i = int(index.value)
        if i < 0 or i >= len(self.elements):
            return EvaluationError("Index out of range.")
        return i

    def get_property(self, name):
        if name == "length":
            return Number(len(self.elements))

        if name == "get":
            def _get(index):
                i = self._index(index)
                if isinstance(i, EvaluationError):
                    return i
                return self.elements[i]
            return Builtin(_get, "get", 1)

        if name == "set":
            def _set(index, value):
                i = self._index(index)
                if isinstance(i, EvaluationError):
                    return i
                self.elements[i] = value
                return NIL
            return Builtin(_set, "set", 2)

        if name == "remove":
            def _remove(index):
                i = self._index(index)
                if isinstance(i, EvaluationError):
                    return i
                del self.elements[i]
                return NIL
            return Builtin(_remove, "remove", 1)

        return EvaluationError(f"Could not find property '{name}'.")

    def inspect(self):
        elements_str = ", ".join(el.inspect() for el in self.elements)
        return f"[{elements_str}]"

    def type(self): return "ARRAY"


NIL = Nil()
TRUE = Boolean(True)
FALSE = Boolean(False)
