# src/tau/evaluator/utils.py
import logging
import math

from ..config import config
from ..object import (
    EvaluationError, Nil, Boolean, Number, String, NIL, TRUE, FALSE
)

logger = logging.getLogger("tau.evaluator")


def debug_log(label, detail=None):
    if not config.enable_debug_logs:
        return
    if detail is None:
        logger.debug("%s", label)
    else:
        logger.debug("%s: %s", label, detail)


def is_error(obj):
    return isinstance(obj, EvaluationError)


def is_truthy(obj):
    """nil and false are falsy; everything else, zero and "" included, is truthy."""
    if obj is NIL or isinstance(obj, Nil):
        return False
    if isinstance(obj, Boolean):
        return obj.value
    return True


def to_boolean(value):
    return TRUE if value else FALSE


def values_equal(left, right):
    if isinstance(left, Nil) and isinstance(right, Nil):
        return True
    if isinstance(left, Nil) or isinstance(right, Nil):
        return False
    # Values of different kinds are never equal: true is not 1
    if type(left) is not type(right):
        return False
    if isinstance(left, Number):
        return _numbers_equal(left.value, right.value)
    if isinstance(left, (Boolean, String)):
        return left.value == right.value
    return left is right


def _numbers_equal(a, b):
    # Boxed-double equality: NaN equals NaN, 0.0 and -0.0 differ
    if math.isnan(a) or math.isnan(b):
        return math.isnan(a) and math.isnan(b)
    if a == 0.0 and b == 0.0:
        return math.copysign(1.0, a) == math.copysign(1.0, b)
    return a == b


def stringify(obj):
    if obj is None:
        return "nil"
    return obj.inspect()
