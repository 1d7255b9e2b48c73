"""Public graph-construction operators. Raw scalars are promoted to leaves."""
from .operation import Operation
from .value import Value


def _as_value(x):
    return x if isinstance(x, Value) else Value(x)


def add(a, b) -> Value:
    return Operation.ADD.forward((_as_value(a), _as_value(b)))


def sub(a, b) -> Value:
    return Operation.SUBTRACT.forward((_as_value(a), _as_value(b)))


def mul(a, b) -> Value:
    return Operation.MULTIPLY.forward((_as_value(a), _as_value(b)))


def div(a, b) -> Value:
    return Operation.DIVIDE.forward((_as_value(a), _as_value(b)))


def exp(x) -> Value:
    return Operation.EXP.forward((_as_value(x),))


def tanh(x) -> Value:
    return Operation.TANH.forward((_as_value(x),))
