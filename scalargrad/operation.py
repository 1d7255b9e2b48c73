"""
The closed set of differentiable scalar operations.

Each member knows how to compute its output from its inputs (forward) and
how to push gradient into its inputs once the output's gradient is final
(backward). Members carry no per-call state, so the enum values themselves
are the shared operation instances.
"""
import enum

import numpy as np

from .errors import ArityMismatchError, DivisionByZeroError, NonFiniteValueError
from .value import Value


def _tanh(x):
    # (e^{2x} - 1) / (e^{2x} + 1), written in terms of e^{-2|x|} so it saturates at +/-1
    e = np.exp(np.float32(-2.0) * np.abs(x))
    return np.copysign((np.float32(1.0) - e) / (np.float32(1.0) + e), x)


class Operation(enum.Enum):
    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"
    EXP = "exp"
    TANH = "tanh"

    def __str__(self):
        return self.value

    @property
    def symbol(self) -> str:
        """Display tag used in reprs and rendered graphs."""
        return self.value

    @property
    def arity(self) -> int:
        return 1 if self in (Operation.EXP, Operation.TANH) else 2

    def _check_arity(self, inputs):
        if len(inputs) != self.arity:
            raise ArityMismatchError(
                f"{self.name} requires exactly {self.arity} input(s), got {len(inputs)}"
            )

    def forward(self, inputs) -> Value:
        """Compute a new node from ``inputs``; its dependencies are ``inputs`` in order."""
        inputs = tuple(inputs)
        self._check_arity(inputs)
        for v in inputs:
            if not np.isfinite(v.data):
                raise NonFiniteValueError(f"{self.name} got a non-finite operand: {v!r}")

        x = inputs[0].data
        if self is Operation.ADD:
            result = x + inputs[1].data
        elif self is Operation.SUBTRACT:
            result = x - inputs[1].data
        elif self is Operation.MULTIPLY:
            result = x * inputs[1].data
        elif self is Operation.DIVIDE:
            y = inputs[1].data
            if y == 0:
                raise DivisionByZeroError(f"cannot divide {x} by zero")
            result = x / y
        elif self is Operation.EXP:
            with np.errstate(over="ignore"):
                result = np.exp(x)
        else:
            result = _tanh(x)
        return Value(result, inputs, self)

    def backward(self, inputs, out):
        """Accumulate ``out.grad`` into ``inputs``; ``out.grad`` must already be final."""
        inputs = tuple(inputs)
        self._check_arity(inputs)
        g = out.grad

        if self is Operation.ADD:
            inputs[0].add_grad(g)
            inputs[1].add_grad(g)
        elif self is Operation.SUBTRACT:
            inputs[0].add_grad(g)
            inputs[1].add_grad(-g)
        elif self is Operation.MULTIPLY:
            # product rule
            inputs[0].add_grad(inputs[1].data * g)
            inputs[1].add_grad(inputs[0].data * g)
        elif self is Operation.DIVIDE:
            # d(a/b)/db = -(a/b) / b
            b = inputs[1].data
            inputs[0].add_grad((np.float32(1.0) / b) * g)
            inputs[1].add_grad(-(out.data / b) * g)
        elif self is Operation.EXP:
            inputs[0].add_grad(out.data * g)
        else:
            t = out.data
            inputs[0].add_grad((np.float32(1.0) - t * t) * g)
