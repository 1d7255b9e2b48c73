import numbers

import numpy as np

from .errors import NonFiniteValueError


def _as_float32(x, what="data") -> np.float32:
    if isinstance(x, bool) or not isinstance(x, numbers.Real):
        raise TypeError(f"{what} must be a real scalar, got {type(x).__name__}")
    return np.float32(x)


def _finite(x, what="data") -> np.float32:
    x = _as_float32(x, what)
    if not np.isfinite(x):
        raise NonFiniteValueError(f"{what} must be finite, got {x}")
    return x


# --- The Autograd Engine (Scalar) ---
class Value:
    """
    A scalar node in the computation graph.

    Leaves (constants and trainable parameters) have no operation and no
    dependencies. Derived nodes are created by an Operation's forward step and
    keep the operands they were computed from, in operand order, so the same
    upstream node may appear more than once (``a + a``).

    ``grad`` holds the derivative of the last root ``backward()`` ran from
    with respect to this node. Contributions are accumulated with
    ``add_grad``; ``set_grad`` is only for resets and the root seed.
    """

    def __init__(self, data: float, _children: tuple = (), _op=None, label=None):
        # Derived nodes may overflow to inf (exp of a large input); leaves may not.
        self._data = _finite(data) if _op is None else _as_float32(data)
        self._grad = np.float32(0.0)
        self._prev = tuple(_children)
        self._op = _op
        self._label = label

    def __repr__(self):
        if self._label is not None:
            return f"Value(data={self.data:.4f}, grad={self.grad:.4f}, label={self._label!r})"
        return f"Value(data={self.data:.4f}, grad={self.grad:.4f})"

    # --- accessors ---
    @property
    def data(self) -> np.float32:
        return self._data

    @data.setter
    def data(self, new_data):
        self.set_data(new_data)

    def set_data(self, new_data):
        self._data = _finite(new_data)

    @property
    def grad(self) -> np.float32:
        return self._grad

    @grad.setter
    def grad(self, new_grad):
        self.set_grad(new_grad)

    def set_grad(self, new_grad):
        self._grad = _as_float32(new_grad, "grad")

    def add_grad(self, increment):
        self._grad = np.float32(self._grad + _as_float32(increment, "grad"))

    @property
    def label(self):
        return self._label

    def set_label(self, new_label):
        self._label = new_label

    @property
    def dependencies(self) -> tuple:
        return self._prev

    @property
    def operation(self):
        return self._op

    @property
    def is_leaf(self) -> bool:
        return self._op is None

    # --- graph construction ---
    def __add__(self, other):
        from .ops import add
        return add(self, other)

    def __radd__(self, other):
        from .ops import add
        return add(other, self)

    def __sub__(self, other):
        from .ops import sub
        return sub(self, other)

    def __rsub__(self, other):
        from .ops import sub
        return sub(other, self)

    def __mul__(self, other):
        from .ops import mul
        return mul(self, other)

    def __rmul__(self, other):
        from .ops import mul
        return mul(other, self)

    def __truediv__(self, other):
        from .ops import div
        return div(self, other)

    def __rtruediv__(self, other):
        from .ops import div
        return div(other, self)

    def __neg__(self):
        return self * -1

    def exp(self):
        from .ops import exp
        return exp(self)

    def tanh(self):
        from .ops import tanh
        return tanh(self)

    # --- reverse pass ---
    def backward(self):
        """Run the reverse pass rooted here; afterwards every reachable node's
        grad is the derivative of this node with respect to it."""
        from .engine import backward
        backward(self)

    def zero_grad(self):
        from .engine import zero_grad
        zero_grad(self)


def make_value(x: float, label=None) -> Value:
    """Create a leaf node."""
    return Value(x, label=label)
