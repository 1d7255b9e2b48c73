class AutogradError(Exception):
    """Base class for everything scalargrad raises on purpose."""


class ArityMismatchError(AutogradError, ValueError):
    """An operation got the wrong number of operands."""


class DivisionByZeroError(AutogradError, ZeroDivisionError):
    """Divide was asked to divide by exactly zero."""


class CycleDetectedError(AutogradError, RuntimeError):
    """The graph reachable from a root is not acyclic."""


class NonFiniteValueError(AutogradError, ValueError):
    """A node would hold, or an operation would read, NaN or inf."""


class InputSizeError(AutogradError, ValueError):
    """A neuron was called with the wrong number of inputs."""


class RenderError(AutogradError, RuntimeError):
    """The external graph renderer failed."""
