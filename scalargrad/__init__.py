"""Reverse-mode automatic differentiation over scalar values."""

from .errors import (
    AutogradError,
    ArityMismatchError,
    CycleDetectedError,
    DivisionByZeroError,
    InputSizeError,
    NonFiniteValueError,
    RenderError,
)
from .value import Value, make_value
from .operation import Operation
from .ops import add, sub, mul, div, exp, tanh
from .engine import backward, consumer_counts, topological_order, zero_grad
from .nn import Neuron, Layer, MLP, squared_error_loss
from .optim import SGD
from .config import TrainingConfig

__all__ = [
    # Errors
    "AutogradError",
    "ArityMismatchError",
    "CycleDetectedError",
    "DivisionByZeroError",
    "InputSizeError",
    "NonFiniteValueError",
    "RenderError",
    # Core
    "Value",
    "make_value",
    "Operation",
    "add", "sub", "mul", "div", "exp", "tanh",
    "backward",
    "consumer_counts",
    "topological_order",
    "zero_grad",
    # Network
    "Neuron",
    "Layer",
    "MLP",
    "squared_error_loss",
    "SGD",
    "TrainingConfig",
]
