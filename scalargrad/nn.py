import logging
import random

from .errors import InputSizeError
from .value import Value, make_value

logger = logging.getLogger(__name__)


def _fmt(xs):
    return "[" + " ".join(f"{float(getattr(x, 'data', x)):.4f}" for x in xs) + "]"


# --- The Neural Network Architecture ---
class Neuron:
    def __init__(self, nin, layer_index=0, neuron_index=0, nonlin=True):
        # Initialize weights between -1 and 1, labelled for graph rendering
        prefix = f"L{layer_index}N{neuron_index}"
        self.w = [make_value(random.uniform(-1, 1), f"{prefix}W{k}") for k in range(nin)]
        self.b = make_value(0.0, f"{prefix}B")
        self.nonlin = nonlin

    def __call__(self, x):
        if len(x) != len(self.w):
            raise InputSizeError(
                f"input size {len(x)} does not match weight size {len(self.w)}"
            )
        # w*x + b, squashed by tanh unless this is a linear neuron
        act = sum((wi * xi for wi, xi in zip(self.w, x)), self.b)
        return act.tanh() if self.nonlin else act

    def parameters(self):
        # bias last
        return self.w + [self.b]


class Layer:
    def __init__(self, nin, nout, layer_index=0, nonlin=True):
        self.neurons = [Neuron(nin, layer_index, j, nonlin) for j in range(nout)]

    def forward(self, x):
        """Outputs of every neuron, always as a list."""
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("layer input: %s", _fmt(x))
        outs = [n(x) for n in self.neurons]
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("layer output: %s", _fmt(outs))
        return outs

    def __call__(self, x):
        outs = self.forward(x)
        return outs[0] if len(outs) == 1 else outs

    def parameters(self):
        return [p for n in self.neurons for p in n.parameters()]


class MLP:
    """A fully connected network of tanh layers."""

    def __init__(self, nin, nouts):
        sz = [nin] + list(nouts)
        self.layers = [Layer(sz[i], sz[i + 1], layer_index=i) for i in range(len(nouts))]
        self._params = [p for layer in self.layers for p in layer.parameters()]

    def __call__(self, x):
        for layer in self.layers:
            x = layer.forward(x)
        return x[0] if len(x) == 1 else x

    def parameters(self):
        return self._params


def squared_error_loss(predictions, targets) -> Value:
    """Sum of squared differences between predictions and targets."""
    if len(predictions) != len(targets):
        raise InputSizeError(
            f"{len(predictions)} predictions for {len(targets)} targets"
        )
    loss = Value(0.0)
    for ygt, yout in zip(targets, predictions):
        diff = yout - ygt
        loss = loss + diff * diff
    return loss
