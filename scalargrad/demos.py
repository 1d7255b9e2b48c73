"""Small labelled graphs used by the command line demo."""
from .value import make_value


def single_neuron():
    """tanh(x1*w1 + x2*w2 + b) with the bias picked so the output is 1/sqrt(2)."""
    x1 = make_value(2.0, "x1")
    x2 = make_value(0.0, "x2")
    w1 = make_value(-3.0, "w1")
    w2 = make_value(1.0, "w2")
    b = make_value(6.88137358, "b")

    x1w1 = x1 * w1
    x1w1.set_label("x1*w1")
    x2w2 = x2 * w2
    x2w2.set_label("x2*w2")
    x1w1x2w2 = x1w1 + x2w2
    x1w1x2w2.set_label("x1*w1 + x2*w2")
    n = x1w1x2w2 + b
    n.set_label("n")
    out = n.tanh()
    out.set_label("out")
    return out


def single_neuron_composed():
    """The same neuron with tanh spelled out as (e^2n - 1) / (e^2n + 1)."""
    x1 = make_value(2.0, "x1")
    x2 = make_value(0.0, "x2")
    w1 = make_value(-3.0, "w1")
    w2 = make_value(1.0, "w2")
    b = make_value(6.88137358, "b")

    n = x1 * w1 + x2 * w2 + b
    n.set_label("n")
    e = (2 * n).exp()
    e.set_label("e")
    out = (e - 1) / (e + 1)
    out.set_label("out")
    return out


def reused_dependency():
    """b = a + a; a.grad is 2 after backward."""
    a = make_value(3.0, "a")
    b = a + a
    b.set_label("b = a + a")
    return b


def mixed():
    """f = (a*b) * (a+b) with a = -2, b = 3."""
    a = make_value(-2.0, "a")
    b = make_value(3.0, "b")
    d = a * b
    d.set_label("d")
    e = a + b
    e.set_label("e")
    f = d * e
    f.set_label("f")
    return f


DEMOS = {
    "neuron": single_neuron,
    "neuron-composed": single_neuron_composed,
    "reuse": reused_dependency,
    "mixed": mixed,
}
