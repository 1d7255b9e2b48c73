import numpy as np
import pytest

from scalargrad import NonFiniteValueError, Value, make_value


def test_leaf_defaults():
    a = make_value(3.0, "a")
    assert a.data == 3.0
    assert a.grad == 0.0, "New nodes must start with zero gradient."
    assert a.label == "a"
    assert a.dependencies == ()
    assert a.operation is None
    assert a.is_leaf


def test_data_is_single_precision():
    a = make_value(0.1)
    assert isinstance(a.data, np.float32)
    assert isinstance(a.grad, np.float32)
    assert a.data == np.float32(0.1)


def test_derived_nodes_start_with_zero_grad():
    a = make_value(2.0)
    b = make_value(5.0)
    for out in (a + b, a - b, a * b, a / b, a.exp(), a.tanh()):
        assert out.grad == 0.0
        assert not out.is_leaf


def test_non_finite_leaf_rejected():
    with pytest.raises(NonFiniteValueError):
        make_value(float("nan"))
    with pytest.raises(NonFiniteValueError):
        make_value(float("inf"))


def test_non_numeric_rejected():
    with pytest.raises(TypeError):
        make_value("3.0")
    with pytest.raises(TypeError):
        make_value(True)


def test_set_data():
    a = make_value(1.0)
    a.set_data(4.5)
    assert a.data == 4.5
    a.data = -2
    assert a.data == -2.0
    with pytest.raises(NonFiniteValueError):
        a.set_data(float("nan"))
    assert a.data == -2.0


def test_add_grad_accumulates_and_set_grad_overwrites():
    a = make_value(1.0)
    a.add_grad(0.5)
    a.add_grad(0.25)
    assert a.grad == 0.75
    a.set_grad(0.0)
    assert a.grad == 0.0
    a.grad = 2.0
    assert a.grad == 2.0


def test_set_label():
    a = make_value(1.0)
    assert a.label is None
    a.set_label("weight")
    assert a.label == "weight"
    assert "weight" in repr(a)


def test_nodes_keyed_by_identity():
    a = make_value(1.0)
    b = make_value(1.0)
    seen = {a: "a", b: "b"}
    assert len(seen) == 2
    assert seen[a] == "a"


def test_negation():
    a = make_value(3.0)
    b = -a
    assert b.data == -3.0
    b.backward()
    assert a.grad == -1.0


def test_reflected_operators():
    a = make_value(2.0)
    c = 1 - a
    assert c.data == -1.0
    c.backward()
    assert a.grad == -1.0

    a = make_value(2.0)
    d = 1 / a
    assert d.data == 0.5
    d.backward()
    assert a.grad == -0.25

    a = make_value(2.0)
    e = 3 + a * 4
    assert e.data == 11.0
    e.backward()
    assert a.grad == 4.0


def test_constructor_keeps_operands_in_order():
    a = make_value(1.0)
    b = make_value(2.0)
    c = Value(3.0)
    out = b - a
    assert out.dependencies[0] is b
    assert out.dependencies[1] is a
    assert c.is_leaf
