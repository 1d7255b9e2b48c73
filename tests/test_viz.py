import graphviz
import pytest

from scalargrad import RenderError, make_value
from scalargrad.demos import mixed, reused_dependency
from scalargrad.viz import draw_dot, to_dot, trace, write_dot_file, write_png


def test_trace_reused_dependency():
    b = reused_dependency()
    nodes, edges = trace(b)
    assert len(nodes) == 2
    assert len(edges) == 2, "Each operand slot gets its own edge."
    a = b.dependencies[0]
    assert edges == [(a, b), (a, b)]


def test_trace_mixed():
    f = mixed()
    nodes, edges = trace(f)
    assert nodes[0] is f
    assert len(nodes) == 5
    assert len(edges) == 6


def test_draw_dot():
    f = mixed()
    f.backward()
    dot = draw_dot(f)
    assert isinstance(dot, graphviz.Digraph)
    assert dot.format == "svg"
    src = dot.source
    assert "rankdir=LR" in src
    assert "data -6.0000" in src
    assert "grad 1.0000" in src
    assert src.count("shape=record") == 5
    # one operation node per derived value
    assert src.count("_op [label") == 3


def test_labels_are_escaped():
    a = make_value(1.0, "x | {y}")
    src = to_dot(a + 1.0)
    assert r"x \| \{y\}" in src


def test_rendering_is_read_only():
    b = reused_dependency()
    b.backward()
    before = [(n.data, n.grad) for n in trace(b)[0]]
    to_dot(b)
    after = [(n.data, n.grad) for n in trace(b)[0]]
    assert before == after


def test_write_dot_file(tmp_path):
    path = write_dot_file(mixed(), tmp_path / "graph.dot")
    text = path.read_text()
    assert text.startswith("digraph")
    assert "data 3.0000" in text


def test_write_png_calls_renderer(monkeypatch, tmp_path):
    calls = []

    def fake_render(self, *args, **kwargs):
        calls.append((self.format, kwargs))
        return str(kwargs["outfile"])

    monkeypatch.setattr(graphviz.Digraph, "render", fake_render)
    out = write_png(mixed(), tmp_path / "graph.png")
    assert out == str(tmp_path / "graph.png")
    assert calls[0][0] == "png"
    assert calls[0][1]["cleanup"] is True


def test_write_png_keeps_dot_source(monkeypatch, tmp_path):
    calls = []

    def fake_render(self, *args, **kwargs):
        calls.append(kwargs)
        return str(kwargs["outfile"])

    monkeypatch.setattr(graphviz.Digraph, "render", fake_render)
    write_png(mixed(), tmp_path / "graph.png", dot_path=tmp_path / "graph.dot")
    assert calls[0]["filename"] == tmp_path / "graph.dot"


def test_write_png_missing_executable(monkeypatch, tmp_path):
    def fake_render(self, *args, **kwargs):
        raise graphviz.ExecutableNotFound(["dot"])

    monkeypatch.setattr(graphviz.Digraph, "render", fake_render)
    f = mixed()
    f.backward()
    with pytest.raises(RenderError):
        write_png(f, tmp_path / "graph.png")
    assert f.grad == 1.0


def test_write_png_renderer_failure(monkeypatch, tmp_path):
    def fake_render(self, *args, **kwargs):
        raise graphviz.CalledProcessError(1, ["dot"])

    monkeypatch.setattr(graphviz.Digraph, "render", fake_render)
    with pytest.raises(RenderError):
        write_png(mixed(), tmp_path / "graph.png")
