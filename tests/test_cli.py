import scalargrad.__main__ as cli
from scalargrad import RenderError


def test_demo_graph(capsys):
    assert cli.main(["--demo", "reuse"]) == 0
    out = capsys.readouterr().out
    assert "grad=1.0000" in out
    assert "b = a + a" in out


def test_training(capsys):
    assert cli.main(["--epochs", "5", "--seed", "0", "--log-every", "0"]) == 0
    out = capsys.readouterr().out
    assert "Final Predictions vs Targets:" in out
    assert out.count("Pred:") == 4


def test_render_failure_prints_dot_source(monkeypatch, capsys, tmp_path):
    def failing_write_png(root, path):
        raise RenderError("no dot")

    monkeypatch.setattr(cli, "write_png", failing_write_png)
    assert cli.main(["--demo", "mixed", "--graph", str(tmp_path / "g.png")]) == 0
    out = capsys.readouterr().out
    assert "Could not render graph locally" in out
    assert "digraph" in out


def test_render_success(monkeypatch, capsys, tmp_path):
    rendered = []
    monkeypatch.setattr(cli, "write_png", lambda root, path: rendered.append((root, path)))
    assert cli.main(["--demo", "neuron", "--graph", str(tmp_path / "g.png")]) == 0
    assert len(rendered) == 1
    assert rendered[0][0].label == "out"
    assert "Graph rendered to" in capsys.readouterr().out


def test_invalid_config(capsys):
    assert cli.main(["--epochs", "-1"]) == 2
    assert "invalid configuration" in capsys.readouterr().err
