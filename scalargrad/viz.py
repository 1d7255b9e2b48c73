import logging
import re
from pathlib import Path

import graphviz
from graphviz import Digraph

from .errors import RenderError

logger = logging.getLogger(__name__)

_RECORD_SPECIAL = re.compile(r"([{}|<>\"])")


# --- Visualization Tools (Graphviz) ---
def trace(root):
    """
    Collect the nodes and edges reachable from ``root`` without touching them.

    Edges are ``(dependency, consumer)`` pairs, one per operand slot, so a node
    used twice by the same consumer yields two edges.
    """
    nodes, edges = [], []
    seen = {root}
    stack = [root]
    while stack:
        v = stack.pop()
        nodes.append(v)
        for child in v.dependencies:
            edges.append((child, v))
            if child not in seen:
                seen.add(child)
                stack.append(child)
    return nodes, edges


def _record_label(v):
    fields = [f"data {v.data:.4f}", f"grad {v.grad:.4f}"]
    if v.label is not None:
        fields.insert(0, _RECORD_SPECIAL.sub(r"\\\1", str(v.label)))
    return "{ " + " | ".join(fields) + " }"


def draw_dot(root, fmt="svg", rankdir="LR"):
    dot = Digraph(format=fmt, graph_attr={"rankdir": rankdir})  # LR = Left to Right

    nodes, edges = trace(root)
    uids = {n: f"n{i}" for i, n in enumerate(nodes)}
    for n in nodes:
        uid = uids[n]
        # rectangular node for the value
        dot.node(name=uid, label=_record_label(n), shape="record")

        if n.operation is not None:
            # small oval node for the operation that produced it
            dot.node(name=uid + "_op", label=n.operation.symbol)
            dot.edge(uid + "_op", uid)

    for n1, n2 in edges:
        dot.edge(uids[n1], uids[n2] + "_op")

    return dot


def to_dot(root) -> str:
    """DOT source describing the graph rooted at ``root``."""
    return draw_dot(root).source


def write_dot_file(root, path):
    path = Path(path)
    path.write_text(to_dot(root))
    return path


def write_png(root, png_path, dot_path=None):
    """
    Render the graph to ``png_path`` with the Graphviz ``dot`` executable.

    The DOT source is kept at ``dot_path`` when one is given. Rendering
    failures raise RenderError; the graph itself is never modified.
    """
    dot = draw_dot(root, fmt="png")
    try:
        if dot_path is None:
            out = dot.render(outfile=png_path, cleanup=True)
        else:
            out = dot.render(filename=dot_path, outfile=png_path)
    except graphviz.ExecutableNotFound as e:
        logger.warning("graphviz executable not found: %s", e)
        raise RenderError("Graphviz 'dot' command not found. Is Graphviz installed and on PATH?") from e
    except (graphviz.CalledProcessError, OSError) as e:
        logger.warning("rendering %s failed: %s", png_path, e)
        raise RenderError(f"rendering {png_path} failed: {e}") from e
    logger.info("graph rendered to %s", out)
    return out
