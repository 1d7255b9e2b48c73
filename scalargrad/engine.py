"""
Ordering and driving the reverse pass.

A node's gradient is the sum of the contributions of every node that
consumes it, so it is only final once all of its consumers have run. The
order used here starts at the root and emits a node only after every
consumer of it inside the reachable subgraph has been emitted.
"""
import logging
from collections import deque

from .errors import CycleDetectedError

logger = logging.getLogger(__name__)


def consumer_counts(root) -> dict:
    """
    Map every node reachable from ``root`` to the number of times it appears
    as a dependency of another reachable node.

    Nodes are keyed by identity. A node listed twice by the same consumer
    (``a + a``) is counted twice.
    """
    counts = {root: 0}
    stack = [root]
    while stack:
        node = stack.pop()
        for dep in node.dependencies:
            if dep not in counts:
                counts[dep] = 0
                stack.append(dep)
            counts[dep] += 1
    return counts


def topological_order(root) -> list:
    """
    Return the reachable nodes, root first, each one after all of its consumers.

    Raises CycleDetectedError when the nodes cannot all be emitted, which only
    happens if the dependency links were altered outside the public operators.
    """
    counts = consumer_counts(root)
    queue = deque(node for node, n in counts.items() if n == 0)
    order = []
    while queue:
        node = queue.popleft()
        order.append(node)
        for dep in node.dependencies:
            counts[dep] -= 1
            if counts[dep] == 0:
                queue.append(dep)

    if len(order) < len(counts):
        raise CycleDetectedError(
            f"graph rooted at {root!r} has a cycle: "
            f"ordered {len(order)} of {len(counts)} reachable nodes"
        )
    return order


def backward(root) -> list:
    """
    Seed ``root.grad`` with 1 and propagate it to every reachable node.

    Derived nodes below the root start from zero on every call, so their
    gradients describe this pass only. Leaves keep accumulating: calling this
    twice without zeroing them doubles every leaf gradient.
    """
    order = topological_order(root)
    logger.debug("backward from %r over %d nodes", root, len(order))

    for node in order[1:]:
        if node.operation is not None:
            node.set_grad(0.0)
    root.set_grad(1.0)

    for node in order:
        if node.operation is not None:
            node.operation.backward(node.dependencies, node)
    return order


def zero_grad(root):
    """Reset the gradient of every node reachable from ``root``."""
    for node in consumer_counts(root):
        node.set_grad(0.0)
