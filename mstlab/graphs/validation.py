"""
Boundary validation for graphs handed to the engines.

The engines assume a structurally valid graph and do not defend against
malformed input. Graph sources (builders, generators, importers) call
:func:`validate_graph` before passing a graph on.
"""

from __future__ import annotations

from numbers import Integral
from typing import List, Sequence, Set, Tuple

from .core import Edge, Node


class InvalidGraphError(ValueError):
    """Raised when a graph violates the structural preconditions of the engines.

    Attributes:
        problems: Every problem found, in discovery order.
    """

    def __init__(self, problems: Sequence[str]):
        self.problems = list(problems)
        super().__init__("; ".join(self.problems))


def graph_problems(nodes: Sequence[Node], edges: Sequence[Edge]) -> List[str]:
    """
    Collect structural problems without raising.

    Checks: unique node ids, unique edge ids, endpoints referencing existing
    nodes, no self-loops, no duplicate undirected edges (both orderings),
    and positive integer weights.

    Returns:
        List of human-readable problem descriptions, empty when valid.
    """
    problems: List[str] = []

    node_ids: Set[str] = set()
    for node in nodes:
        if node.id in node_ids:
            problems.append(f"Duplicate node id '{node.id}'")
        node_ids.add(node.id)

    edge_ids: Set[str] = set()
    pairs: Set[Tuple[str, str]] = set()
    for edge in edges:
        if edge.id in edge_ids:
            problems.append(f"Duplicate edge id '{edge.id}'")
        edge_ids.add(edge.id)

        for endpoint in edge.endpoints:
            if endpoint not in node_ids:
                problems.append(
                    f"Edge '{edge.id}' references unknown node '{endpoint}'"
                )

        if edge.source == edge.target:
            problems.append(f"Edge '{edge.id}' is a self-loop on '{edge.source}'")
        else:
            pair = (edge.source, edge.target)
            if pair in pairs or (edge.target, edge.source) in pairs:
                problems.append(
                    f"Edge '{edge.id}' duplicates an existing edge between "
                    f"'{edge.source}' and '{edge.target}'"
                )
            pairs.add(pair)

        if isinstance(edge.weight, bool) or not isinstance(edge.weight, Integral):
            problems.append(
                f"Edge '{edge.id}' has non-integer weight {edge.weight!r}"
            )
        elif edge.weight <= 0:
            problems.append(
                f"Edge '{edge.id}' has non-positive weight {edge.weight}"
            )

    return problems


def validate_graph(nodes: Sequence[Node], edges: Sequence[Edge]) -> None:
    """
    Validate a graph before it is handed to the engines.

    Args:
        nodes: Graph nodes.
        edges: Graph edges.

    Raises:
        InvalidGraphError: If any structural problem is found.

    Example:
        >>> validate_graph([Node("a", "A")], [Edge("e", "a", "b", 3)])
        Traceback (most recent call last):
        ...
        mstlab.graphs.validation.InvalidGraphError: Edge 'e' references unknown node 'b'
    """
    problems = graph_problems(nodes, edges)
    if problems:
        raise InvalidGraphError(problems)
