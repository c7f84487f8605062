from collections.abc import Hashable

import networkx as nx
from matplotlib import pyplot as plt
from matplotlib.axes import Axes

from ll1.grammar import Grammar, Nonterminal, Terminal
from ll1.sets import NullableTable, compute_nullable


def dependency_graph(grammar: Grammar) -> nx.DiGraph:
    """Edge `A → B` whenever `B` appears in some alternative of `A`."""
    graph = nx.DiGraph()
    graph.add_nodes_from(grammar.nonterminals)

    for lhs, rhs in grammar.iter_productions():
        for s in rhs:
            if isinstance(s, Nonterminal):
                graph.add_edge(lhs, s.value)
    return graph


def left_corner_graph(grammar: Grammar, nullable: NullableTable | None = None) -> nx.DiGraph:
    """Edge `A → B` whenever some alternative of `A` can begin with `B`."""
    if nullable is None:
        nullable = compute_nullable(grammar)

    graph = nx.DiGraph()
    graph.add_nodes_from(grammar.nonterminals)

    for lhs, rhs in grammar.iter_productions():
        for s in rhs:
            if isinstance(s, Terminal):
                break
            graph.add_edge(lhs, s.value)
            if not nullable[s.value]:
                break
    return graph


def left_recursive(grammar: Grammar, nullable: NullableTable | None = None) -> set[Hashable]:
    graph = left_corner_graph(grammar, nullable)

    recursive = set()
    for component in nx.strongly_connected_components(graph):
        if len(component) > 1:
            recursive |= component
        else:
            (nt,) = component
            if graph.has_edge(nt, nt):
                recursive.add(nt)
    return recursive


def visualize(grammar: Grammar, ax: Axes | None = None) -> Axes:
    """Draws the dependency graph, left-recursive nonterminals in red."""
    if ax is None:
        _, ax = plt.subplots()

    graph = dependency_graph(grammar)
    recursive = left_recursive(grammar)
    colors = ["tab:red" if nt in recursive else "tab:blue" for nt in graph.nodes]

    pos = nx.circular_layout(graph)
    nx.draw(
        graph,
        pos,
        ax=ax,
        arrows=True,
        node_shape="o",
        node_size=1500,
        node_color=colors,
        alpha=0.4,
    )
    nx.draw_networkx_labels(graph, pos, ax=ax, labels={nt: str(nt) for nt in graph.nodes})
    return ax
