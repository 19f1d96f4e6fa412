"""Orders non-terminals so that every rule is handled after the rules it uses."""

from typing import Dict, List

from .yacc import Grammar

type Graph = Dict[str, List[str]]


def dependency_graph(grammar: Grammar) -> Graph:
    """Edges from each non-terminal to the non-terminals its rules reference.
    Names the grammar does not define (tokens) are left out."""
    defined = grammar.rules
    return {name: [ref for ref in grammar.references(name) if ref in defined]
            for name in grammar.nonterminals()}


def strongly_connected_components(graph: Graph) -> List[List[str]]:
    """Tarjan's algorithm, without recursion.

    Components come out leaves first: a component is emitted only after
    every component reachable from it. Members keep the graph's key order.
    """
    position = {name: n for n, name in enumerate(graph)}
    index = {}
    lowlink = {}
    stack = []
    on_stack = set()
    components = []

    for root in graph:
        if root in index:
            continue
        # Each frame is a node and an iterator over its remaining successors.
        work = [(root, iter(graph[root]))]
        index[root] = lowlink[root] = len(index)
        stack.append(root)
        on_stack.add(root)
        while work:
            node, successors = work[-1]
            for succ in successors:
                if succ not in index:
                    index[succ] = lowlink[succ] = len(index)
                    stack.append(succ)
                    on_stack.add(succ)
                    work.append((succ, iter(graph[succ])))
                    break
                if succ in on_stack:
                    lowlink[node] = min(lowlink[node], index[succ])
            else:
                work.pop()
                if work:
                    parent = work[-1][0]
                    lowlink[parent] = min(lowlink[parent], lowlink[node])
                if lowlink[node] == index[node]:
                    component = []
                    while True:
                        member = stack.pop()
                        on_stack.discard(member)
                        component.append(member)
                        if member == node:
                            break
                    components.append(sorted(component, key=position.__getitem__))
    return components


def dependency_order(grammar: Grammar) -> List[List[str]]:
    return strongly_connected_components(dependency_graph(grammar))


def is_recursive(component: List[str], graph: Graph) -> bool:
    """True for cycles, including a single non-terminal that uses itself."""
    if len(component) > 1:
        return True
    name = component[0]
    return name in graph[name]
