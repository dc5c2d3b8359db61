# -*- coding: utf-8 -*-

import networkx as nx
import numpy as np

from .graph import ROOT, DependencyParse, dependency_graph


def find_roots(parse):
    deps = np.array([dep for _, dep, _ in parse.edges], dtype=int)
    roots = np.setdiff1d(np.arange(len(parse.words)), deps)
    return [int(r) for r in roots]


def add_roots(parse):
    """Attach every root of a forest to the super-root with a ``root`` edge.

    Roots are recomputed from the edges, so a second application finds none and
    returns an equal value.
    """
    root_edges = [(ROOT, r, "root") for r in find_roots(parse)]
    return DependencyParse(parse.words, parse.tags, parse.edges + tuple(root_edges))


def unreachable(parse):
    # non-empty after add_roots only when the edges contain a cycle without a root
    graph = dependency_graph(parse)
    reached = nx.descendants(graph, ROOT) if ROOT in graph else set()
    return [i for i in range(len(parse.words)) if i not in reached]
