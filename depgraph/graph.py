# -*- coding: utf-8 -*-

from collections import namedtuple

import networkx as nx


ROOT = -1


Edge = namedtuple("Edge", ["governor", "dependent", "relation"])


class DependencyParse(namedtuple("DependencyParse", ["words", "tags", "edges"])):
    """One sentence as words, POS tags and typed (governor, dependent, relation) edges.

    Indices are 0-based into ``words``; ``ROOT`` (-1) may only appear as a governor.
    Instances are immutable, normalization returns a new value.
    """

    __slots__ = ()

    def __new__(cls, words, tags, edges=()):
        words = tuple(words)
        tags = tuple(tags)
        if len(words) != len(tags):
            raise ValueError("{} words but {} tags".format(len(words), len(tags)))
        edges = tuple(Edge(int(g), int(d), r) for g, d, r in edges)
        return super(DependencyParse, cls).__new__(cls, words, tags, edges)


def dependency_graph(parse):
    graph = nx.MultiDiGraph()

    for i, (word, tag) in enumerate(zip(parse.words, parse.tags)):
        graph.add_node(i, word=word, tag=tag)

    # edge endpoints not yet present (the sentinel) are added bare
    for gov, dep, rel in parse.edges:
        graph.add_edge(gov, dep, type=rel)

    return graph
