# -*- coding: utf-8 -*-

import json

from .graph import DependencyParse


ID, FORM, LEMMA, UPOS, XPOS, FEATS, HEAD, DEPREL, DEPS, MISC = range(10)


def dumps_parses(parses):
    return json.dumps([p._asdict() for p in parses])


def loads_parses(line):
    return [DependencyParse(d["words"], d["tags"], d["edges"]) for d in json.loads(line)]


def read_conll(filename):
    def get_instance(graph, graphs):
        words = [row[FORM] for row in graph]
        tags = [row[XPOS] if row[XPOS] != "_" else row[UPOS] for row in graph]
        edges = [(int(row[HEAD]) - 1, int(row[ID]) - 1, row[DEPREL]) for row in graph]

        graphs.append(DependencyParse(words, tags, edges))

    graphs = []
    graph = []

    with open(filename, "rb") as file:
        for line in file:
            line = line.decode('utf-8').strip()

            if len(line):
                if line[0] == "#":
                    continue
                if "-" in line.split()[0] or "." in line.split()[0]:
                    continue
                graph.append(line.split("\t"))
            elif len(graph):
                get_instance(graph, graphs)
                graph = []

    if len(graph):
        get_instance(graph, graphs)

    return graphs
