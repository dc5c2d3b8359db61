# -*- coding: utf-8 -*-

from collections import Counter


def build_vocab(parses):
    relsCount = Counter()

    for parse in parses:
        relsCount.update(rel for _, _, rel in parse.edges)

    return relsCount
