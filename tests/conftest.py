# -*- coding: utf-8 -*-

from collections import namedtuple

import pytest

from depgraph.engine import ExtractionError, LinguisticEngine, Parse, SentenceSpan, tagged_yield


class Node:

    def __init__(self, label, children=()):
        self.label = label
        self.children = list(children)


def make_tree(tagged):
    return Node("ROOT", [Node("S", [Node(tag, [Node(word)]) for word, tag in tagged])])


FakeWord = namedtuple("FakeWord", ["id", "head", "deprel"])


class FakeEngine(LinguisticEngine):
    """Splits on '.', tags by word shape, attaches every word to the last one.

    Sentences containing a word listed in ``broken`` raise during relation extraction,
    and lines containing ``unsplittable`` raise during sentence splitting.
    """

    def __init__(self, broken=(), unsplittable="%%%"):
        self.broken = set(broken)
        self.unsplittable = unsplittable
        self.parsed = []

    def split_sentences(self, text):
        if self.unsplittable in text:
            raise ValueError("cannot split")
        ret = []
        offset = 0
        for chunk in text.split("."):
            tokens = chunk.split()
            if tokens:
                ret.append(SentenceSpan(tokens + ["."], offset, offset + len(chunk) + 1))
            offset += len(chunk) + 1
        return ret

    def tag_and_parse(self, tokens):
        self.parsed.append(list(tokens))
        tagged = [(w, self.tag(w)) for w in tokens]
        n = len(tokens)
        words = [FakeWord(i, n if i < n else 0, "dep" if i < n else "root") for i in range(1, n + 1)]
        return Parse(make_tree(tagged), words)

    def typed_relations(self, parse):
        if self.broken & {w for w, _ in tagged_yield(parse.tree)}:
            raise ExtractionError("degenerate tree")
        return [(w.head, w.id, w.deprel) for w in parse.sentence]

    @staticmethod
    def tag(word):
        if word == ".":
            return "."
        if word[0].isupper():
            return "NNP"
        return "NN"


@pytest.fixture
def engine():
    return FakeEngine()


@pytest.fixture
def make_engine():
    return FakeEngine


@pytest.fixture
def tree_of():
    return make_tree
