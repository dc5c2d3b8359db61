# -*- coding: utf-8 -*-

from collections import namedtuple

from .engine import get_engine, tagged_yield
from .graph import DependencyParse


TEXT, TOKENS, TREE = "text", "tokens", "tree"


class SentenceInput(namedtuple("SentenceInput", ["kind", "value"])):

    __slots__ = ()

    @classmethod
    def text(cls, text):
        return cls(TEXT, text)

    @classmethod
    def tokens(cls, tokens):
        return cls(TOKENS, list(tokens))

    @classmethod
    def tree(cls, parse):
        return cls(TREE, parse)


class ExtractionResult(namedtuple("ExtractionResult", ["parse", "error"])):

    __slots__ = ()

    @property
    def ok(self):
        return self.parse is not None


def _from_tree(engine, parse):
    try:
        tagged = tagged_yield(parse.tree)
        edges = [(gov - 1, dep - 1, rel) for gov, dep, rel in engine.typed_relations(parse)]
        words = [w for w, _ in tagged]
        tags = [t for _, t in tagged]
        return ExtractionResult(DependencyParse(words, tags, edges), None)
    except Exception as e:
        return ExtractionResult(None, e)


def _from_tokens(engine, tokens):
    try:
        parse = engine.tag_and_parse(tokens)
    except Exception as e:
        return ExtractionResult(None, e)
    return _from_tree(engine, parse)


def _extract_text(engine, text):
    return [_from_tokens(engine, span.tokens) for span in engine.split_sentences(text)]


def _extract_tokens(engine, tokens):
    return [_from_tokens(engine, tokens)]


def _extract_tree(engine, parse):
    return [_from_tree(engine, parse)]


HANDLERS = {
    TEXT: _extract_text,
    TOKENS: _extract_tokens,
    TREE: _extract_tree,
}


def extract(inp, engine=None):
    """Dependency parses for a text, token sequence or constituency parse.

    Returns one ExtractionResult per sentence; a sentence whose tree cannot be
    converted yields a result carrying the error instead of a parse.
    """
    engine = engine or get_engine()
    try:
        handler = HANDLERS[inp.kind]
    except KeyError:
        raise ValueError("Unknown input kind {!r}".format(inp.kind))
    return handler(engine, inp.value)


def dependency_parse(inp, engine=None):
    return [r.parse for r in extract(inp, engine) if r.ok]
