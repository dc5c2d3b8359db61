# -*- coding: utf-8 -*-

import sys
import threading
from abc import ABC, abstractmethod
from collections import namedtuple

import stanza


SentenceSpan = namedtuple("SentenceSpan", ["tokens", "start_char", "end_char"])

# tree is the constituency tree, sentence the engine's own record of the words
Parse = namedtuple("Parse", ["tree", "sentence"])


class ExtractionError(RuntimeError):
    pass


def tagged_yield(tree):
    """(word, tag) pairs read off the preterminals of a constituency tree, left to right."""
    ret = []
    stack = [tree]
    while stack:
        node = stack.pop()
        children = list(node.children)
        if len(children) == 1 and not children[0].children:
            ret.append((children[0].label, node.label))
        else:
            stack.extend(reversed(children))
    return ret


class LinguisticEngine(ABC):

    @abstractmethod
    def split_sentences(self, text):
        pass

    @abstractmethod
    def tag_and_parse(self, tokens):
        pass

    @abstractmethod
    def typed_relations(self, parse):
        pass


class StanzaEngine(LinguisticEngine):

    def __init__(self, lang="en", use_gpu=False, download=True, verbose=False):
        self.lang = lang
        self._verbose = verbose

        if download:
            try:
                stanza.download(lang, processors="tokenize,pos,lemma,depparse,constituency", verbose=verbose)
            except Exception as e:
                print("Could not download stanza models for", lang, "- using cached ones:", e, file=sys.stderr)

        # download_method=None keeps the pipelines from fetching resources themselves
        try:
            self._splitter = stanza.Pipeline(
                lang=lang, processors="tokenize", download_method=None, use_gpu=use_gpu, verbose=verbose
            )
            self._parser = stanza.Pipeline(
                lang=lang, processors="tokenize,pos,lemma,depparse,constituency",
                tokenize_pretokenized=True, download_method=None, use_gpu=use_gpu, verbose=verbose
            )
        except Exception as e:
            print("Failed to load stanza models for", lang, e, file=sys.stderr)
            raise

        if self._verbose:
            print("Stanza", stanza.__version__, "pipelines loaded for", lang, file=sys.stderr)

    def split_sentences(self, text):
        doc = self._splitter(text)
        ret = []
        for sent in doc.sentences:
            if not sent.tokens:
                continue
            tokens = [t.text for t in sent.tokens]
            ret.append(SentenceSpan(tokens, sent.tokens[0].start_char, sent.tokens[-1].end_char))
        return ret

    def tag_and_parse(self, tokens):
        doc = self._parser([list(tokens)])
        sent = doc.sentences[0]
        return Parse(sent.constituency, sent)

    def typed_relations(self, parse):
        words = parse.sentence.words
        if len(tagged_yield(parse.tree)) != len(words):
            raise ExtractionError("tree yield does not match {} words".format(len(words)))
        # head 0 is the root relation, as in CoreNLP typed dependencies; it becomes a -1 edge
        return [(w.head, w.id, w.deprel) for w in words]


_ENGINE = None
_ENGINE_LOCK = threading.Lock()


def get_engine(lang="en", **kwargs):
    """The process-wide engine, built by whichever caller gets here first."""
    global _ENGINE
    if _ENGINE is None:
        with _ENGINE_LOCK:
            if _ENGINE is None:
                _ENGINE = StanzaEngine(lang=lang, **kwargs)
    return _ENGINE


def reset_engine():
    global _ENGINE
    with _ENGINE_LOCK:
        _ENGINE = None


def tokenize(text, engine=None):
    engine = engine or get_engine()
    return [tok for span in engine.split_sentences(text) for tok in span.tokens]


def split_sentences(text, engine=None):
    engine = engine or get_engine()
    return engine.split_sentences(text)


def pos_tag(tokens, engine=None):
    engine = engine or get_engine()
    return tagged_yield(engine.tag_and_parse(tokens).tree)


def parse(tokens, engine=None):
    engine = engine or get_engine()
    return engine.tag_and_parse(tokens)
