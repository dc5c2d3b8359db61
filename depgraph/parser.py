# -*- coding: utf-8 -*-

import sys
from collections import Counter

import fire
from tqdm import tqdm

from .algorithm import add_roots
from .engine import get_engine
from .extractor import SentenceInput, extract
from .io import dumps_parses
from .utils import build_vocab


MIN_LENGTH = 5
DEFAULT_MAX_LENGTH = 50


class DependencyPipeline:

    def __init__(self, engine=None, max_length=DEFAULT_MAX_LENGTH, roots=False, verbose=False):
        self._engine = engine
        self._max_length = int(max_length)
        self._roots = roots
        self._verbose = verbose
        self.stats = Counter()
        self._rels = Counter()

    @property
    def engine(self):
        if self._engine is None:
            self._engine = get_engine()
        return self._engine

    def split(self, line):
        try:
            return self.engine.split_sentences(line)
        except Exception:
            self.stats["split_failed"] += 1
            return []

    def keep(self, span):
        return MIN_LENGTH <= len(span.tokens) <= self._max_length

    def process_line(self, line):
        self.stats["lines"] += 1
        if not line.strip():
            return []

        spans = self.split(line)
        self.stats["sentences"] += len(spans)

        parses = []
        for span in spans:
            if not self.keep(span):
                continue
            self.stats["kept"] += 1
            for result in extract(SentenceInput.tokens(span.tokens), self.engine):
                if not result.ok:
                    self.stats["failed"] += 1
                    continue
                parse = add_roots(result.parse) if self._roots else result.parse
                parses.append(parse)

        self.stats["parsed"] += len(parses)
        if self._verbose:
            self._rels.update(build_vocab(parses))
        return parses

    def run(self, lines, out=None):
        out = out or sys.stdout
        for line in tqdm(lines, disable=not self._verbose, unit="line"):
            out.write(dumps_parses(self.process_line(line.rstrip("\n"))))
            out.write("\n")
            out.flush()

        if self._verbose:
            self.report()
        return self

    def report(self):
        print("Read", self.stats["lines"], "lines", self.stats["sentences"], "sentences", file=sys.stderr)
        print("Kept", self.stats["kept"], "sentences of length", MIN_LENGTH, "to", self._max_length, file=sys.stderr)
        print("Parsed", self.stats["parsed"], "failed", self.stats["failed"],
              "unsplittable lines", self.stats["split_failed"], file=sys.stderr)
        print("Rel set containing {} tags".format(len(self._rels)), dict(self._rels), file=sys.stderr)
        sys.stderr.flush()


def main(max_length=DEFAULT_MAX_LENGTH, roots=False, verbose=False, lang="en", use_gpu=False):
    if verbose:
        kwargs = dict(max_length=max_length, roots=roots, verbose=verbose, lang=lang, use_gpu=use_gpu)
        print("Parameters (others default):", file=sys.stderr)
        for k in sorted(kwargs):
            print(k, kwargs[k], file=sys.stderr)
        sys.stderr.flush()

    engine = get_engine(lang=lang, use_gpu=use_gpu, verbose=verbose)
    DependencyPipeline(engine, max_length=max_length, roots=roots, verbose=verbose).run(sys.stdin)


def cli():
    fire.Fire(main)


if __name__ == '__main__':
    cli()
