"""A morphological analysis of a paradigm, refined one morpheme at a time.

An analysis holds its own copy of the word list, the morphemes found so
far and the alignments between every pair of words that share some
meaning.  Each iteration reads morpheme hypotheses off the alignments,
clusters them into equivalence classes and, for every class, branches
off a successor analysis in which that morpheme has been inserted into
the words it was found in.
"""

import logging
from collections import defaultdict

from morphology.alignment_table import AlignmentTable
from morphology.equivalence import POWERSET_SEARCH_CUTOFF, cluster_hypotheses
from morphology.hypotheses import each_morpheme_hypothesis
from phonology.alignment import Alignment
from phonology.units import Phone


def symmetric_pairs(items):
    """Yield ``(i, j)`` for every pair of indexes of *items* with i > j."""
    for i in range(len(items)):
        for j in range(i):
            yield i, j


class MorphologicalAnalysis:
    """One state of the search: a word list and the morphemes found in it."""

    def __init__(self, words, powerset_search_cutoff=POWERSET_SEARCH_CUTOFF,
                 substitution_threshold=0, logger=None):
        self.logger = logger or logging.getLogger(__name__)
        self.powerset_search_cutoff = powerset_search_cutoff
        self.substitution_threshold = substitution_threshold
        self.words = [w.copy() for w in words]
        self.morphemes = set()
        self.alignments = self._align_words()
        self._score = None

    def _align_words(self):
        """Align every pair of words whose meanings overlap."""
        table = AlignmentTable()
        for i, j in symmetric_pairs(self.words):
            source, dest = self.words[i], self.words[j]
            if not source.meaning & dest.meaning:
                self.logger.debug("Skipping alignment for\n%s\n%s", source, dest)
                continue
            table.add(Alignment(source, dest), i, j)
        return table

    def copy(self):
        """An independent copy of this analysis."""
        clone = MorphologicalAnalysis.__new__(MorphologicalAnalysis)
        clone.logger = self.logger
        clone.powerset_search_cutoff = self.powerset_search_cutoff
        clone.substitution_threshold = self.substitution_threshold
        clone.words = [w.copy() for w in self.words]
        clone.morphemes = set(self.morphemes)
        clone.alignments = self.alignments.copy(clone.words)
        clone._score = self._score
        return clone

    # ── Scoring and identity ────────────────────────────────────────────────

    @property
    def score(self):
        """Sum of the match rates of all the alignments."""
        if self._score is None:
            self._score = sum(a.match_rate for a in self.alignments)
        return self._score

    @property
    def fully_analyzed(self):
        return all(w.fully_analyzed for w in self.words)

    def key(self):
        """Hashable summary: the words and the set of morphemes."""
        return (tuple(w.key() for w in self.words), frozenset(self.morphemes))

    def __eq__(self, other):
        if not isinstance(other, MorphologicalAnalysis):
            return NotImplemented
        return self.key() == other.key()

    __hash__ = None

    # ── Iteration ───────────────────────────────────────────────────────────

    def morpheme_hypotheses(self):
        """Every hypothesis from every alignment, in alignment order."""
        hypotheses = []
        for alignment in self.alignments:
            self.logger.debug("Compare\n%s\n%s",
                              alignment.source_word, alignment.dest_word)
            segmentation = alignment.segmentation(self.substitution_threshold)
            hypotheses.extend(
                each_morpheme_hypothesis(segmentation, logger=self.logger))
        return hypotheses

    def next_iteration(self):
        """Successor analyses, one per candidate morpheme.

        An empty list means no further morphemes can be found.
        """
        classes = cluster_hypotheses(self.morpheme_hypotheses(),
                                     self.powerset_search_cutoff,
                                     logger=self.logger)
        index_of = {id(w): i for i, w in enumerate(self.words)}
        successors = []
        for equivalence_class in classes:
            if not equivalence_class.meaning:
                continue
            spans = defaultdict(set)
            for hypothesis in equivalence_class:
                spans[index_of[id(hypothesis.word)]].add(hypothesis.span)
            successor = self.copy()
            if successor.insert_morpheme(equivalence_class.morpheme, spans):
                successors.append(successor)
        return successors

    def insert_morpheme(self, morpheme, spans):
        """Add *morpheme* and splice it into the words at *spans*.

        *spans* maps word indexes to sets of ``(start, stop)`` offsets.
        Within a word the spans are applied from the right so earlier
        offsets stay valid; a span overlapping one already applied is
        skipped.  Returns the indexes of the words that changed.
        """
        self.morphemes.add(morpheme)
        changed = []
        for index in sorted(spans):
            word = self.words[index]
            applied = []
            for start, stop in sorted(spans[index], reverse=True):
                if any(start < a_stop and a_start < stop
                       for a_start, a_stop in applied):
                    self.logger.debug("Skipping overlapping span %d:%d in %s",
                                      start, stop, word)
                    continue
                surface = word.units[start:stop]
                if not all(isinstance(u, Phone) for u in surface):
                    continue
                word.replace_span(start, stop, morpheme.realize(surface))
                applied.append((start, stop))
            if applied:
                self.logger.debug("Reanalyzed %s", word)
                changed.append(index)
        self.alignments.recompute(self.words, changed)
        self._score = None
        return changed

    def __str__(self):
        morphemes = sorted(str(m) for m in self.morphemes)
        return "\n".join(
            [f"Score {self.score:0.4f}", "Morphemes"]
            + [f"  {m}" for m in morphemes]
            + ["Words"]
            + [f"  {w}" for w in self.words]
        )
