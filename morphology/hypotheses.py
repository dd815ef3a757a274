"""Morpheme hypotheses read off segmented alignments.

Three heuristics propose morphemes.  All of them run on every
segmentation and everything they propose is collected.

1. Single different segment: if exactly one segment differs between the
   two words, that segment's phones on either side carry the meaning
   that side's word has and the other word lacks.
2. Single same segment: if exactly one segment is the same in both
   words, it carries the meaning the two words share.
3. Residual meaning: if all of a word's segments but one are already
   morphemes, the remaining phones carry whatever meaning those
   morphemes do not account for.

A hypothesis is identified by the word it is about, the span of that
word it covers and the morpheme it proposes.  Hypotheses reached through
different alignments are therefore equal when they say the same thing
about the same stretch of the same word.
"""

import logging

from phonology.alignment import DEST, SIDES, SOURCE
from phonology.features import FeatureConflict, FeatureMatrix
from phonology.units import Morpheme

logger = logging.getLogger(__name__)


class MorphemeHypothesis:
    """A morpheme proposed for the *side* word of a segment."""

    def __init__(self, segment, side, meaning, allomorphs=None):
        if side not in SIDES:
            raise ValueError(f"Invalid side {side!r}")
        self.segment = segment
        self.side = side
        if allomorphs is None:
            allomorphs = [segment.surface_form(side)]
        self.morpheme = Morpheme(allomorphs, meaning)

    @property
    def word(self):
        return self.segment.word(self.side)

    @property
    def span(self):
        return self.segment.word_span(self.side)

    @property
    def surface_form(self):
        return self.segment.surface_form(self.side)

    @property
    def meaning(self):
        return self.morpheme.meaning

    @property
    def allomorphs(self):
        return self.morpheme.allomorphs

    def with_meaning(self, meaning):
        """The same hypothesis with a different meaning."""
        return MorphemeHypothesis(self.segment, self.side, meaning,
                                  self.allomorphs)

    def _key(self):
        return (id(self.word), self.span, self.morpheme)

    def __eq__(self, other):
        if not isinstance(other, MorphemeHypothesis):
            return NotImplemented
        return (self.word is other.word and self.span == other.span
                and self.morpheme == other.morpheme)

    def __hash__(self):
        return hash(self._key())

    def __str__(self):
        lines = str(self.segment).split("\n")
        lines[0 if self.side == SOURCE else 1] += " <=="
        return "\n".join(lines + [str(self.meaning)])

    def __repr__(self):
        start, stop = self.span
        return (f"MorphemeHypothesis({self.word.transcription!r}[{start}:{stop}], "
                f"{self.morpheme})")


def _other(side):
    return DEST if side == SOURCE else SOURCE


# ── Heuristics ──────────────────────────────────────────────────────────────

def single_different_segment(segmentation, logger=logger):
    """Meaning difference of the words, on the one segment that differs."""
    different = [s for s in segmentation if s.phonetically_different]
    if len(different) != 1:
        return
    segment = different[0]
    alignment = segmentation.alignment
    for side in SIDES:
        if not segment.is_pure_phones(side):
            continue
        meaning = (alignment.word(side).meaning
                   - alignment.word(_other(side)).meaning)
        if meaning:
            yield MorphemeHypothesis(segment, side, meaning)
        else:
            logger.debug("No meaning difference for %s", alignment.word(side))


def single_same_segment(segmentation, logger=logger):
    """Shared meaning of the words, on the one segment they have in common."""
    same = [s for s in segmentation if s.phonetically_same]
    if len(same) != 1:
        return
    segment = same[0]
    if not all(segment.is_pure_phones(side) for side in SIDES):
        return
    alignment = segmentation.alignment
    meaning = alignment.source_word.meaning & alignment.dest_word.meaning
    if not meaning:
        logger.debug("No shared meaning for %r", alignment)
        return
    allomorphs = [segment.surface_form(side) for side in SIDES]
    for side in SIDES:
        yield MorphemeHypothesis(segment, side, meaning, allomorphs)


def residual_meaning(segmentation, logger=logger):
    """Unaccounted meaning of a word, on its one remaining phone segment."""
    for side in SIDES:
        phone_segments = []
        morpheme_segments = []
        mixed = False
        for segment in segmentation:
            if segment.is_empty(side):
                continue
            if segment.is_pure_phones(side):
                phone_segments.append(segment)
            elif segment.is_pure_morphemes(side):
                morpheme_segments.append(segment)
            else:
                mixed = True
        if mixed or len(phone_segments) != 1 or not morpheme_segments:
            continue
        word = segmentation.alignment.word(side)
        try:
            accounted = FeatureMatrix.sum(
                s.meaning(side) for s in morpheme_segments)
        except FeatureConflict as e:
            logger.debug("No residual meaning for %s: %s", word, e)
            continue
        meaning = word.meaning - accounted
        if meaning:
            yield MorphemeHypothesis(phone_segments[0], side, meaning)


HEURISTICS = (single_different_segment, single_same_segment, residual_meaning)


def each_morpheme_hypothesis(segmentation, logger=None):
    """Yield the hypotheses of every heuristic, in heuristic order."""
    logger = logger or logging.getLogger(__name__)
    for heuristic in HEURISTICS:
        for hypothesis in heuristic(segmentation, logger=logger):
            logger.debug("Morpheme Hypothesis\n%s", hypothesis)
            yield hypothesis
