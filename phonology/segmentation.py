"""Division of an alignment into segments.

A segment boundary goes between every pair of slots with different
phonetic operations, and after every slot holding a morpheme.  Phonetic
operations are the alignment's edit operations, except that a
substitution between phones no further apart than a threshold counts
as a match.
"""

from phonology.alignment import SUBSTITUTE, format_alignment
from phonology.features import FeatureMatrix
from phonology.units import Morpheme, Phone


def phonetic_operations(alignment, substitution_threshold=0):
    """Edit operations with near-identical phone substitutions as matches."""
    ops = alignment.edit_operations
    for i, (s, d) in enumerate(zip(alignment.source, alignment.dest)):
        if (ops[i] == SUBSTITUTE
                and isinstance(s, Phone) and isinstance(d, Phone)
                and s.distance(d) <= substitution_threshold):
            ops[i] = None
    return ops


class Segmentation:
    """The segments of one alignment, numbered from 0."""

    def __init__(self, alignment, substitution_threshold=0):
        self.alignment = alignment
        self.substitution_threshold = substitution_threshold
        self.phonetic_operations = phonetic_operations(
            alignment, substitution_threshold)
        self.boundaries = self._find_boundaries()
        edges = [0] + self.boundaries + [len(alignment)] if len(alignment) else []
        self._segments = [
            Segment(self, index, start, stop)
            for index, (start, stop) in enumerate(zip(edges, edges[1:]))
        ]

    def _find_boundaries(self):
        ops = self.phonetic_operations
        source, dest = self.alignment.source, self.alignment.dest
        boundaries = []
        for i in range(1, len(ops)):
            after_morpheme = (isinstance(source[i - 1], Morpheme)
                              or isinstance(dest[i - 1], Morpheme))
            if ops[i] != ops[i - 1] or after_morpheme:
                boundaries.append(i)
        return boundaries

    @property
    def edit_operations(self):
        return self.alignment.edit_operations

    def __len__(self):
        return len(self._segments)

    def __getitem__(self, index):
        return self._segments[index]

    def __iter__(self):
        return iter(self._segments)

    def __eq__(self, other):
        if not isinstance(other, Segmentation):
            return NotImplemented
        return (self.alignment is other.alignment
                and self.boundaries == other.boundaries)

    def __hash__(self):
        return hash((id(self.alignment), tuple(self.boundaries)))

    def each_morpheme_hypothesis(self, logger=None):
        from morphology.hypotheses import each_morpheme_hypothesis
        return each_morpheme_hypothesis(self, logger=logger)

    def __str__(self):
        return format_alignment(self.alignment, self.boundaries)


class Segment:
    """A contiguous run ``[start, stop)`` of slots in a segmentation."""

    def __init__(self, segmentation, index, start, stop):
        self.segmentation = segmentation
        self.index = index
        self.start = start
        self.stop = stop

    @property
    def alignment(self):
        return self.segmentation.alignment

    def __len__(self):
        return self.stop - self.start

    @property
    def phonetically_same(self):
        """True if every phonetic operation in the segment is a match."""
        ops = self.segmentation.phonetic_operations[self.start:self.stop]
        return all(op is None for op in ops)

    @property
    def phonetically_different(self):
        return not self.phonetically_same

    def units(self, side):
        """Units on *side* in this segment, with None for gaps."""
        return list(self.alignment.units(side)[self.start:self.stop])

    def present_units(self, side):
        return [u for u in self.units(side) if u is not None]

    def is_empty(self, side):
        return not self.present_units(side)

    def is_pure_phones(self, side):
        """True if *side* has units here and all of them are phones."""
        units = self.present_units(side)
        return bool(units) and all(isinstance(u, Phone) for u in units)

    def is_pure_morphemes(self, side):
        units = self.present_units(side)
        return bool(units) and all(isinstance(u, Morpheme) for u in units)

    def meaning(self, side):
        """Combined meaning of the morphemes on *side*, or None.

        Only a side made up entirely of morphemes has a meaning.
        """
        if not self.is_pure_morphemes(side):
            return None
        return FeatureMatrix.sum(u.meaning for u in self.present_units(side))

    def word(self, side):
        return self.alignment.word(side)

    def word_span(self, side):
        """Offsets ``(start, stop)`` of this segment in the *side* word."""
        return self.alignment.word_offsets(side, self.start, self.stop)

    def surface_form(self, side):
        return tuple(self.present_units(side))

    def __eq__(self, other):
        if not isinstance(other, Segment):
            return NotImplemented
        return (self.segmentation == other.segmentation
                and (self.start, self.stop) == (other.start, other.stop))

    def __hash__(self):
        return hash((self.segmentation, self.start, self.stop))

    def __str__(self):
        return format_alignment(self.alignment, self.segmentation.boundaries,
                                (self.start, self.stop - 1))

    def __repr__(self):
        return f"Segment({self.index}, {self.start}:{self.stop})"
