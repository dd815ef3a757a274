"""Index of the alignments in an analysis by the words they align.

The table maps every alignment to its ``(source, dest)`` word indexes
and every word index to the alignments that involve it, so that when a
word is reanalysed exactly the alignments it takes part in can be
thrown away and recomputed.
"""

from phonology.alignment import Alignment


class AlignmentTable:

    def __init__(self):
        self._pairs = {}
        self._by_word = {}

    def add(self, alignment, source_index, dest_index):
        self._pairs[alignment] = (source_index, dest_index)
        for index in (source_index, dest_index):
            self._by_word.setdefault(index, {})[alignment] = None

    def remove(self, alignment):
        """Drop *alignment*, returning its word index pair."""
        pair = self._pairs.pop(alignment)
        for index in pair:
            alignments = self._by_word[index]
            del alignments[alignment]
            if not alignments:
                del self._by_word[index]
        return pair

    def pair(self, alignment):
        return self._pairs[alignment]

    def alignments_for(self, index):
        """Alignments in which word *index* is the source or the dest."""
        return list(self._by_word.get(index, ()))

    def invalidate(self, index):
        """Remove every alignment involving word *index*.

        Returns the index pairs that were aligned.
        """
        return [self.remove(a) for a in self.alignments_for(index)]

    def recompute(self, words, indexes):
        """Realign every pair involving one of *indexes*.

        Returns the number of alignments rebuilt.
        """
        pairs = set()
        for index in indexes:
            pairs.update(self.invalidate(index))
        for source_index, dest_index in sorted(pairs):
            self.add(Alignment(words[source_index], words[dest_index]),
                     source_index, dest_index)
        return len(pairs)

    def copy(self, words):
        """A table over *words*, a copy of the word list this one indexes."""
        table = AlignmentTable()
        for alignment, (source_index, dest_index) in self.items():
            table.add(alignment.rebind(words[source_index], words[dest_index]),
                      source_index, dest_index)
        return table

    def items(self):
        """``(alignment, (source, dest))`` pairs ordered by word indexes."""
        return sorted(self._pairs.items(), key=lambda item: item[1])

    def __iter__(self):
        return (alignment for alignment, _ in self.items())

    def __len__(self):
        return len(self._pairs)

    def __contains__(self, alignment):
        return alignment in self._pairs

    def is_consistent(self):
        """True if the two indexes describe the same set of alignments."""
        from_words = {}
        for index, alignments in self._by_word.items():
            for alignment in alignments:
                from_words.setdefault(alignment, set()).add(index)
        return (from_words.keys() == self._pairs.keys()
                and all(set(pair) == from_words[a]
                        for a, pair in self._pairs.items()))
