"""Edit-distance alignment of the unit sequences of two words.

Phones substitute for one another at the cost of their phonetic
distance, morphemes align only with compatible morphemes, and a phone
never aligns with a morpheme.  Insertions and deletions cost 1.

The alignment is computed once from copies of the two unit sequences.
When either word is reanalysed the alignment goes stale: it is not
updated, it has to be discarded and rebuilt.
"""

import math

from phonology.units import Morpheme, Phone

INFINITY = math.inf

SOURCE = "source"
DEST = "dest"
SIDES = (SOURCE, DEST)

# Edit operations.  A matched slot has the operation None.
SUBSTITUTE = "substitute"
INSERT = "insert"
DELETE = "delete"

_OP_MNEMONICS = {None: " ", SUBSTITUTE: "S", INSERT: "I", DELETE: "D"}


def substitution_cost(a, b):
    """Cost of aligning unit *a* with unit *b*; None stands for a gap."""
    if a is None or b is None:
        return 0 if a is b else 1
    if type(a) is type(b) and a == b:
        return 0
    a_morph = isinstance(a, Morpheme)
    b_morph = isinstance(b, Morpheme)
    if a_morph and b_morph:
        return 0 if a.is_compatible(b) else INFINITY
    if isinstance(a, Phone) and isinstance(b, Phone):
        return a.distance(b)
    if a_morph != b_morph:
        # Phones and morphemes never align.
        return INFINITY
    raise TypeError(f"Cannot align {a!r} with {b!r}")


def align_units(source, dest):
    """Minimum-cost global alignment of two unit sequences.

    Returns ``(distance, source_padded, dest_padded, operations)``.  Ties
    are broken in favour of the diagonal step, then insertion, then
    deletion, so the same inputs always produce the same alignment.
    """
    n, m = len(source), len(dest)
    dp = [[0.0] * (m + 1) for _ in range(n + 1)]
    back = [[None] * (m + 1) for _ in range(n + 1)]

    for i in range(1, n + 1):
        dp[i][0] = dp[i - 1][0] + substitution_cost(source[i - 1], None)
        back[i][0] = DELETE
    for j in range(1, m + 1):
        dp[0][j] = dp[0][j - 1] + substitution_cost(None, dest[j - 1])
        back[0][j] = INSERT

    for i in range(1, n + 1):
        for j in range(1, m + 1):
            cost = substitution_cost(source[i - 1], dest[j - 1])
            candidates = [
                (dp[i - 1][j - 1] + cost, None if cost == 0 else SUBSTITUTE),
                (dp[i][j - 1] + substitution_cost(None, dest[j - 1]), INSERT),
                (dp[i - 1][j] + substitution_cost(source[i - 1], None), DELETE),
            ]
            # min() keeps the first of equal candidates.
            best_cost, best_op = min(candidates, key=lambda c: c[0])
            dp[i][j] = best_cost
            back[i][j] = best_op

    # backtrack
    source_padded, dest_padded, ops = [], [], []
    i, j = n, m
    while i > 0 or j > 0:
        op = back[i][j]
        if op == INSERT:
            source_padded.append(None)
            dest_padded.append(dest[j - 1])
            j -= 1
        elif op == DELETE:
            source_padded.append(source[i - 1])
            dest_padded.append(None)
            i -= 1
        else:
            source_padded.append(source[i - 1])
            dest_padded.append(dest[j - 1])
            i -= 1
            j -= 1
        ops.append(op)
    source_padded.reverse()
    dest_padded.reverse()
    ops.reverse()
    return dp[n][m], tuple(source_padded), tuple(dest_padded), ops


class Alignment:
    """An edit-distance alignment between the units of two words."""

    def __init__(self, source_word, dest_word):
        self.source_word = source_word
        self.dest_word = dest_word
        self._units = {
            SOURCE: tuple(source_word.units),
            DEST: tuple(dest_word.units),
        }
        self._result = None

    def rebind(self, source_word, dest_word):
        """This alignment attached to another pair of (identical) words.

        The computed result is shared, which is safe because it is never
        modified.
        """
        clone = Alignment.__new__(Alignment)
        clone.source_word = source_word
        clone.dest_word = dest_word
        clone._units = self._units
        clone._result = self._result
        return clone

    def _aligned(self):
        if self._result is None:
            self._result = align_units(self._units[SOURCE], self._units[DEST])
        return self._result

    @property
    def edit_distance(self):
        return self._aligned()[0]

    @property
    def source(self):
        """Source units padded with None where the dest has insertions."""
        return self._aligned()[1]

    @property
    def dest(self):
        """Dest units padded with None where the source has deletions."""
        return self._aligned()[2]

    @property
    def edit_operations(self):
        return list(self._aligned()[3])

    def __len__(self):
        return len(self._aligned()[3])

    def word(self, side):
        return self.source_word if side == SOURCE else self.dest_word

    def units(self, side):
        """The padded unit sequence for *side*."""
        return self.source if side == SOURCE else self.dest

    def word_offsets(self, side, start, stop):
        """Offsets in the word of the units in slots ``[start, stop)``."""
        padded = self.units(side)
        offset = sum(1 for u in padded[:start] if u is not None)
        width = sum(1 for u in padded[start:stop] if u is not None)
        return offset, offset + width

    @property
    def is_current(self):
        """False once either word has been reanalysed since alignment."""
        return (tuple(self.source_word.units) == self._units[SOURCE]
                and tuple(self.dest_word.units) == self._units[DEST])

    @property
    def match_rate(self):
        """Fraction of slots that match.

        A slot matches if its edit operation is None or if it pairs two
        morphemes.  Every slot carries the same weight.
        """
        ops = self._aligned()[3]
        if not ops:
            return 0.0
        matched = 0
        for s, d, op in zip(self.source, self.dest, ops):
            if op is None or (isinstance(s, Morpheme) and isinstance(d, Morpheme)):
                matched += 1
        return matched / len(ops)

    def segmentation(self, substitution_threshold=0):
        from phonology.segmentation import Segmentation
        return Segmentation(self, substitution_threshold)

    def __str__(self):
        return format_alignment(self)

    def __repr__(self):
        return (f"Alignment({self.source_word.transcription!r}, "
                f"{self.dest_word.transcription!r})")


# ── Formatting ──────────────────────────────────────────────────────────────

def _cell(unit):
    return "-" if unit is None else unit.transcription


def format_alignment(alignment, boundaries=(), emphasis=None):
    """Render an alignment as lines of centred cells.

    The lines are the source units, the dest units, the edit operations
    and, when *emphasis* gives an inclusive ``(first, last)`` slot range,
    a line of carets under those slots.  A ``|`` is drawn at every slot
    index in *boundaries*.  The last line is the match rate.
    """
    lines = [
        [_cell(u) for u in alignment.source],
        [_cell(u) for u in alignment.dest],
        [_OP_MNEMONICS[op] for op in alignment.edit_operations],
    ]
    longest = max((len(c) for line in lines for c in line), default=1)
    if emphasis is not None:
        first, last = emphasis
        lines.append([
            "^" * longest if first <= i <= last else ""
            for i in range(len(alignment))
        ])
    for n, b in enumerate(boundaries):
        for line in lines:
            line.insert(b + n, "|")
    rows = ["".join(c.center(longest) if c != "|" else c for c in line)
            for line in lines]
    rows.append(f"{alignment.match_rate:0.4f}")
    return "\n".join(rows)
