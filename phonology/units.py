"""Phones, morphemes and words: the units a paradigm is analysed into.

A word is a sequence of units.  Before analysis every unit is a Phone;
as morphemes are discovered, runs of phones are replaced by
SurfaceMorpheme units that record which allomorph the word realises.
"""

from phonology.features import FeatureMatrix


class InvalidAllomorph(ValueError):
    """A surface form that is not one of the morpheme's allomorphs."""


# ── Phones ──────────────────────────────────────────────────────────────────

class Phone:
    """An IPA symbol paired with a matrix of phonetic features."""

    __slots__ = ("symbol", "features")

    def __init__(self, symbol, features=None):
        self.symbol = symbol
        self.features = FeatureMatrix(features)

    def __eq__(self, other):
        # Morphemes are never equal to phones, so compare kinds explicitly.
        if not isinstance(other, Phone):
            return NotImplemented
        return self.symbol == other.symbol and self.features == other.features

    def __hash__(self):
        return hash((self.symbol, self.features))

    def distance(self, other):
        """Fraction of this phone's features that *other* does not share.

        Featureless phones fall back to an indicator on the symbols.  The
        measure is symmetric when both phones have the same feature names.
        """
        if not self.features or not other.features:
            return 0 if self.symbol == other.symbol else 1
        return len(self.features - other.features) / len(self.features)

    @property
    def transcription(self):
        return str(self.symbol)

    def __str__(self):
        return f"{self.symbol} {self.features}"

    def __repr__(self):
        return f"Phone({self.symbol!r})"

    def __reduce__(self):
        return (Phone, (self.symbol, self.features))


def transcribe(phones):
    """Concatenated symbols of a phone sequence."""
    return "".join(p.transcription for p in phones)


# ── Morphemes ───────────────────────────────────────────────────────────────

class AllomorphSet(frozenset):
    """The alternative phone sequences that realise one morpheme."""

    def __new__(cls, allomorphs=()):
        return super().__new__(cls, (tuple(a) for a in allomorphs))

    def is_compatible(self, other):
        """True if one set of allomorphs contains the other."""
        return self <= other or other <= self

    @property
    def transcription(self):
        return "/".join(sorted(transcribe(a) for a in self))

    def __repr__(self):
        return f"AllomorphSet({self.transcription!r})"


class Morpheme:
    """A pairing of a set of allomorphs and a meaning."""

    def __init__(self, allomorphs, meaning):
        if not isinstance(allomorphs, AllomorphSet):
            allomorphs = AllomorphSet(allomorphs)
        self.allomorphs = allomorphs
        self.meaning = FeatureMatrix(meaning)

    @property
    def morpheme(self):
        return Morpheme(self.allomorphs, self.meaning)

    def is_compatible(self, other):
        """Same meaning, and one allomorph set is a subset of the other."""
        return (self.meaning == other.meaning
                and self.allomorphs.is_compatible(other.allomorphs))

    def realize(self, surface_form=None):
        """The SurfaceMorpheme for *surface_form*.

        The surface form may be omitted for a morpheme with one allomorph.
        """
        if surface_form is None:
            if len(self.allomorphs) != 1:
                raise InvalidAllomorph(
                    f"A surface form is required for {self.transcription}"
                )
            surface_form = next(iter(self.allomorphs))
        return SurfaceMorpheme(self.allomorphs, self.meaning, surface_form)

    def _key(self):
        return (self.allomorphs, self.meaning)

    def __eq__(self, other):
        if not isinstance(other, Morpheme):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self):
        return hash(self._key())

    @property
    def transcription(self):
        return self.allomorphs.transcription

    def __str__(self):
        return f"{self.transcription}: {self.meaning}"

    def __repr__(self):
        return f"Morpheme({self})"


class SurfaceMorpheme(Morpheme):
    """A morpheme as it is realised in one particular word."""

    def __init__(self, allomorphs, meaning, surface_form):
        super().__init__(allomorphs, meaning)
        surface_form = tuple(surface_form)
        if surface_form not in self.allomorphs:
            raise InvalidAllomorph(
                f"/{transcribe(surface_form)}/ is not an allomorph of "
                f"{self.transcription}"
            )
        self.surface_form = surface_form

    @property
    def surface_transcription(self):
        return transcribe(self.surface_form)

    def _key(self):
        return (self.allomorphs, self.meaning, self.surface_form)

    def __eq__(self, other):
        if not isinstance(other, Morpheme):
            return NotImplemented
        if not isinstance(other, SurfaceMorpheme):
            return False
        return self._key() == other._key()

    __hash__ = Morpheme.__hash__


# ── Words ───────────────────────────────────────────────────────────────────

class Word:
    """A sequence of phones and morphemes paired with a meaning."""

    def __init__(self, units, meaning):
        units = list(units)
        for unit in units:
            if not isinstance(unit, (Phone, Morpheme)):
                raise TypeError(f"Invalid unit {unit!r} in word")
        self.units = units
        self.meaning = FeatureMatrix(meaning)

    def __len__(self):
        return len(self.units)

    @property
    def fully_analyzed(self):
        """True once every unit is a morpheme."""
        return all(isinstance(u, Morpheme) for u in self.units)

    def replace_span(self, start, stop, morpheme):
        """Replace the units in ``[start, stop)`` by a single morpheme."""
        if not 0 <= start < stop <= len(self.units):
            raise IndexError(f"Invalid span {start}:{stop} in {self}")
        self.units[start:stop] = [morpheme]

    def copy(self):
        # Units are immutable values, so copying the list is enough.
        return Word(self.units, self.meaning)

    def key(self):
        """Hashable snapshot of the word's current state."""
        return (tuple(self.units), self.meaning)

    def __eq__(self, other):
        if not isinstance(other, Word):
            return NotImplemented
        return self.key() == other.key()

    __hash__ = None

    @property
    def transcription(self):
        """Phone symbols, with morphemes set off in square brackets."""
        parts = []
        for unit in self.units:
            if isinstance(unit, Phone):
                parts.append(unit.transcription)
            else:
                parts.append(f"[{unit.transcription}]")
        return "".join(parts)

    def __str__(self):
        return f"{self.transcription}: {self.meaning}"

    def __repr__(self):
        return f"Word({self})"
