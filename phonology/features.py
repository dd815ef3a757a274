"""Feature-value matrices used for both phonetic features and meanings.

A matrix maps feature names to values.  Besides the usual mapping
interface it defines the three set operations the morpheme search is
built on:

  a & b   pairs that have the same value in both matrices
  a + b   union of the pairs; a shared feature with two values is an error
  a - b   pairs of *a* whose value is different or missing in *b*
"""

from collections.abc import Mapping


class FeatureConflict(ValueError):
    """Two matrices assign different values to the same feature."""

    def __init__(self, feature, value, other_value):
        super().__init__(
            f"Mismatched feature '{feature}': '{value}'/'{other_value}'"
        )
        self.feature = feature
        self.value = value
        self.other_value = other_value


class FeatureMatrix(Mapping):
    """Immutable, hashable mapping of features to values."""

    __slots__ = ("_pairs", "_hash")

    def __init__(self, pairs=None, **kwargs):
        self._pairs = dict(pairs or {}, **kwargs)
        self._hash = None

    @classmethod
    def sum(cls, matrices):
        """Union of all *matrices*, raising FeatureConflict on a mismatch."""
        total = cls()
        for matrix in matrices:
            total = total + matrix
        return total

    def __getitem__(self, feature):
        return self._pairs[feature]

    def __iter__(self):
        return iter(self._pairs)

    def __len__(self):
        return len(self._pairs)

    def __hash__(self):
        if self._hash is None:
            self._hash = hash(frozenset(self._pairs.items()))
        return self._hash

    def __eq__(self, other):
        if isinstance(other, Mapping):
            return self._pairs == dict(other.items())
        return NotImplemented

    def __and__(self, other):
        return FeatureMatrix(
            (f, v) for f, v in self._pairs.items()
            if f in other and other[f] == v
        )

    def __add__(self, other):
        pairs = dict(self._pairs)
        for f, v in other.items():
            if f in pairs and pairs[f] != v:
                raise FeatureConflict(f, pairs[f], v)
            pairs[f] = v
        return FeatureMatrix(pairs)

    def __sub__(self, other):
        return FeatureMatrix(
            (f, v) for f, v in self._pairs.items()
            if f not in other or other[f] != v
        )

    def __str__(self):
        pairs = sorted(self._pairs.items(), key=lambda fv: str(fv[0]))
        return "[" + ", ".join(f"{f} = {v}" for f, v in pairs) + "]"

    __repr__ = __str__

    def __reduce__(self):
        return (FeatureMatrix, (self._pairs,))
