"""Grouping of morpheme hypotheses into equivalence classes.

Hypotheses are grouped twice.  First phonetically: hypotheses whose
allomorph sets are compatible (one contains the other) fall in the same
group, represented by its most general allomorph set.  Then each group
is split semantically into classes whose members share some meaning.

When a group's members share no meaning as a whole, its subsets are
searched from largest to smallest for ones that do.  That search is
exponential, so it is only done for groups no larger than a cutoff;
larger groups are discarded.
"""

import itertools
import logging
from functools import reduce

from phonology.units import AllomorphSet, Morpheme

logger = logging.getLogger(__name__)

# Largest phonetic group whose subsets are searched for shared meaning.
POWERSET_SEARCH_CUTOFF = 8


class EquivalenceClass:
    """Hypotheses judged to propose the same morpheme."""

    def __init__(self, hypotheses, meaning):
        self.meaning = meaning
        self.hypotheses = [h.with_meaning(meaning) for h in hypotheses]

    @property
    def allomorphs(self):
        return AllomorphSet(
            itertools.chain.from_iterable(h.allomorphs for h in self.hypotheses)
        )

    @property
    def morpheme(self):
        return Morpheme(self.allomorphs, self.meaning)

    def __len__(self):
        return len(self.hypotheses)

    def __iter__(self):
        return iter(self.hypotheses)

    def __str__(self):
        return f"{self.morpheme} ({len(self)} hypotheses)"

    def __repr__(self):
        return f"EquivalenceClass({self})"


def shared_meaning(hypotheses):
    """Intersection of the meanings of *hypotheses*."""
    return reduce(lambda meaning, h: meaning & h.meaning,
                  hypotheses[1:], hypotheses[0].meaning)


# ── Phonetic classes ────────────────────────────────────────────────────────

def phonetic_classes(hypotheses):
    """Group *hypotheses* by compatible allomorph sets.

    Returns a list of ``(allomorphs, members)`` pairs in order of
    creation.  A hypothesis compatible with several groups joins the
    first of them.  When it is more general than that group's key, its
    allomorph set becomes the new key.
    """
    groups = []
    for hypothesis in hypotheses:
        allomorphs = hypothesis.allomorphs
        for group in groups:
            key, members = group
            if key.is_compatible(allomorphs):
                if allomorphs > key:
                    group[0] = allomorphs
                members.append(hypothesis)
                break
        else:
            groups.append([allomorphs, [hypothesis]])
    return [(key, members) for key, members in groups]


# ── Semantic classes ────────────────────────────────────────────────────────

def _largest_sharing_subset(members):
    """First subset, largest first, whose members share a meaning."""
    for size in range(len(members), 0, -1):
        for subset in itertools.combinations(members, size):
            meaning = shared_meaning(subset)
            if meaning:
                return list(subset), meaning
    return None, None


def semantic_classes(members, powerset_search_cutoff=POWERSET_SEARCH_CUTOFF,
                     logger=logger):
    """Split a phonetic group into classes of hypotheses sharing meaning."""
    meaning = shared_meaning(members)
    if meaning:
        return [EquivalenceClass(members, meaning)]
    if len(members) > powerset_search_cutoff:
        logger.warning(
            "Discarding %d hypotheses for /%s/: too many to search for "
            "shared meaning", len(members), members[0].allomorphs.transcription)
        return []

    classes = []
    remaining = list(members)
    while remaining:
        subset, meaning = _largest_sharing_subset(remaining)
        if subset is None:
            # Nothing left shares any meaning.
            classes.extend(EquivalenceClass([h], h.meaning) for h in remaining)
            break
        classes.append(EquivalenceClass(subset, meaning))
        remaining = [h for h in remaining if h not in subset]
    return classes


def cluster_hypotheses(hypotheses, powerset_search_cutoff=POWERSET_SEARCH_CUTOFF,
                       logger=None):
    """Partition *hypotheses* into equivalence classes.

    Duplicate hypotheses are dropped first, keeping the first of each.
    """
    logger = logger or logging.getLogger(__name__)
    hypotheses = list(dict.fromkeys(hypotheses))
    classes = []
    for allomorphs, members in phonetic_classes(hypotheses):
        logger.debug("Phonetic class /%s/: %d hypotheses",
                     allomorphs.transcription, len(members))
        for equivalence_class in semantic_classes(
                members, powerset_search_cutoff, logger=logger):
            logger.debug("Equivalence class %s", equivalence_class)
            classes.append(equivalence_class)
    return classes
