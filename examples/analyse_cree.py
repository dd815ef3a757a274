"""Find the morphemes of a small Plains Cree noun paradigm.

Aligns every pair of the nouns in cree.words, prints the first round of
morpheme hypotheses grouped into equivalence classes, then runs the
full beam search and prints the ranked analyses as interlinear glosses.

Usage:
    python analyse_cree.py [beam_width]
"""

import os
import sys

# Allow imports from the parent directory
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from gloss import format_results
from morphology.analysis import MorphologicalAnalysis
from morphology.beam_search import BeamSearch
from morphology.equivalence import cluster_hypotheses
from morphology.word_list import format_word_list, read_word_list
from phonology.phone_table import PhoneTable

DATA_DIR = os.path.dirname(os.path.abspath(__file__))


def _read(name):
    with open(os.path.join(DATA_DIR, name), encoding="utf-8") as f:
        return f.read()


def main():
    beam_width = int(sys.argv[1]) if len(sys.argv) > 1 else 3

    phones = PhoneTable(_read("cree.phones"))
    words = read_word_list(_read("cree.words"), phones)
    print(f"Read {len(words)} words over {len(phones)} phones")
    print(format_word_list(words))
    print()

    analysis = MorphologicalAnalysis(words)
    print(f"{len(analysis.alignments)} alignments, "
          f"score {analysis.score:0.4f}")
    classes = cluster_hypotheses(analysis.morpheme_hypotheses())
    print(f"First round: {len(classes)} candidate morphemes")
    for equivalence_class in classes:
        print(f"  {equivalence_class}")
    print()

    search = BeamSearch(analysis, beam_width).run()
    print(f"Search finished after {search.rounds} rounds")
    print()
    print(format_results(search))


if __name__ == "__main__":
    main()
