"""Discover the morphemes of a paradigm by aligning its words.

Reads a word list, and optionally a phone table, both as form/feature
tables, then runs a beam search over morphological analyses and prints
the best of them as interlinear glosses.

Usage:
    python analyze_morphemes.py words.csv phones.csv
    python analyze_morphemes.py -w 5 -l INFO words.csv
    cat words.csv | python analyze_morphemes.py -
"""

import argparse
import logging
import sys

from gloss import format_results
from morphology.analysis import MorphologicalAnalysis
from morphology.beam_search import BeamSearch
from morphology.parameters import format_parameters, load_parameters
from morphology.word_list import format_word_list, read_word_list
from phonology.phone_table import PhoneTable

logger = logging.getLogger(__name__)


def _read(filename):
    """Text of *filename*, or of stdin if it is ``-``."""
    if filename == "-":
        return sys.stdin.read()
    with open(filename, encoding="utf-8") as f:
        return f.read()


def _parser():
    parser = argparse.ArgumentParser(
        description="Discover the morphemes of a paradigm of words.")
    parser.add_argument("words", nargs="?",
                        help="word list: FORM and meaning columns")
    parser.add_argument("phones", nargs="?",
                        help="phone table: FORM and phonetic feature columns")
    parser.add_argument("-c", "--config", action="append", default=[],
                        help="YAML parameter file; may be repeated, "
                             "earlier files take precedence")
    parser.add_argument("-l", "--logging", metavar="LEVEL",
                        help="logging level, e.g. DEBUG or INFO")
    parser.add_argument("-w", "--beam-width", type=int, metavar="WIDTH",
                        help="number of analyses kept in the beam")
    parser.add_argument("-t", "--threshold", type=float, metavar="TAU",
                        help="phone substitution threshold")
    return parser


def analyze(word_data, phone_data=None, params=None):
    """Run the beam search over a paradigm and return it when done."""
    params = params or load_parameters()
    phone_table = PhoneTable(phone_data) if phone_data else None
    words = read_word_list(word_data, phone_table)
    logger.info("Words\n%s", format_word_list(words))
    analysis = MorphologicalAnalysis(
        words,
        powerset_search_cutoff=params["powerset_search_cutoff"],
        substitution_threshold=params["substitution_threshold"],
    )
    return BeamSearch(analysis, params["beam_width"]).run()


def main(argv=None, stdout=sys.stdout):
    parser = _parser()
    args = parser.parse_args(argv)
    try:
        params = load_parameters(args.config)
    except (OSError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    if args.logging:
        params["logging"] = args.logging
    if args.beam_width is not None:
        params["beam_width"] = args.beam_width
    if args.threshold is not None:
        params["substitution_threshold"] = args.threshold
    if args.words:
        params["words"] = args.words
    if args.phones:
        params["phones"] = args.phones
    if not params.get("words"):
        parser.error("no word list given")

    try:
        logging.basicConfig(
            stream=sys.stderr,
            level=str(params["logging"]).upper(),
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        logger.debug("Parameters\n%s", format_parameters(params))
        word_data = _read(params["words"])
        phone_data = _read(params["phones"]) if params.get("phones") else None
        search = analyze(word_data, phone_data, params)
    except (OSError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    print(format_results(search), file=stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
