from pathlib import Path
from types import SimpleNamespace

import pytest

from morphology.word_list import read_word_list
from phonology.features import FeatureMatrix
from phonology.phone_table import PhoneTable
from phonology.units import Morpheme, Word

EXAMPLES_DIR = Path(__file__).resolve().parent.parent / "examples"

# 'i' and 'y' share a CLASS, so they are 0.5 apart.  Every other pair of
# different phones is 1 apart.
HAPPY_PHONES = """\
FORM, LETTER, CLASS
i, i, iy
y, y, iy
a, a, a
e, e, e
h, h, h
n, n, n
p, p, p
s, s, s
u, u, u
"""

JUMPS_PHONES = """\
FORM, VOWEL, NASAL, VOICED
dʒ,   -,     -,     +
m,    -,     +,     -
ŋ,    -,     +,     +
p,    -,     -,     -
s,    -,     -,     -
z,    -,     -,     +
i,    +,     -,     +
ʌ,    +,     -,     +
"""

JUMPS_WORDS = """\
# English verbs
FORM,    LEMMA, PERNUM,  ASPECT
dʒʌmp,   jump,  non-3sg, perfect
dʒʌmps,  jump,  3sg,     perfect
dʒʌmpiŋ, jump,  ,        progressive
si,      see,   non-3sg, perfect
siz,     see,   3sg,     perfect
siiŋ,    see,   ,        progressive
"""

CATS_WORDS = """\
FORM, LEMMA, NUMBER
cat,  cat,   sg
cats, cat,   pl
"""


@pytest.fixture
def happy():
    """Words built from happy, unhappy and unhappiness."""
    phones = PhoneTable(HAPPY_PHONES)
    un_phones = phones.phone_sequence("un")
    happy_phones = phones.phone_sequence("happy")
    happi_phones = phones.phone_sequence("happi")
    ness_phones = phones.phone_sequence("ness")

    un_meaning = FeatureMatrix(POL="neg")
    happy_meaning = FeatureMatrix(LEMMA="happy")
    ness_meaning = FeatureMatrix(POS="noun")

    un_morph = Morpheme([un_phones], un_meaning)
    happy_morph = Morpheme([happy_phones], happy_meaning)
    happy_happi_morph = Morpheme([happy_phones, happi_phones], happy_meaning)
    ness_morph = Morpheme([ness_phones], ness_meaning)

    return SimpleNamespace(
        phones=phones,
        un_meaning=un_meaning,
        happy_meaning=happy_meaning,
        ness_meaning=ness_meaning,
        un_morph=un_morph,
        happy_morph=happy_morph,
        happy_happi_morph=happy_happi_morph,
        ness_morph=ness_morph,
        # all phones
        happy_p=Word(happy_phones, happy_meaning),
        unhappy_p=Word(un_phones + happy_phones, un_meaning + happy_meaning),
        unhappiness_p=Word(un_phones + happi_phones + ness_phones,
                           un_meaning + happy_meaning + ness_meaning),
        # phones and morphemes
        unhappy_pm=Word([un_morph] + happy_phones, un_meaning + happy_meaning),
        # all morphemes
        happy_m=Word([happy_morph], happy_meaning),
        unhappy_m=Word([un_morph, happy_morph], un_meaning + happy_meaning),
        happy_happi_ness_m=Word([happy_happi_morph, ness_morph], happy_meaning),
        unhappy_happi_ness_m=Word([un_morph, happy_happi_morph, ness_morph],
                                  un_meaning + happy_meaning + ness_meaning),
    )


@pytest.fixture
def jumps_phones():
    return PhoneTable(JUMPS_PHONES)


@pytest.fixture
def cree_words():
    """The sample Cree paradigm, indexed by transcription."""
    phones = (EXAMPLES_DIR / "cree.phones").read_text(encoding="utf-8")
    words = (EXAMPLES_DIR / "cree.words").read_text(encoding="utf-8")
    return {w.transcription: w for w in read_word_list(words, phones)}


@pytest.fixture
def cats():
    """cat and cats as featureless phones."""
    return read_word_list(CATS_WORDS)
