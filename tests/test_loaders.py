import pytest

from conftest import JUMPS_PHONES, JUMPS_WORDS
from morphology.word_list import format_word_list, read_word_list
from phonology.features import FeatureMatrix
from phonology.phone_table import PhoneTable, read_form_features
from phonology.units import Phone

TRANSCRIPTIONS = ["dʒʌmp", "dʒʌmps", "dʒʌmpiŋ", "si", "siz", "siiŋ"]


# ── Form/feature tables ─────────────────────────────────────────────────────

def test_read_form_features():
    rows = list(read_form_features(JUMPS_PHONES))
    assert len(rows) == 8
    assert rows[0] == ("dʒ", {"VOWEL": "-", "NASAL": "-", "VOICED": "+"})
    assert rows[-1] == ("ʌ", {"VOWEL": "+", "NASAL": "-", "VOICED": "+"})


def test_read_form_features_from_lines():
    lines = ["FORM, A, B\n", "# comment\n", "\n", "x, 1, 2  # trailing\n"]
    assert list(read_form_features(lines)) == [("x", {"A": "1", "B": "2"})]


def test_read_form_features_drops_empty_values():
    rows = list(read_form_features("FORM, A, B\nx, , 2\ny, 1"))
    assert rows == [("x", {"B": "2"}), ("y", {"A": "1"})]


def test_missing_form_column():
    with pytest.raises(ValueError):
        list(read_form_features("COL A, COL B\na, b"))


def test_missing_form_value():
    with pytest.raises(ValueError):
        list(read_form_features("FORM, A\n, 1"))


# ── Phone tables ────────────────────────────────────────────────────────────

def test_phone_table(jumps_phones):
    assert sorted(jumps_phones) == sorted(["dʒ", "m", "ŋ", "p", "s", "z", "i", "ʌ"])
    assert jumps_phones["dʒ"] == Phone(
        "dʒ", {"VOWEL": "-", "NASAL": "-", "VOICED": "+"})
    assert jumps_phones["m"].features == FeatureMatrix(
        VOWEL="-", NASAL="+", VOICED="-")


def test_unigraphs(jumps_phones):
    p = jumps_phones
    assert p.phone_sequence("simiŋ") == [p["s"], p["i"], p["m"], p["i"], p["ŋ"]]


def test_digraphs(jumps_phones):
    p = jumps_phones
    assert p.phone_sequence("dʒʌmp") == [p["dʒ"], p["ʌ"], p["m"], p["p"]]


def test_unknown_symbol(jumps_phones):
    with pytest.raises(ValueError) as excinfo:
        jumps_phones.phone_sequence("six")
    assert "/x/" in str(excinfo.value)


def test_phone_table_strings(jumps_phones):
    assert str(jumps_phones).split("\n") == [
        "dʒ [NASAL = -, VOICED = +, VOWEL = -]",
        "i  [NASAL = -, VOICED = +, VOWEL = +]",
        "m  [NASAL = +, VOICED = -, VOWEL = -]",
        "p  [NASAL = -, VOICED = -, VOWEL = -]",
        "s  [NASAL = -, VOICED = -, VOWEL = -]",
        "z  [NASAL = -, VOICED = +, VOWEL = -]",
        "ŋ  [NASAL = +, VOICED = +, VOWEL = -]",
        "ʌ  [NASAL = -, VOICED = +, VOWEL = +]",
    ]
    assert repr(jumps_phones) == "PhoneTable: 8 phones"


# ── Word lists ──────────────────────────────────────────────────────────────

def test_word_list_with_phone_table(jumps_phones):
    words = read_word_list(JUMPS_WORDS, jumps_phones)
    assert [w.transcription for w in words] == TRANSCRIPTIONS
    jump = words[0]
    assert jump.meaning == FeatureMatrix(
        LEMMA="jump", PERNUM="non-3sg", ASPECT="perfect")
    assert [p.symbol for p in jump.units] == ["dʒ", "ʌ", "m", "p"]
    assert jump.units[0].features == FeatureMatrix(
        VOWEL="-", NASAL="-", VOICED="+")


def test_word_list_with_phone_table_text():
    words = read_word_list(JUMPS_WORDS, JUMPS_PHONES)
    assert [w.transcription for w in words] == TRANSCRIPTIONS
    assert len(words[0]) == 4


def test_word_list_without_phone_table():
    words = read_word_list(JUMPS_WORDS)
    assert [w.transcription for w in words] == TRANSCRIPTIONS
    assert words[0].units == [Phone(c) for c in "dʒʌmp"]
    # A missing value leaves the feature out of the meaning.
    assert words[2].meaning == FeatureMatrix(LEMMA="jump", ASPECT="progressive")


def test_word_list_without_form_column(jumps_phones):
    with pytest.raises(ValueError):
        read_word_list("COL A, COL B\na, b", jumps_phones)


def test_format_word_list():
    words = read_word_list("FORM, LEMMA\ncat, cat\ndog, dog")
    assert format_word_list(words) == "cat: [LEMMA = cat]\ndog: [LEMMA = dog]"
