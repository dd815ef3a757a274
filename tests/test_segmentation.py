from phonology.alignment import DEST, INSERT, SOURCE, SUBSTITUTE, Alignment
from phonology.segmentation import Segmentation, phonetic_operations
from phonology.units import Word


def test_phonetic_operations(happy):
    alignment = Alignment(happy.happy_p, happy.unhappiness_p)
    assert phonetic_operations(alignment, 0.5)[6] is None
    assert phonetic_operations(alignment, 0.2)[6] == SUBSTITUTE
    # The alignment itself is unchanged.
    assert alignment.edit_operations[6] == SUBSTITUTE


def test_segmentation_with_loose_threshold(happy):
    alignment = Alignment(happy.happy_p, happy.unhappiness_p)
    segments = alignment.segmentation(0.5)
    assert segments.boundaries == [2, 7]
    assert len(segments) == 3
    assert [(s.start, s.stop) for s in segments] == [(0, 2), (2, 7), (7, 11)]
    assert segments[0].phonetically_different
    assert segments[1].phonetically_same
    assert segments[2].phonetically_different


def test_segmentation_with_strict_threshold(happy):
    alignment = Alignment(happy.happy_p, happy.unhappiness_p)
    assert alignment.segmentation(0.2).boundaries == [2, 6, 7]
    assert alignment.segmentation().boundaries == [2, 6, 7]
    segments = alignment.segmentation(0.2)
    assert len(segments) == 4
    assert segments[2].phonetically_different
    assert segments.edit_operations == alignment.edit_operations


def test_segment_units(happy):
    alignment = Alignment(happy.happy_p, happy.unhappiness_p)
    un, happi, ness = Segmentation(alignment, 0.5)
    assert un.is_empty(SOURCE)
    assert not un.is_pure_phones(SOURCE)
    assert un.is_pure_phones(DEST)
    assert un.units(SOURCE) == [None, None]
    assert happi.word_span(SOURCE) == (0, 5)
    assert happi.word_span(DEST) == (2, 7)
    assert ness.word_span(DEST) == (7, 11)
    assert happi.word(DEST) is happy.unhappiness_p
    assert happi.surface_form(DEST) == tuple(happy.phones.phone_sequence("happi"))
    assert len(happi) == 5


def test_boundary_after_every_morpheme(happy):
    alignment = Alignment(happy.unhappy_m, happy.unhappy_happi_ness_m)
    assert alignment.edit_operations == [None, None, INSERT]
    segments = alignment.segmentation()
    assert segments.boundaries == [1, 2]
    assert segments[0].phonetically_same
    assert segments[1].phonetically_same
    assert segments[2].phonetically_different


def test_segment_meanings(happy):
    alignment = Alignment(happy.happy_m, happy.unhappy_happi_ness_m)
    segments = alignment.segmentation()
    assert len(segments) == 3
    assert segments[0].meaning(SOURCE) is None
    assert segments[1].meaning(SOURCE) == happy.happy_meaning
    assert segments[2].meaning(SOURCE) is None
    assert segments[0].meaning(DEST) == happy.un_meaning
    assert segments[1].meaning(DEST) == happy.happy_meaning
    assert segments[2].meaning(DEST) == happy.ness_meaning


def test_phone_segments_have_no_meaning(happy):
    alignment = Alignment(happy.happy_p, happy.unhappy_p)
    for segment in alignment.segmentation():
        assert segment.meaning(DEST) is None


def test_empty_segmentation():
    alignment = Alignment(Word([], {}), Word([], {}))
    segments = alignment.segmentation()
    assert len(segments) == 0
    assert segments.boundaries == []


def test_segmentation_equality(happy):
    alignment = Alignment(happy.happy_p, happy.unhappiness_p)
    a = alignment.segmentation(0.5)
    b = alignment.segmentation(0.5)
    assert a == b
    assert hash(a) == hash(b)
    assert a[1] == b[1]
    assert hash(a[1]) == hash(b[1])
    assert a != alignment.segmentation(0.2)
    other = Alignment(happy.happy_p, happy.unhappiness_p)
    assert a != other.segmentation(0.5)


def test_segmentation_strings(happy):
    alignment = Alignment(happy.happy_p, happy.unhappy_p)
    segments = alignment.segmentation()
    assert str(segments) == "--|happy\nun|happy\nII|     \n0.7143"
    assert str(segments[0]) == (
        "--|happy\nun|happy\nII|     \n^^|     \n0.7143")
    assert repr(segments[1]) == "Segment(1, 2:7)"
