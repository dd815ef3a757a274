"""Interlinear gloss display for morphological analyses.

Each analysed word is printed as two aligned rows in the style of
linguistics journals:
  Row 1: the word's surface form with morpheme boundaries
  Row 2: the meaning of each morpheme, ``?`` for unanalysed phones

For example:
  atim-wak
  dog.proximate-plural
"""

from phonology.units import Morpheme, SurfaceMorpheme, transcribe


def _chunks(word):
    """Split a word into morphemes and runs of unanalysed phones.

    Returns a list of ``(form, label)`` pairs.
    """
    chunks = []
    phones = []
    for unit in word.units:
        if isinstance(unit, Morpheme):
            if phones:
                chunks.append((transcribe(phones), "?"))
                phones = []
            if isinstance(unit, SurfaceMorpheme):
                form = unit.surface_transcription
            else:
                form = unit.transcription
            label = ".".join(str(unit.meaning[f])
                             for f in sorted(unit.meaning, key=str))
            chunks.append((form, label or "?"))
        else:
            phones.append(unit)
    if phones:
        chunks.append((transcribe(phones), "?"))
    return chunks


def format_word_gloss(word):
    """Format a word as a two-row interlinear gloss."""
    chunks = _chunks(word)
    # Column widths based on the wider cell in each column
    widths = [max(len(form), len(label)) for form, label in chunks]
    row_forms = "-".join(f.ljust(n) for (f, _), n in zip(chunks, widths))
    row_labels = "-".join(l.ljust(n) for (_, l), n in zip(chunks, widths))
    return f"{row_forms.rstrip()}\n{row_labels.rstrip()}"


def format_analysis(analysis, rank=1, complete=True):
    """Human-readable report of one analysis."""
    state = "complete" if complete else "incomplete"
    buf = [f"── Analysis {rank} ({state}, score {analysis.score:0.4f}) ──", ""]

    buf.append("Morphemes:")
    if analysis.morphemes:
        for morpheme in sorted(analysis.morphemes, key=str):
            buf.append(f"  {morpheme}")
    else:
        buf.append("  none")
    buf.append("")

    buf.append("Words:")
    for word in analysis.words:
        for line in format_word_gloss(word).split("\n"):
            buf.append(f"  {line}")
        buf.append(f"  {word.meaning}")
        buf.append("")
    return "\n".join(buf).rstrip()


def format_results(search):
    """Report every analysis of a beam search, best first."""
    completed = {id(a) for a in search.completed}
    reports = [
        format_analysis(analysis, rank, id(analysis) in completed)
        for rank, analysis in enumerate(search.results(), 1)
    ]
    return "\n\n".join(reports)
