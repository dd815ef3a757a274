"""Form/feature tables and the phone inventory built from them.

A form/feature table is comma-separated text.  The first row labels the
columns and one of them must be FORM; every other column is a feature.
``#`` starts a comment and blank lines are skipped, e.g.:

    FORM, VOWEL, NASAL, VOICED
    dʒ,   -,     -,     +
    m,    -,     +,     -      # bilabial nasal
"""

import csv
import logging
import re

from phonology.units import Phone

logger = logging.getLogger(__name__)

FORM = "FORM"


def _lines(data):
    if isinstance(data, str):
        return data.splitlines()
    return data


def _uncommented(lines):
    """Lines with comments removed, skipping any that end up blank."""
    for line in lines:
        line = line.split("#", 1)[0].strip()
        if line:
            yield line


def read_form_features(data):
    """Yield ``(form, features)`` for each row of a form/feature table.

    *data* is a string or an iterable of lines.  Features with empty
    values are left out; rows shorter than the header are padded.
    """
    rows = csv.reader(_uncommented(_lines(data)), skipinitialspace=True)
    labels = None
    for row in rows:
        row = [cell.strip() for cell in row]
        if labels is None:
            labels = row
            if FORM not in labels:
                raise ValueError(f"Missing {FORM} column in {labels}")
            continue
        row += [""] * (len(labels) - len(row))
        fields = dict(zip(labels, row))
        form = fields.pop(FORM)
        if not form:
            raise ValueError(f"Missing {FORM} value in row {row}")
        yield form, {f: v for f, v in fields.items() if v}


class PhoneTable(dict):
    """Phones with their features, indexed by IPA symbol."""

    def __init__(self, data=""):
        super().__init__()
        for symbol, features in read_form_features(data):
            self[symbol] = Phone(symbol, features)
        # Longest symbols first so that digraphs win over their parts.  The
        # final '.' catches symbols missing from the table.
        symbols = sorted(self, key=len, reverse=True)
        self._symbol_re = re.compile(
            "|".join([re.escape(s) for s in symbols] + ["."]), re.DOTALL)
        logger.debug("Read %d phones", len(self))

    def phone_sequence(self, text):
        """Split *text* into the phones of this table."""
        phones = []
        for symbol in self._symbol_re.findall(text):
            try:
                phones.append(self[symbol])
            except KeyError:
                raise ValueError(
                    f"/{symbol}/ in {text} is not in the phone table"
                ) from None
        return phones

    def __str__(self):
        width = max((len(s) for s in self), default=0)
        return "\n".join(
            f"{symbol:{width}} {self[symbol].features}"
            for symbol in sorted(self)
        )

    def __repr__(self):
        return f"PhoneTable: {len(self)} phones"
