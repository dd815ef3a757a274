"""Read a paradigm of words from a form/feature table.

The FORM column gives each word's transcription and the remaining
columns its meaning.  With a phone table the transcription is split
into the table's phones; without one, every character becomes a
featureless phone.
"""

import logging

from phonology.phone_table import PhoneTable, read_form_features
from phonology.units import Phone, Word

logger = logging.getLogger(__name__)


def read_word_list(word_data, phone_table=None):
    """Return the list of Words in *word_data*.

    *phone_table* may be a PhoneTable, the text of one, or None.
    """
    if phone_table is not None and not isinstance(phone_table, PhoneTable):
        phone_table = PhoneTable(phone_table)
    words = []
    for form, features in read_form_features(word_data):
        if phone_table:
            phones = phone_table.phone_sequence(form)
        else:
            phones = [Phone(c) for c in form]
        words.append(Word(phones, features))
    logger.debug("Read %d words", len(words))
    return words


def format_word_list(words):
    """One word per line: transcription followed by meaning."""
    return "\n".join(str(w) for w in words)
