"""Unicode normalization applied before encoding."""

from __future__ import annotations

import unicodedata

from utf8ctl.domain.types import NormalizationForm


def normalize(text: str, form: NormalizationForm | str = NormalizationForm.CURRENT) -> str:
    """Normalize *text* to *form*; ``CURRENT`` returns it unchanged.

    Raises:
        ValueError: If *form* is not a known normalization form.
    """
    form = NormalizationForm(form)
    if form is NormalizationForm.CURRENT:
        return text
    return unicodedata.normalize(form.value, text)
