"""Hypothesis property tests for :mod:`modex.utils.text`.

- **Trim idempotence**: trimming twice equals trimming once.
- **Masking preserves length**: `masking_last` and `masking_range` only
  substitute characters.
- **Truncation bound**: the result never keeps more than `length` characters
  of the input.
"""

from __future__ import annotations

import pytest
from hypothesis import assume, given, settings
from hypothesis import strategies as st

from modex.utils import text

pytestmark = [pytest.mark.property]

SETTINGS = settings(max_examples=50, deadline=None)


@SETTINGS
@given(st.text())
def test_trimmed_is_idempotent(value: str) -> None:
    """trimmed(trimmed(s)) == trimmed(s)."""
    assert text.trimmed(text.trimmed(value)) == text.trimmed(value)


@SETTINGS
@given(st.text(), st.integers(min_value=-5, max_value=50))
def test_masking_last_preserves_length(value: str, count: int) -> None:
    assert len(text.masking_last(value, count)) == len(value)


@SETTINGS
@given(st.text(min_size=1), st.data())
def test_masking_range_preserves_unmasked_parts(value: str, data: st.DataObject) -> None:
    start = data.draw(st.integers(min_value=0, max_value=len(value)))
    end = data.draw(st.integers(min_value=start, max_value=len(value)))
    masked = text.masking_range(value, start, end)
    assert len(masked) == len(value)
    assert masked[:start] == value[:start]
    assert masked[end:] == value[end:]
    assert set(masked[start:end]) <= {text.MASK_CHARACTER}


@SETTINGS
@given(st.text(), st.integers(min_value=0, max_value=30))
def test_truncated_keeps_a_prefix(value: str, length: int) -> None:
    result = text.truncated(value, length)
    if len(value) <= length:
        assert result == value
    else:
        assert result == value[:length] + "..."


@SETTINGS
@given(st.text(alphabet=st.characters(categories=["Lu", "Ll", "Nd", "Zs"])))
def test_snake_cased_has_no_spaces(value: str) -> None:
    assume(value)
    assert " " not in text.snake_cased(value)
