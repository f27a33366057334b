"""Intensive fuzzing of the parser and serializer.

Skipped in normal runs; run with: pytest -m fuzz
"""

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from pluralex.syntax import parse, serialize
from tests.strategies import chaos_sources

pytestmark = pytest.mark.fuzz


@settings(max_examples=1500, deadline=None)
@given(chaos_sources(max_size=200))
def test_parse_never_raises(source: str) -> None:
    """Long chaotic inputs never crash the parser."""
    parse(source)


@settings(max_examples=1500, deadline=None)
@given(st.text(max_size=200))
def test_serialize_output_reparses(source: str) -> None:
    """Serialized output of any parse is itself parseable."""
    output = serialize(parse(source))
    assert isinstance(parse(output), tuple)
