"""Unit tests for :mod:`modex.codec.mappings`."""

import io
import json

import pytest
from rich.console import Console

from modex.codec import mappings


def test_update_is_right_biased_and_in_place():
    target = {"a": 1, "b": 2}
    assert mappings.update(target, {"b": 3, "c": 4}) is None
    assert target == {"a": 1, "b": 3, "c": 4}


def test_to_json_str_compact():
    assert mappings.to_json_str({"name": "Alice", "age": 25}) == '{"name":"Alice","age":25}'


def test_to_json_str_pretty_only_changes_whitespace():
    mapping = {"name": "Alice", "tags": ["a", "b"]}
    pretty = mappings.to_json_str(mapping, pretty_printed=True)
    assert pretty == '{\n  "name": "Alice",\n  "tags": [\n    "a",\n    "b"\n  ]\n}'
    assert json.loads(pretty) == json.loads(mappings.to_json_str(mapping))


def test_to_json_str_keeps_non_ascii():
    assert mappings.to_json_str({"greeting": "안녕"}) == '{"greeting":"안녕"}'


@pytest.mark.parametrize("mapping", [{"bad": object()}, {"nan": float("nan")}])
def test_to_json_str_placeholder_on_failure(mapping):
    assert mappings.to_json_str(mapping) == "{}"
    assert mappings.to_json_data(mapping) == b""


def test_to_json_str_placeholder_when_too_deeply_nested():
    nested: list = []
    for _ in range(100_000):
        nested = [nested]
    assert mappings.to_json_str({"nested": nested}) == "{}"
    assert mappings.to_json_data({"nested": nested}) == b""


def test_to_json_data_is_utf8():
    assert mappings.to_json_data({"k": "é"}) == '{"k":"é"}'.encode()


def test_to_json_str_empty_mapping():
    assert mappings.to_json_str({}) == "{}"


def test_to_query():
    assert mappings.to_query({"name": "Alice", "age": "25"}) == "name=Alice&age=25"
    assert mappings.to_query({}) == ""


def test_to_query_does_not_escape():
    assert mappings.to_query({"q": "a b&c"}) == "q=a b&c"


def test_print_json_writes_to_console():
    buffer = io.StringIO()
    console = Console(file=buffer, color_system=None, width=80)
    mappings.print_json({"name": "Alice"}, console=console)
    assert '"name": "Alice"' in buffer.getvalue()
