# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Unit tests for the tool dispatch boundary."""

import json
from pathlib import Path

import pytest

from symscan.tools import (
    TOOLS,
    ToolArgumentError,
    handle_tool_call,
    parse_arguments,
)


def _write_file(path: Path, content: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


def test_ph4_tool_001_catalogue_lists_both_tools_with_path_required() -> None:
    assert [tool["name"] for tool in TOOLS] == ["get_functions", "get_classes"]
    for tool in TOOLS:
        schema = tool["inputSchema"]
        assert schema["required"] == ["path"]
        assert schema["properties"]["maxDepth"]["default"] == 4


def test_ph4_tool_002_get_functions_renders_text_lines(
    tmp_path: Path, sample_js: str
) -> None:
    _write_file(tmp_path / "sample.js", sample_js)

    output = handle_tool_call("get_functions", {"path": str(tmp_path)})

    assert output.splitlines() == [
        "testFunction1; sample.js:1",
        "testFunction2; sample.js:2",
    ]


def test_ph4_tool_003_get_classes_renders_json_with_class_key(
    tmp_path: Path, sample_js: str
) -> None:
    _write_file(tmp_path / "sample.js", sample_js)

    output = handle_tool_call(
        "get_classes", {"path": str(tmp_path)}, output_format="json"
    )

    assert json.loads(output) == [
        {"class": "TestClass1", "line": 3, "file": "sample.js"},
        {"class": "TestClass2", "line": 4, "file": "sample.js"},
    ]


def test_ph4_tool_004_get_functions_json_uses_function_key(
    tmp_path: Path, sample_js: str
) -> None:
    _write_file(tmp_path / "sample.js", sample_js)

    output = handle_tool_call(
        "get_functions", {"path": str(tmp_path)}, output_format="json"
    )

    assert json.loads(output)[0] == {
        "function": "testFunction1",
        "line": 1,
        "file": "sample.js",
    }


def test_ph4_tool_005_unknown_tool_returns_error_descriptor() -> None:
    output = handle_tool_call("get_variables", {"path": "."})

    assert json.loads(output) == {"error": "Unknown tool: get_variables"}


def test_ph4_tool_006_nonexistent_path_returns_empty_result(tmp_path: Path) -> None:
    missing = str(tmp_path / "missing")

    assert handle_tool_call("get_functions", {"path": missing}) == ""
    assert handle_tool_call("get_classes", {"path": missing}) == ""
    assert (
        json.loads(
            handle_tool_call("get_classes", {"path": missing}, output_format="json")
        )
        == []
    )


def test_ph4_tool_007_max_depth_argument_limits_descent(tmp_path: Path) -> None:
    _write_file(tmp_path / "top.py", "def top():\n    pass\n")
    _write_file(tmp_path / "pkg" / "inner.py", "def inner():\n    pass\n")

    shallow = handle_tool_call("get_functions", {"path": str(tmp_path), "maxDepth": 0})
    deep = handle_tool_call("get_functions", {"path": str(tmp_path), "maxDepth": 1.0})

    assert shallow.splitlines() == ["top; top.py:1"]
    assert set(deep.splitlines()) == {"top; top.py:1", "inner; pkg/inner.py:1"}


def test_ph4_tool_008_invalid_arguments_return_error_descriptor() -> None:
    for arguments in (
        None,
        {},
        {"path": ""},
        {"path": ".", "maxDepth": "2"},
        {"path": ".", "maxDepth": -1},
        {"path": ".", "maxDepth": 1.5},
        {"path": ".", "maxDepth": True},
    ):
        output = handle_tool_call("get_functions", arguments)
        assert "error" in json.loads(output)


def test_ph4_tool_009_single_unreadable_file_surfaces_error(tmp_path: Path) -> None:
    broken = tmp_path / "broken.js"
    broken.write_bytes(b"\xff\xfe")

    output = handle_tool_call("get_functions", {"path": str(broken)})

    assert "broken.js" in json.loads(output)["error"]


def test_ph4_tool_010_unreadable_file_in_directory_is_skipped(tmp_path: Path) -> None:
    _write_file(tmp_path / "one.js", "function one() {}\n")
    _write_file(tmp_path / "two.py", "def two():\n    pass\n")
    (tmp_path / "broken.js").write_bytes(b"\xff\xfe")

    output = handle_tool_call("get_functions", {"path": str(tmp_path)})

    assert set(output.splitlines()) == {"one; one.js:1", "two; two.py:1"}


def test_ph4_tool_011_parse_arguments_applies_default_depth() -> None:
    request = parse_arguments({"path": "src"})

    assert request.root_path == "src"
    assert request.max_depth == 4
    with pytest.raises(ToolArgumentError):
        parse_arguments({"maxDepth": 1})
