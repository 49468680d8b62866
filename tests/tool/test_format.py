"""Tests for the format library."""

import io

from kustomize_deps.tool.format import (
    JsonFormatter,
    TableFormatter,
    YamlFormatter,
    format_columns,
)


def test_format_columns_empty() -> None:
    """Tests with no columns."""
    assert list(format_columns([], [])) == []


def test_format_columns_empty_rows() -> None:
    """Tests with no rows."""
    assert list(format_columns(["a", "b", "c"], [])) == ["a    b    c    "]


def test_format_columns_rows() -> None:
    """Tests format with normal rows"""
    assert list(
        format_columns(
            ["name", "datasource"], [["nginx", "docker"], ["foo/bar", "github-tags"]]
        )
    ) == [
        "name       datasource     ",
        "nginx      docker         ",
        "foo/bar    github-tags    ",
    ]


def test_table_formatter_empty() -> None:
    """Table formatting with empty data."""
    assert list(TableFormatter(["name"]).format([])) == []


def test_table_formatter_missing_values() -> None:
    """Table formatting uses a placeholder for unset values."""
    formatter = TableFormatter(["depName", "currentValue"])
    assert list(
        formatter.format(
            [
                {"depName": "nginx", "currentValue": "1.19"},
                {"depName": "redis", "currentDigest": "sha256:cafef00d"},
            ]
        )
    ) == [
        "DEPNAME    CURRENTVALUE    ",
        "nginx      1.19            ",
        "redis      -               ",
    ]


def test_yaml_formatter() -> None:
    """Yaml output is a single list document."""
    out = io.StringIO()
    YamlFormatter().print([{"packageFile": "kustomization.yaml", "deps": []}], file=out)
    assert out.getvalue() == "---\n- packageFile: kustomization.yaml\n  deps: []\n"


def test_json_formatter() -> None:
    """Json output ends with a newline."""
    out = io.StringIO()
    JsonFormatter().print([{"deps": []}], file=out)
    assert out.getvalue() == '[\n    {\n        "deps": []\n    }\n]\n'
