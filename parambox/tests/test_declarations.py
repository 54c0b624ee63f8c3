"""Tests for declaration files and building boxes from them."""

from __future__ import annotations

from pathlib import Path

import pytest

from parambox import InvalidConditionError
from parambox.constraints import AllowList, BlockList, Close, Open
from parambox.declarations import build_box, load_declarations, parse_declarations
from parambox.types import BOOL, F64, I32, STR, U64


def test_load_toml_declarations(declarations_toml: Path):
    declarations = load_declarations(declarations_toml)

    assert declarations.source == declarations_toml
    assert declarations.description == "Example run parameters"
    assert [d.name for d in declarations.parameters] == ["steps", "label", "ratio", "seed"]

    steps = declarations.parameters[0]
    assert steps.param_type is I32
    assert (steps.min, steps.max) == (-10, 10)
    assert steps.blacklist == (2, 3, 4)
    assert steps.explanation == "Number of steps"


def test_load_yaml_declarations(fixtures_path: Path):
    declarations = load_declarations(fixtures_path / "declarations.yaml")

    assert [d.name for d in declarations.parameters] == ["steps", "verbose"]
    assert declarations.parameters[1].param_type is BOOL
    assert declarations.parameters[1].default is False


def test_build_box_applies_declarations(declarations_toml: Path):
    box = build_box(load_declarations(declarations_toml))

    assert box.names() == ["steps", "label", "ratio", "seed"]
    assert box.param_type("steps") is I32
    assert box.param_type("label") is STR
    assert box.param_type("ratio") is F64
    assert box.param_type("seed") is U64

    assert box.parameter("steps").core.range == (Close(-10), Close(10))
    assert box.parameter("steps").core.list_condition == BlockList((2, 3, 4))
    assert box.parameter("label").core.list_condition == AllowList(("alpha", "beta"))
    assert box.parameter("ratio").core.range == (Open(0.0), Close(1.0))

    assert box.get_value("steps") is None
    assert box.get_value("label") == "alpha"
    assert box.get_value("seed") == 42
    assert box.parameter("seed").visible is False
    assert box.get_explanation("ratio") == "Mixing ratio"
    assert box.error_count == 0


def test_single_bounds():
    declarations = parse_declarations(
        {
            "parameters": [
                {"name": "lo", "type": "i32", "min": 0, "min_open": True},
                {"name": "hi", "type": "i32", "max": 9},
            ]
        }
    )
    box = build_box(declarations)
    assert box.parameter("lo").core.range == (Open(0), None)
    assert box.parameter("hi").core.range == (None, Close(9))


def test_default_outside_range_propagates():
    declarations = parse_declarations(
        {"parameters": [{"name": "n", "type": "u8", "max": 3, "default": 5}]}
    )
    with pytest.raises(InvalidConditionError):
        build_box(declarations)


@pytest.mark.parametrize(
    "data,match",
    [
        ({"parameters": {"name": "x"}}, "list of tables"),
        ({"parameters": ["x"]}, "not a table"),
        ({"parameters": [{"type": "i32"}]}, "no name"),
        ({"parameters": [{"name": "x"}]}, "no type"),
        ({"parameters": [{"name": "x", "type": "i31"}]}, "Unknown parameter type"),
        ({"parameters": [{"name": "x", "type": "i32"}, {"name": "x", "type": "i32"}]}, "more than once"),
        ({"parameters": [{"name": "x", "type": "i32", "blacklist": [1], "whitelist": [2]}]}, "mutually exclusive"),
        ({"parameters": [{"name": "x", "type": "i32", "blacklist": 1}]}, "must be a list"),
        ({"parameters": [{"name": "x", "type": "i32", "min": 0, "min_open": "false"}]}, "min_open must be true or false"),
        ({"parameters": [{"name": "x", "type": "i32", "max_open": 1}]}, "max_open must be true or false"),
        ({"parameters": [{"name": "x", "type": "i32", "visible": "no"}]}, "visible must be true or false"),
    ],
)
def test_malformed_declarations(data, match):
    with pytest.raises(ValueError, match=match):
        parse_declarations(data)


def test_load_errors(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        load_declarations(tmp_path / "missing.toml")

    bad_toml = tmp_path / "bad.toml"
    bad_toml.write_text("[[parameters]\nname = ", encoding="utf-8")
    with pytest.raises(ValueError, match="TOML"):
        load_declarations(bad_toml)

    bad_yaml = tmp_path / "bad.yaml"
    bad_yaml.write_text("parameters: [unclosed\n", encoding="utf-8")
    with pytest.raises(ValueError, match="YAML"):
        load_declarations(bad_yaml)

    other = tmp_path / "decl.json"
    other.write_text("{}", encoding="utf-8")
    with pytest.raises(ValueError, match="Unsupported"):
        load_declarations(other)
