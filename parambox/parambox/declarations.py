"""
Parameter declarations loaded from TOML or YAML.

A declaration file lists the parameters a program expects, so a box can be
built without code:

    [[parameters]]
    name = "a"
    type = "i32"
    min = -10
    max = 10
    max_open = true
    blacklist = [2, 3, 4]
    explanation = "Step count"
    default = 1
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import tomllib
import yaml

from .box import ParameterBox
from .types import ParamType, resolve_type


@dataclass(frozen=True)
class ParameterDecl:
    name: str
    param_type: ParamType
    min: Any = None
    min_open: bool = False
    max: Any = None
    max_open: bool = False
    blacklist: tuple | None = None
    whitelist: tuple | None = None
    explanation: str | None = None
    visible: bool = True
    default: Any = None


@dataclass(frozen=True)
class DeclarationSet:
    source: Path | None = None
    description: str | None = None
    parameters: list[ParameterDecl] = field(default_factory=list)


def _optional_str(value: Any) -> str | None:
    return str(value) if isinstance(value, str) else None


def _optional_items(raw: dict[str, Any], key: str, name: str) -> tuple | None:
    value = raw.get(key)
    if value is None:
        return None
    if not isinstance(value, list):
        raise ValueError(f"`{name}`: {key} must be a list")
    return tuple(value)


def _flag(raw: dict[str, Any], key: str, name: str, default: bool) -> bool:
    value = raw.get(key, default)
    if not isinstance(value, bool):
        raise ValueError(f"`{name}`: {key} must be true or false")
    return value


def parse_declarations(data: dict[str, Any], source: Path | None = None) -> DeclarationSet:
    """Build a DeclarationSet from already-parsed TOML/YAML data."""
    if not isinstance(data, dict):
        raise ValueError("declaration file must contain a mapping")

    raw_parameters = data.get("parameters", [])
    if not isinstance(raw_parameters, list):
        raise ValueError("parameters must be a list of tables")

    parameters: list[ParameterDecl] = []
    seen: set[str] = set()
    for index, raw in enumerate(raw_parameters, start=1):
        if not isinstance(raw, dict):
            raise ValueError(f"parameter #{index} is not a table")

        name = str(raw.get("name", "")).strip()
        if not name:
            raise ValueError(f"parameter #{index} has no name")
        if name in seen:
            raise ValueError(f"`{name}` is declared more than once")
        seen.add(name)

        type_name = str(raw.get("type", "")).strip()
        if not type_name:
            raise ValueError(f"`{name}` has no type")
        param_type = resolve_type(type_name)

        blacklist = _optional_items(raw, "blacklist", name)
        whitelist = _optional_items(raw, "whitelist", name)
        if blacklist is not None and whitelist is not None:
            raise ValueError(f"`{name}`: blacklist and whitelist are mutually exclusive")

        parameters.append(
            ParameterDecl(
                name=name,
                param_type=param_type,
                min=raw.get("min"),
                min_open=_flag(raw, "min_open", name, False),
                max=raw.get("max"),
                max_open=_flag(raw, "max_open", name, False),
                blacklist=blacklist,
                whitelist=whitelist,
                explanation=_optional_str(raw.get("explanation")),
                visible=_flag(raw, "visible", name, True),
                default=raw.get("default"),
            )
        )

    return DeclarationSet(
        source=source,
        description=_optional_str(data.get("description")),
        parameters=parameters,
    )


def load_declarations(path: Path) -> DeclarationSet:
    """
    Load declarations from a .toml, .yaml or .yml file.

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the content is malformed
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Declaration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    suffix = path.suffix.lower()
    if suffix == ".toml":
        try:
            data = tomllib.loads(text)
        except tomllib.TOMLDecodeError as e:
            raise ValueError(f"Failed to parse declaration TOML: {e}") from e
    elif suffix in (".yaml", ".yml"):
        try:
            data = yaml.safe_load(text) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Failed to parse declaration YAML: {e}") from e
    else:
        raise ValueError(f"Unsupported declaration file type: {path.suffix or '(none)'}")

    return parse_declarations(data, source=path)


def build_box(declarations: DeclarationSet) -> ParameterBox:
    """Create a box and apply every declaration in file order.

    Registry errors (e.g. a default outside its range) propagate.
    """
    box = ParameterBox()
    for decl in declarations.parameters:
        box.add(decl.name, decl.param_type)
        if decl.min is not None and decl.max is not None:
            setter = {
                (False, False): box.set_range_close_close,
                (False, True): box.set_range_close_open,
                (True, False): box.set_range_open_close,
                (True, True): box.set_range_open_open,
            }[(decl.min_open, decl.max_open)]
            setter(decl.name, (decl.min, decl.max))
        elif decl.min is not None:
            if decl.min_open:
                box.set_min_limit_open(decl.name, decl.min)
            else:
                box.set_min_limit_close(decl.name, decl.min)
        elif decl.max is not None:
            if decl.max_open:
                box.set_max_limit_open(decl.name, decl.max)
            else:
                box.set_max_limit_close(decl.name, decl.max)

        if decl.blacklist is not None:
            box.set_blacklist(decl.name, decl.blacklist)
        elif decl.whitelist is not None:
            box.set_whitelist(decl.name, decl.whitelist)

        if decl.explanation is not None:
            box.set_explanation(decl.name, decl.explanation)
        if not decl.visible:
            box.set_invisible(decl.name)
        if decl.default is not None:
            box.set_value(decl.name, decl.default)
    return box
