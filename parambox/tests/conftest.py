"""Pytest configuration and fixtures."""

from pathlib import Path
from typing import Callable

import pytest

from parambox.box import ParameterBox
from parambox.types import F64, I32, STR


@pytest.fixture
def fixtures_path() -> Path:
    """Directory holding declaration and parameter file fixtures."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def declarations_toml(fixtures_path: Path) -> Path:
    return fixtures_path / "declarations.toml"


@pytest.fixture
def write_file(tmp_path: Path) -> Callable[[str, str], Path]:
    """Write `text` to tmp_path/`name` and return the path."""

    def _write(name: str, text: str) -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def box() -> ParameterBox:
    """Box with an i32 `a` in [0, 10], a str `b` and an f64 `c`."""
    param_box = ParameterBox()
    param_box.add("a", I32)
    param_box.add("b", STR)
    param_box.add("c", F64)
    param_box.set_range_close_close("a", (0, 10))
    return param_box
