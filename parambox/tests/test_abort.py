"""Tests for the exit-on-error helpers."""

from __future__ import annotations

import pytest

from parambox import ParameterBox
from parambox.abort import clone_value_or_exit, unwrap_or_exit
from parambox.types import I32


def test_unwrap_or_exit_passes_results_through():
    box = ParameterBox()
    unwrap_or_exit(box.add, "a", I32)
    unwrap_or_exit(box.set_value, "a", 3)
    assert unwrap_or_exit(box.get_value, "a") == 3


def test_unwrap_or_exit_exits_on_box_errors(capsys):
    box = ParameterBox()
    box.add("a", I32)

    with pytest.raises(SystemExit) as exc_info:
        unwrap_or_exit(box.add, "a", I32)

    assert exc_info.value.code == 1
    assert "`a` has already been added" in capsys.readouterr().err


def test_clone_value_or_exit():
    box = ParameterBox()
    box.add("a", I32)
    box.set_value("a", 8)
    assert clone_value_or_exit(box, "a", I32) == 8

    box.add("unset", I32)
    with pytest.raises(SystemExit):
        clone_value_or_exit(box, "unset")
