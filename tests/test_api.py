"""
Tests for the top-level convenience API.
"""

import pytest

import ifacegen
from ifacegen import MethodSignature, Param, RenderConfig, render_interface


def test_render_interface_go():
  out = render_interface(
    "example.com/greet",
    "Greeter",
    [MethodSignature("Greet", params=[Param("string", "name")], returns=[Param("string")])],
  )
  assert out == "type Greeter interface {\n\tGreet(name string) string\n}\n"


def test_render_interface_with_comment_and_target():
  out = render_interface("pkg", "Marker", [], comment="Marker tags types.", target="python")

  assert out.startswith("from typing import Protocol\n")
  assert '"""Marker tags types."""' in out


def test_config_wins_over_target():
  out = render_interface("pkg", "Marker", [], target="python", config=RenderConfig(target="go"))
  assert out == "type Marker interface{}\n"


def test_unknown_target():
  with pytest.raises(ValueError):
    render_interface("pkg", "Marker", [], target="cobol")


def test_exports():
  assert ifacegen.__version__
  for name in ifacegen.__all__:
    assert hasattr(ifacegen, name)
