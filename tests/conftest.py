"""
Pytest Configuration and Fixtures.

Includes:
- Syspath patching for local imports.
- Shared interface descriptors.
- Console reset so captured logging does not leak between tests.
"""

import sys
import pytest
from pathlib import Path

# Add src to path so we can import 'ifacegen' without installing it
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from ifacegen.codegen.ir import MethodSignature, Param, new_interface
from ifacegen.utils.console import reset_console


@pytest.fixture
def greeter():
  """The canonical single-method interface."""
  return new_interface(
    "example.com/greet",
    "Greeter",
    [MethodSignature("Greet", params=[Param("string", "name")], returns=[Param("string")])],
  )


@pytest.fixture
def store():
  """A documented multi-method interface exercising every signature shape."""
  return new_interface(
    "example.com/kv",
    "Store",
    [
      MethodSignature(
        "Get",
        params=[Param("context.Context", "ctx"), Param("string", "key")],
        returns=[Param("[]byte"), Param("error")],
        comment="Get returns the value stored under key.",
      ),
      MethodSignature("Put", params=[Param("string", "key"), Param("[]byte", "value")], returns=[Param("error")]),
      MethodSignature("Close"),
    ],
    comment="Store is a key/value store.",
  )


@pytest.fixture(autouse=True)
def cleanup_console():
  """Ensures console is reset to stdout after every test."""
  reset_console()
  yield
  reset_console()
