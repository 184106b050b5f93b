"""
Tests for the Python Protocol Backend.

Verifies:
1.  **Exact Output**: canonical single-method Protocol.
2.  **Validity**: generated code parses with LibCST and keeps method order.
3.  **Type Fallback**: non-Python type expressions become string annotations.
4.  **Signature Shapes**: unnamed, variadic, and multi-value returns.
"""

import libcst as cst
import pytest

from ifacegen.codegen.backends.python import PythonProtocolBackend
from ifacegen.codegen.ir import MethodSignature, Param, new_interface
from ifacegen.config import RenderConfig


@pytest.fixture
def backend():
  return PythonProtocolBackend()


def _method_names(code: str):
  module = cst.parse_module(code)
  class_def = next(stmt for stmt in module.body if isinstance(stmt, cst.ClassDef))
  return [stmt.name.value for stmt in class_def.body.body if isinstance(stmt, cst.FunctionDef)]


def test_canonical_greeter(backend, greeter):
  expected = "from typing import Protocol\n\n\nclass Greeter(Protocol):\n    def Greet(self, name: string) -> string: ...\n"
  assert backend.compile(greeter) == expected


def test_output_parses_and_keeps_order(backend, store):
  code = backend.compile(store)

  assert _method_names(code) == ["Get", "Put", "Close"]


def test_comments_become_docstrings(backend, store):
  code = backend.compile(store)

  assert '    """Store is a key/value store."""\n' in code
  assert '        """Get returns the value stored under key."""\n' in code


def test_multi_value_returns_use_tuple(backend, store):
  code = backend.compile(store)

  assert "from typing import Protocol, Tuple\n" in code
  assert "-> Tuple['[]byte', error]:" in code


def test_foreign_type_expression_falls_back_to_string(backend, store):
  code = backend.compile(store)

  assert "value: '[]byte'" in code
  assert "ctx: context.Context" in code


def test_no_returns_annotates_none(backend, store):
  assert "def Close(self) -> None: ..." in backend.compile(store)


def test_unnamed_and_variadic_params(backend):
  sig = MethodSignature(
    "Emit",
    params=[Param("int"), Param("str", "parts", variadic=True), Param("bool", "flush")],
  )
  code = backend.compile(new_interface("pkg", "Emitter", [sig]))

  assert "def Emit(self, arg0: int, *parts: str, flush: bool) -> None: ..." in code
  cst.parse_module(code)


def test_empty_interface_has_ellipsis_body(backend):
  code = backend.compile(new_interface("pkg", "Marker", []))

  assert code.endswith("class Marker(Protocol):\n    ...\n")


def test_multiline_docstring_is_indented(backend):
  iface = new_interface("pkg", "Doc", [], comment="Line one.\nLine two.")
  code = backend.compile(iface)

  assert '    """Line one.\n    Line two.\n    """\n' in code
  cst.parse_module(code)


def test_render_via_descriptor(greeter):
  assert greeter.render(RenderConfig(target="python")) == PythonProtocolBackend().compile(greeter)


def test_definition_is_libcst_module(backend, greeter):
  module = backend.definition(greeter)

  assert isinstance(module, cst.Module)
  assert module.code == backend.compile(greeter)


@pytest.mark.parametrize(
  "comment",
  ['Returns "ok"', "Path ends with \\", 'Mixed \\" and """ quotes', 'Two lines\nending "quoted"'],
)
def test_comment_text_always_yields_valid_docstring(backend, comment):
  iface = new_interface("p", "X", [MethodSignature("M", comment=comment)], comment=comment)
  module = cst.parse_module(backend.compile(iface))

  class_def = next(stmt for stmt in module.body if isinstance(stmt, cst.ClassDef))
  docstring = class_def.get_docstring(clean=False)
  assert docstring is not None
  assert docstring.splitlines()[0] == comment.splitlines()[0]


def test_keyword_names_gain_trailing_underscore(backend):
  sig = MethodSignature("pass", params=[Param("string", "from"), Param("int", "in", variadic=True)])
  code = backend.compile(new_interface("p", "lambda", [sig]))

  assert "class lambda_(Protocol):" in code
  assert "def pass_(self, from_: string, *in_: int) -> None: ..." in code
  cst.parse_module(code)


def test_empty_names_do_not_raise(backend):
  code = backend.compile(new_interface("p", "", [MethodSignature("")]))

  assert "class _(Protocol):" in code
  assert "def _(self) -> None: ..." in code
  cst.parse_module(code)


def test_blank_lines_carry_no_trailing_whitespace(backend, store):
  code = backend.compile(store)

  assert "\n\n    def Put" in code
  assert all(line == line.rstrip() for line in code.splitlines())
