"""
Python Protocol Backend.

Renders an InterfaceDescriptor as a `typing.Protocol` class using LibCST:

.. code-block:: python

    class Greeter(Protocol):
        def Greet(self, name: string) -> string: ...

Type expressions are parsed as Python expressions where possible. Expressions
that are not valid Python (e.g. Go's `[]byte`) fall back to string annotations,
so rendering still succeeds for foreign type syntax.
"""

import keyword
from typing import List, Optional, Sequence

import libcst as cst

from ifacegen.codegen.backend import CodegenBackend
from ifacegen.codegen.ir import InterfaceDescriptor, MethodSignature, Param
from ifacegen.config import RenderConfig

_INDENT = "    "


class PythonProtocolBackend(CodegenBackend):
  """
  Generates a Python module declaring the interface as a structural Protocol.
  """

  def __init__(self, config: Optional[RenderConfig] = None) -> None:
    self.config = config or RenderConfig(target="python")

  def definition(self, descriptor: InterfaceDescriptor) -> cst.Module:
    """
    Builds the LibCST module for the interface.

    Args:
        descriptor: The interface description.

    Returns:
        cst.Module: A module holding the typing import and the Protocol class.
    """
    needs_tuple = any(len(sig.returns) > 1 for sig in descriptor.methods)
    names = "Protocol, Tuple" if needs_tuple else "Protocol"
    import_stmt = cst.parse_statement(f"from typing import {names}")

    class_body: List[cst.BaseStatement] = []
    if descriptor.comment:
      class_body.append(_docstring(descriptor.comment, _INDENT))

    for idx, sig in enumerate(descriptor.methods):
      func = self._method(sig)
      if idx > 0 or descriptor.comment:
        func = func.with_changes(leading_lines=[cst.EmptyLine(indent=False)])
      class_body.append(func)

    if not class_body:
      class_body.append(cst.SimpleStatementLine(body=[cst.Expr(cst.Ellipsis())]))

    class_def = cst.ClassDef(
      name=cst.Name(_identifier(descriptor.name)),
      bases=[cst.Arg(value=cst.Name("Protocol"))],
      body=cst.IndentedBlock(body=class_body),
      leading_lines=[cst.EmptyLine(indent=False), cst.EmptyLine(indent=False)],
    )
    return cst.Module(body=[import_stmt, class_def], default_indent=_INDENT)

  def compile(self, descriptor: InterfaceDescriptor) -> str:
    return self.definition(descriptor).code

  def _method(self, sig: MethodSignature) -> cst.FunctionDef:
    params = [cst.Param(name=cst.Name("self"))]
    kwonly: List[cst.Param] = []
    star_arg = cst.MaybeSentinel.DEFAULT

    for i, p in enumerate(sig.params):
      node = cst.Param(name=cst.Name(_identifier(p.name or f"arg{i}")), annotation=cst.Annotation(_type_expr(p.type)))
      if p.variadic and star_arg is cst.MaybeSentinel.DEFAULT:
        star_arg = node
      elif star_arg is not cst.MaybeSentinel.DEFAULT:
        # Anything declared after a variadic can only be passed by keyword
        kwonly.append(node)
      else:
        params.append(node)

    if sig.comment:
      body: List[cst.BaseStatement] = [
        _docstring(sig.comment, _INDENT * 2),
        cst.SimpleStatementLine(body=[cst.Expr(cst.Ellipsis())]),
      ]
      block: cst.BaseSuite = cst.IndentedBlock(body=body)
    else:
      block = cst.SimpleStatementSuite(body=[cst.Expr(cst.Ellipsis())])

    return cst.FunctionDef(
      name=cst.Name(_identifier(sig.name)),
      params=cst.Parameters(params=params, star_arg=star_arg, kwonly_params=kwonly),
      body=block,
      returns=cst.Annotation(_returns_expr(sig.returns)),
    )


def _identifier(name: str) -> str:
  # Python keywords gain a trailing underscore; an empty name becomes `_`
  if not name:
    return "_"
  if keyword.iskeyword(name):
    return f"{name}_"
  return name


def _type_expr(type_str: str) -> cst.BaseExpression:
  try:
    return cst.parse_expression(type_str)
  except cst.ParserSyntaxError:
    return cst.SimpleString(repr(type_str))


def _returns_expr(returns: Sequence[Param]) -> cst.BaseExpression:
  if not returns:
    return cst.Name("None")
  if len(returns) == 1:
    return _type_expr(returns[0].type)
  elements = [cst.SubscriptElement(slice=cst.Index(value=_type_expr(r.type))) for r in returns]
  return cst.Subscript(value=cst.Name("Tuple"), slice=elements)


def _docstring(text: str, indent: str) -> cst.SimpleStatementLine:
  """
  Builds a docstring statement, indenting continuation lines to `indent`.

  Backslashes and quotes are escaped so any comment text yields a valid literal.
  """
  escaped = text.replace("\\", "\\\\").replace('"', '\\"')
  lines = escaped.splitlines() or [""]
  if len(lines) == 1:
    value = f'"""{lines[0]}"""'
  else:
    rest = "\n".join(f"{indent}{line}" if line else "" for line in lines[1:])
    value = f'"""{lines[0]}\n{rest}\n{indent}"""'
  return cst.SimpleStatementLine(body=[cst.Expr(cst.SimpleString(value))])
