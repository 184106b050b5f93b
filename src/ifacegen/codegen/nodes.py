"""
Go AST Nodes.

Defines the data structures for the subset of the Go syntax tree needed to
declare interfaces. Leaf nodes implement `__str__` to emit valid code;
multi-line nodes expose `lines(indent)` so the emitter controls indentation.
"""

import abc
from dataclasses import dataclass, field
from typing import List, Optional

from ifacegen.enums import CommentStyle


class GoNode(abc.ABC):
  """Abstract base class for all Go AST nodes."""

  @abc.abstractmethod
  def __str__(self) -> str:
    """Returns the Go source representation of the node."""
    pass


@dataclass
class Comment(GoNode):
  """
  A comment attached to a declaration.

  Text already starting with `//` or `/*` is emitted verbatim. Block style
  wraps any text containing a newline in `/* */`; single-line text uses `//`.

  Attributes:
      text (str): Raw comment text, possibly spanning several lines.
      style (CommentStyle): Line (`//` per line) or block (`/* */`) formatting.
  """

  text: str
  style: CommentStyle = CommentStyle.BLOCK

  def lines(self) -> List[str]:
    raw = self.text.splitlines() or [""]
    if self.text.startswith("//") or self.text.startswith("/*"):
      return raw
    if self.style == CommentStyle.BLOCK and "\n" in self.text:
      return ["/*", *raw, "*/"]
    return [f"// {line}" if line else "//" for line in raw]

  def __str__(self) -> str:
    return "\n".join(self.lines())


@dataclass
class Field(GoNode):
  """
  A single parameter or result (e.g. `name string`, `...int`, `error`).
  """

  type: str
  name: Optional[str] = None
  variadic: bool = False

  def __str__(self) -> str:
    type_str = f"...{self.type}" if self.variadic else self.type
    if self.name:
      return f"{self.name} {type_str}"
    return type_str


@dataclass
class FieldList(GoNode):
  """
  A parenthesised list of fields.

  Attributes:
      fields (List[Field]): Entries in declaration order.
      is_result (bool): Result lists holding one unnamed field render bare
          (`string` rather than `(string)`).
  """

  fields: List[Field] = field(default_factory=list)
  is_result: bool = False

  def __str__(self) -> str:
    if self.is_result and len(self.fields) == 1 and not self.fields[0].name:
      return str(self.fields[0])
    return "(" + ", ".join(str(f) for f in self.fields) + ")"


@dataclass
class MethodSpec(GoNode):
  """
  One method inside an interface body.

  Attributes:
      name (str): Method identifier.
      params (FieldList): Parameter list.
      results (Optional[FieldList]): Result list, omitted when None.
      comment (Optional[Comment]): Comment placed on the line(s) above.
  """

  name: str
  params: FieldList = field(default_factory=FieldList)
  results: Optional[FieldList] = None
  comment: Optional[Comment] = None

  def signature(self) -> str:
    sig = f"{self.name}{self.params}"
    if self.results is not None:
      sig += f" {self.results}"
    return sig

  def lines(self) -> List[str]:
    prefix = self.comment.lines() if self.comment else []
    return [*prefix, self.signature()]

  def __str__(self) -> str:
    return "\n".join(self.lines())


@dataclass
class InterfaceType(GoNode):
  """
  An `interface { ... }` type literal.
  """

  methods: List[MethodSpec] = field(default_factory=list)

  def lines(self, indent: str = "\t") -> List[str]:
    """
    Lays out the type literal.

    An empty method set collapses to `interface{}`.

    Args:
        indent: Prefix applied to every member line.

    Returns:
        List[str]: Source lines without trailing newlines.
    """
    if not self.methods:
      return ["interface{}"]
    body = [f"{indent}{line}" for method in self.methods for line in method.lines()]
    return ["interface {", *body, "}"]

  def __str__(self) -> str:
    return "\n".join(self.lines())


@dataclass
class TypeDecl(GoNode):
  """
  A `type <Name> <Type>` declaration with an optional leading comment.
  """

  name: str
  type: InterfaceType
  comment: Optional[Comment] = None

  def lines(self, indent: str = "\t") -> List[str]:
    head = self.comment.lines() if self.comment else []
    type_lines = self.type.lines(indent)
    decl = [f"type {self.name} {type_lines[0]}", *type_lines[1:]]
    return [*head, *decl]

  def __str__(self) -> str:
    return "\n".join(self.lines())
