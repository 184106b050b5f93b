"""
Intermediate Representation (IR).

This module defines the language-agnostic data structures used to describe an
interface type before it is rendered by a backend.

It acts as the contract between the driver (which assembles descriptors from a
schema or from existing source) and the Backends (which synthesize code).
No validation is performed here: names and type expressions are emitted exactly
as supplied.
"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional, Sequence, Tuple

if TYPE_CHECKING:
  from ifacegen.codegen.nodes import TypeDecl
  from ifacegen.config import RenderConfig


@dataclass(frozen=True)
class QualifiedRef:
  """
  A (namespace, name) pair identifying where a type lives.

  Used by callers to cross-reference the interface from other modules.
  It has no bearing on the rendered declaration body.
  """

  namespace: str
  """Package path or namespace (e.g. 'github.com/acme/greeter')."""

  name: str
  """Type name inside the namespace."""

  def __str__(self) -> str:
    if not self.namespace:
      return self.name
    return f"{self.namespace}.{self.name}"


@dataclass(frozen=True)
class Param:
  """
  A parameter or return value expression.

  Attributes:
      type: The type expression, emitted verbatim (e.g. 'string', '[]byte').
      name: Optional identifier. Unnamed entries render as the bare type.
      variadic: If True, renders as a variadic parameter (e.g. 'args ...string').
  """

  type: str
  name: Optional[str] = None
  variadic: bool = False


@dataclass(frozen=True)
class MethodSignature:
  """
  Declarative description of one interface method.
  """

  name: str
  params: Tuple[Param, ...] = ()
  returns: Tuple[Param, ...] = ()
  comment: str = ""

  def __post_init__(self) -> None:
    # Lists handed in by callers are frozen into tuples
    object.__setattr__(self, "params", tuple(self.params))
    object.__setattr__(self, "returns", tuple(self.returns))


@dataclass(frozen=True)
class InterfaceDescriptor:
  """
  Declarative description of a named interface type and its methods.

  Method order is significant: it determines declaration order in the
  generated source.
  """

  ref: QualifiedRef
  """Qualified reference for callers. Not rendered."""

  name: str
  """Identifier used in the declaration."""

  methods: Tuple[MethodSignature, ...] = field(default_factory=tuple)
  """Ordered method signatures."""

  comment: str = ""
  """Optional documentation comment placed before the declaration."""

  def __post_init__(self) -> None:
    object.__setattr__(self, "methods", tuple(self.methods))

  def definition(self) -> "TypeDecl":
    """
    Builds the Go syntax tree for this interface.

    Returns:
        TypeDecl: The `type <Name> interface { ... }` declaration node.
    """
    from ifacegen.codegen.backends.go import GoSynthesizer

    return GoSynthesizer().synthesize(self)

  def render(self, config: Optional["RenderConfig"] = None) -> str:
    """
    Renders this interface to source text.

    Args:
        config: Output settings. Defaults to Go with tab indentation.

    Returns:
        str: The generated source, terminated by a newline.
    """
    from ifacegen.codegen.registry import get_backend
    from ifacegen.config import RenderConfig

    cfg = config or RenderConfig()
    backend = get_backend(cfg.target, cfg)
    return backend.compile(self)


def new_interface(
  pkg: str,
  name: str,
  methods: Sequence[MethodSignature],
  comment: str = "",
) -> InterfaceDescriptor:
  """
  Creates an interface descriptor living in package `pkg`.

  Args:
      pkg: Package path or namespace the interface belongs to.
      name: Interface name.
      methods: Method signatures in declaration order.
      comment: Optional documentation comment.

  Returns:
      InterfaceDescriptor: The immutable descriptor.
  """
  return InterfaceDescriptor(
    ref=QualifiedRef(namespace=pkg, name=name),
    name=name,
    methods=tuple(methods),
    comment=comment,
  )
