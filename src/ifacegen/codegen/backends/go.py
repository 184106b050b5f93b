"""
Go Backend.

Converts an InterfaceDescriptor into Go source in two stages:

1.  **Synthesis**: `GoSynthesizer` maps the descriptor onto Go AST nodes
    (`TypeDecl` wrapping an `InterfaceType`).
2.  **Emission**: `GoEmitter` lays the nodes out as text, applying the
    configured indentation.

Both stages are pure: the same descriptor always yields the same output.
"""

from typing import Optional

from ifacegen.codegen.backend import CodegenBackend
from ifacegen.codegen.ir import InterfaceDescriptor, MethodSignature, Param
from ifacegen.codegen.nodes import Comment, Field, FieldList, InterfaceType, MethodSpec, TypeDecl
from ifacegen.config import RenderConfig
from ifacegen.enums import CommentStyle


class GoSynthesizer:
  """
  Builds Go AST nodes from interface descriptors.
  """

  def __init__(self, comment_style: CommentStyle = CommentStyle.BLOCK) -> None:
    """
    Initializes the synthesizer.

    Args:
        comment_style: Formatting applied to generated comment nodes.
    """
    self.comment_style = comment_style

  def synthesize(self, descriptor: InterfaceDescriptor) -> TypeDecl:
    """
    Maps a descriptor to a `type <Name> interface { ... }` declaration.

    Args:
        descriptor: The interface description.

    Returns:
        TypeDecl: The declaration node. Methods keep their supplied order.
    """
    methods = [self._method(sig) for sig in descriptor.methods]
    return TypeDecl(
      name=descriptor.name,
      type=InterfaceType(methods=methods),
      comment=self._comment(descriptor.comment),
    )

  def _method(self, sig: MethodSignature) -> MethodSpec:
    results = None
    if sig.returns:
      results = FieldList([self._field(r) for r in sig.returns], is_result=True)
    return MethodSpec(
      name=sig.name,
      params=FieldList([self._field(p) for p in sig.params]),
      results=results,
      comment=self._comment(sig.comment),
    )

  def _field(self, param: Param) -> Field:
    return Field(type=param.type, name=param.name, variadic=param.variadic)

  def _comment(self, text: str) -> Optional[Comment]:
    if not text:
      return None
    return Comment(text, style=self.comment_style)


class GoEmitter:
  """
  Converts Go AST nodes into formatted source text.
  """

  def __init__(self, indent: str = "\t") -> None:
    self.indent = indent

  def emit(self, decl: TypeDecl) -> str:
    """
    Generates the Go source string for a declaration.

    Formatting Rules:
    - Comments and the `type` keyword are flush-left.
    - Interface members (and their comments) are prefixed with `indent`.

    Args:
        decl (TypeDecl): The declaration node.

    Returns:
        str: The formatted source, ending with a newline.
    """
    return "\n".join(decl.lines(self.indent)) + "\n"


class GoBackend(CodegenBackend):
  """
  Renders interface descriptors as Go interface declarations.
  """

  def __init__(self, config: Optional[RenderConfig] = None) -> None:
    cfg = config or RenderConfig()
    self.synthesizer = GoSynthesizer(comment_style=cfg.comment_style)
    self.emitter = GoEmitter(indent=cfg.indent)

  def definition(self, descriptor: InterfaceDescriptor) -> TypeDecl:
    return self.synthesizer.synthesize(descriptor)

  def compile(self, descriptor: InterfaceDescriptor) -> str:
    return self.emitter.emit(self.definition(descriptor))
