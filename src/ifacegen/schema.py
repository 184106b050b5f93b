"""
Pydantic Schemas for Interface Documents.

This module defines the structure of the declarative JSON / TOML documents a
driver can hand to `ifacegen.loader`. Each schema converts to the immutable IR
via `to_ir()`. Only shapes are validated; identifiers and type expressions are
passed through untouched.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from ifacegen.codegen.ir import InterfaceDescriptor, MethodSignature, Param, new_interface


class ParamSchema(BaseModel):
  """A parameter or return value entry."""

  model_config = ConfigDict(extra="forbid")

  type: str = Field(..., description="Type expression, emitted verbatim.")
  name: Optional[str] = Field(None, description="Optional identifier.")
  variadic: bool = Field(False, description="Marks a trailing variadic parameter.")

  def to_ir(self) -> Param:
    return Param(type=self.type, name=self.name, variadic=self.variadic)


class MethodSchema(BaseModel):
  """A method signature entry."""

  model_config = ConfigDict(extra="forbid")

  name: str
  params: List[ParamSchema] = Field(default_factory=list)
  returns: List[ParamSchema] = Field(default_factory=list)
  comment: str = ""

  def to_ir(self) -> MethodSignature:
    return MethodSignature(
      name=self.name,
      params=tuple(p.to_ir() for p in self.params),
      returns=tuple(r.to_ir() for r in self.returns),
      comment=self.comment,
    )


class InterfaceSchema(BaseModel):
  """An interface entry."""

  model_config = ConfigDict(extra="forbid")

  package: str = Field("", description="Package path or namespace of the interface.")
  name: str
  comment: str = ""
  methods: List[MethodSchema] = Field(default_factory=list)

  def to_ir(self) -> InterfaceDescriptor:
    return new_interface(
      self.package,
      self.name,
      [m.to_ir() for m in self.methods],
      comment=self.comment,
    )


class InterfaceDocument(BaseModel):
  """Top-level document holding a list of interfaces."""

  model_config = ConfigDict(extra="forbid")

  interfaces: List[InterfaceSchema] = Field(default_factory=list)
