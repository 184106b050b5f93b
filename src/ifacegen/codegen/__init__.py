"""
Codegen Package.

This package defines the interface Intermediate Representation (IR), the Go
syntax-tree nodes, and the Backend interface used to render descriptors.
"""

from ifacegen.codegen.backend import CodegenBackend
from ifacegen.codegen.ir import InterfaceDescriptor, MethodSignature, Param, QualifiedRef, new_interface

__all__ = [
  "CodegenBackend",
  "InterfaceDescriptor",
  "MethodSignature",
  "Param",
  "QualifiedRef",
  "new_interface",
]
