"""
Codegen Backend Protocol.

Defines the abstract interface for backends that consume an InterfaceDescriptor
and emit target specific code (e.g. Go source or a Python Protocol).
"""

from abc import ABC, abstractmethod
from typing import Any

from ifacegen.codegen.ir import InterfaceDescriptor


class CodegenBackend(ABC):
  """
  Abstract base class for code generation backends.
  """

  @abstractmethod
  def definition(self, descriptor: InterfaceDescriptor) -> Any:
    """
    Builds the backend-specific syntax tree for the interface.

    Args:
        descriptor (InterfaceDescriptor): The interface to declare.

    Returns:
        Any: A structured node (e.g. a Go `TypeDecl` or a LibCST module).
    """
    pass

  @abstractmethod
  def compile(self, descriptor: InterfaceDescriptor) -> str:
    """
    Renders the interface into source text.

    Args:
        descriptor (InterfaceDescriptor): The interface to declare.

    Returns:
        str: Generated source code ending with a newline.
    """
    pass
