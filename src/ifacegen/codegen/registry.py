"""
Backend Registry.

Maps target keys to the backends that render interface descriptors.
"""

from typing import Dict, List, Optional, Type

from ifacegen.codegen.backend import CodegenBackend
from ifacegen.codegen.backends.go import GoBackend
from ifacegen.codegen.backends.python import PythonProtocolBackend
from ifacegen.config import RenderConfig

_BACKENDS: Dict[str, Type[CodegenBackend]] = {
  "go": GoBackend,
  "python": PythonProtocolBackend,
}


def available_backends() -> List[str]:
  """
  Returns the registered target keys in sorted order.

  Returns:
      List[str]: Target identifiers (e.g. ['go', 'python']).
  """
  return sorted(_BACKENDS.keys())


def register_backend(key: str, backend_cls: Type[CodegenBackend]) -> None:
  """
  Registers (or replaces) the backend used for a target key.

  Args:
      key: Target identifier. Matched case-insensitively.
      backend_cls: Backend class accepting an optional RenderConfig.
  """
  _BACKENDS[key.lower().strip()] = backend_cls


def get_backend(key: str, config: Optional[RenderConfig] = None) -> CodegenBackend:
  """
  Instantiates the backend registered for a target.

  Args:
      key: Target identifier.
      config: Settings forwarded to the backend.

  Returns:
      CodegenBackend: A ready-to-use backend instance.

  Raises:
      ValueError: If no backend is registered under `key`.
  """
  backend_cls = _BACKENDS.get(key.lower().strip())
  if backend_cls is None:
    raise ValueError(f"No backend registered for target '{key}'. Supported targets: {available_backends()}")
  return backend_cls(config)
