"""
Codegen Backends Package.

Contains concrete implementations of the ``CodegenBackend`` interface
for specific target languages (Go, Python).
"""

from ifacegen.codegen.backends.go import GoBackend, GoEmitter, GoSynthesizer
from ifacegen.codegen.backends.python import PythonProtocolBackend

__all__ = ["GoBackend", "GoEmitter", "GoSynthesizer", "PythonProtocolBackend"]
