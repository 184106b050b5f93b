"""
Interface Document Loading.

Reads declarative interface documents (JSON or TOML) and converts them into
`InterfaceDescriptor` objects ready to render. Documents hold a top-level
`interfaces` list; see `ifacegen.schema` for the entry shapes.
"""

import json
import tomllib
from pathlib import Path
from typing import Any, Dict, List, Union

from pydantic import ValidationError

from ifacegen.codegen.ir import InterfaceDescriptor
from ifacegen.schema import InterfaceDocument
from ifacegen.utils.console import log_info, log_warning

SUPPORTED_SUFFIXES = {".json", ".toml"}


def parse_interfaces(content: Dict[str, Any], source: str = "<memory>") -> List[InterfaceDescriptor]:
  """
  Validates a decoded document and builds descriptors from it.

  Args:
      content: The decoded JSON / TOML mapping.
      source: Label used in error messages.

  Returns:
      List[InterfaceDescriptor]: Descriptors in document order.

  Raises:
      ValueError: If the document does not match the schema.
  """
  try:
    doc = InterfaceDocument.model_validate(content)
  except ValidationError as e:
    raise ValueError(f"Invalid interface document {source}: {e}")

  if not doc.interfaces:
    log_warning(f"No interfaces declared in [path]{source}[/path]")

  return [entry.to_ir() for entry in doc.interfaces]


def load_interfaces(path: Union[str, Path]) -> List[InterfaceDescriptor]:
  """
  Loads interface descriptors from a JSON or TOML file.

  Args:
      path: Location of the document.

  Returns:
      List[InterfaceDescriptor]: Descriptors in document order.

  Raises:
      FileNotFoundError: If the file does not exist.
      ValueError: If the suffix is unsupported, decoding fails, or the
          content does not match the schema.
  """
  fpath = Path(path)
  if not fpath.is_file():
    raise FileNotFoundError(f"Interface document not found: {fpath}")

  suffix = fpath.suffix.lower()
  if suffix not in SUPPORTED_SUFFIXES:
    raise ValueError(f"Unsupported interface document type '{suffix}'. Expected one of {sorted(SUPPORTED_SUFFIXES)}")

  try:
    if suffix == ".json":
      with open(fpath, "r", encoding="utf-8") as f:
        content = json.load(f)
    else:
      with open(fpath, "rb") as f:
        content = tomllib.load(f)
  except (json.JSONDecodeError, tomllib.TOMLDecodeError, UnicodeDecodeError) as e:
    raise ValueError(f"Error decoding {fpath.name}: {e}")

  if not isinstance(content, dict):
    raise ValueError(f"Invalid interface document {fpath.name}: expected a mapping at the top level")

  descriptors = parse_interfaces(content, source=fpath.name)
  log_info(f"Loaded {len(descriptors)} interface(s) from [path]{fpath.name}[/path]")
  return descriptors
