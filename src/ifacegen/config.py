"""
Render Configuration Store.

Settings are resolved from explicit arguments first, then from the
`[tool.ifacegen]` table of the nearest `pyproject.toml`, then from defaults.
"""

import tomllib
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, Field, ValidationError, field_validator

from ifacegen.enums import CommentStyle


class RenderConfig(BaseModel):
  """
  Output settings shared by all backends.
  """

  target: str = Field("go", description="Backend key used to render interfaces (e.g. 'go', 'python').")
  indent: str = Field("\t", description="Prefix applied to each interface member line.")
  comment_style: CommentStyle = Field(CommentStyle.BLOCK, description="Formatting of multi-line comments.")

  @field_validator("target")
  @classmethod
  def validate_target(cls, v: str) -> str:
    """
    Ensures the target backend is registered.

    Args:
        v (str): The backend key to validate.

    Returns:
        str: The normalized (lowercase) backend key.

    Raises:
        ValueError: If no backend is registered under that key.
    """
    from ifacegen.codegen.registry import available_backends

    v_clean = v.lower().strip()
    known = available_backends()
    if v_clean not in known:
      raise ValueError(f"Unknown target: '{v_clean}'. Supported targets: {known}")
    return v_clean

  @classmethod
  def load(
    cls,
    target: Optional[str] = None,
    indent: Optional[str] = None,
    comment_style: Optional[str] = None,
    search_path: Optional[Path] = None,
  ) -> "RenderConfig":
    """
    Loads configuration from pyproject.toml and applies overrides.

    Args:
        target (Optional[str]): Override for the backend key.
        indent (Optional[str]): Override for member indentation.
        comment_style (Optional[str]): Override for comment formatting.
        search_path (Optional[Path]): Directory to start searching for TOML config.

    Returns:
        RenderConfig: The fully resolved configuration object.

    Raises:
        ValueError: If the merged settings fail validation.
    """
    start_dir = search_path or Path.cwd()
    toml_config, _ = _load_toml_settings(start_dir)

    values: Dict[str, Any] = {
      "target": target or toml_config.get("target", "go"),
      "indent": indent if indent is not None else toml_config.get("indent", "\t"),
      "comment_style": comment_style or toml_config.get("comment_style", CommentStyle.BLOCK.value),
    }

    try:
      return cls.model_validate(values)
    except ValidationError as e:
      raise ValueError(f"Render configuration validation failed: {e}")


def _load_toml_settings(start_path: Path) -> Tuple[Dict[str, Any], Optional[Path]]:
  """
  Searches the directory and its parents for 'pyproject.toml' and extracts config.

  Args:
      start_path (Path): Directory to start search from.

  Returns:
      Tuple[Dict, Optional[Path]]: The config dict and the directory it was found in.
  """
  current = start_path.resolve()

  for parent in [current, *current.parents]:
    toml_path = parent / "pyproject.toml"
    if toml_path.exists() and toml_path.is_file():
      try:
        with open(toml_path, "rb") as f:
          data = tomllib.load(f)
      except (OSError, tomllib.TOMLDecodeError):
        return {}, None

      tool_section = data.get("tool", {})
      return tool_section.get("ifacegen", {}), parent

  return {}, None
