"""
Enumerations for ifacegen.

This module defines the standard enumerations used across the codebase for
output formatting choices.
"""

from enum import Enum


class CommentStyle(str, Enum):
  """
  Formatting applied to comments attached to interfaces and methods.
  """

  LINE = "line"  # every line prefixed with //
  BLOCK = "block"  # multi-line comments wrapped in /* */
