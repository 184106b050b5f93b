"""
Library Logging Utilities.

Diagnostics are emitted on the package logger (`logging.getLogger("ifacegen")`)
and formatted by `rich`. Only this logger is configured; the root logger and
any handlers installed by the host application are left untouched, so a
driver embedding the generator keeps control of its own logging setup.

The destination console can be swapped at runtime with `set_console` (e.g. to
capture output in tests or inside a larger tool's UI).

Attributes:
    logger (logging.Logger): The package logger.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

_THEME = Theme(
  {
    "info": "dim cyan",
    "warning": "yellow",
    "path": "bold blue",
  }
)

logger = logging.getLogger("ifacegen")


class _ConsoleBinding:
  """
  Tracks the active Rich Console and the handler that writes to it.

  Rebinding replaces the package logger's RichHandler, so at most one such
  handler is attached at any time.

  Attributes:
      console (Console): The console receiving log records.
      handler (Optional[RichHandler]): The handler attached to `logger`.
  """

  def __init__(self) -> None:
    self.console: Console = Console(theme=_THEME)
    self.handler: Optional[RichHandler] = None
    self.bind(self.console)

  def bind(self, new_console: Console) -> None:
    """
    Routes the package logger to `new_console`.

    Args:
        new_console (Console): Destination for subsequent log records.
    """
    if self.handler is not None:
      logger.removeHandler(self.handler)

    self.console = new_console
    self.handler = RichHandler(
      console=new_console,
      show_time=False,
      show_path=False,
      markup=True,
    )
    logger.addHandler(self.handler)
    logger.setLevel(logging.INFO)


_binding = _ConsoleBinding()


def set_console(new_console: Console) -> None:
  """
  Injects a specific console instance for the package logger.

  Args:
      new_console (Console): The configured Rich console to log to.
  """
  _binding.bind(new_console)


def reset_console() -> None:
  """
  Restores logging to a fresh standard output console.
  """
  _binding.bind(Console(theme=_THEME))


def get_console() -> Console:
  """
  Retrieves the console currently receiving log records.

  Returns:
      Console: The active Rich Console.
  """
  return _binding.console


def log_info(msg: str) -> None:
  """
  Logs an informational message.

  Args:
      msg (str): The message content. Can include rich markup like [path].
  """
  logger.info(f"ℹ️  {msg}", extra={"markup": True})


def log_warning(msg: str) -> None:
  """
  Logs a warning message.

  Args:
      msg (str): The message content.
  """
  logger.warning(f"⚠️  {msg}", extra={"markup": True})
