import os
import sys
from typing import ClassVar

# SEE: https://no-color.org/
NO_COLOR: bool = "NO_COLOR" in os.environ
FORCE_COLOR: bool = "FORCE_COLOR" in os.environ
# Logs redirected to a file are kept free of escape sequences
COLOR: bool = FORCE_COLOR or (not NO_COLOR and sys.stderr.isatty())


class Term:
	"""ANSI escape sequences, empty when colours are disabled."""

	BOLD: ClassVar[str] = "\033[1m" if COLOR else ""
	DIM: ClassVar[str] = "\033[2m" if COLOR else ""
	RESET: ClassVar[str] = "\033[0m" if COLOR else ""

	@staticmethod
	def Color(code: int) -> str:
		"""Returns the escape sequence for the given 256-colour code."""
		return f"\033[0;38;5;{code}m" if COLOR else ""


# EOF
