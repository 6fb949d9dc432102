from os import getenv
from pathlib import Path
from stat import S_ISDIR
from typing import NamedTuple

INTERFACE: str = getenv("WEBSHARE_INTERFACE", "")
# Kept as text, the command line parses it like the `--port` option
PORT: str = getenv("WEBSHARE_PORT", "8080")
DIRECTORY: str = getenv("WEBSHARE_DIRECTORY", ".")

# Generous timeouts, only there so that stale connections expire eventually
READ_TIMEOUT: float = 3_600.0
WRITE_TIMEOUT: float = 3_600.0
# We don't expect big headers
MAX_HEADER_SIZE: int = 1 << 18

SERVER_NAME: str = "web-share"


class WebShareError(Exception):
	"""Base class for startup errors, carrying an optional underlying cause."""

	def __init__(self, message: str, cause: BaseException | None = None):
		super().__init__(message)
		self.message: str = message
		self.cause: BaseException | None = cause

	def __str__(self) -> str:
		if self.message and self.cause:
			return f"{self.message}: {self.cause}"
		elif self.message:
			return self.message
		elif self.cause:
			return str(self.cause)
		else:
			return "Unknown internal error"


class ConfigError(WebShareError):
	pass


class ServerConfig(NamedTuple):
	"""Validated server configuration, created once at startup from the
	command line."""

	interface: str
	port: int
	root: Path


def validatePort(port: int) -> int:
	if port <= 0 or port > 0xFFFF:
		raise ConfigError(f"Invalid port number: {port}")
	return port


def validateInterface(name: str | None) -> str:
	if not name:
		raise ConfigError("Network interface is not specified")
	return name


def validateDirectory(directory: str | Path) -> Path:
	"""Returns the absolute path of the given directory, making sure that it
	exists and is a directory."""
	try:
		root = Path(directory).absolute()
	except OSError as e:
		raise ConfigError("Cannot build absolute pathname", e) from e
	try:
		info = root.stat()
	except OSError as e:
		raise ConfigError("", e) from e
	if not S_ISDIR(info.st_mode):
		raise ConfigError(f"Not a directory: {root}")
	return root


# EOF
