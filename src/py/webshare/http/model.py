from abc import ABC, abstractmethod
from enum import Enum
from functools import lru_cache
from pathlib import Path
from typing import Any, NamedTuple, TypeAlias

from .api import ResponseFactory
from .status import HTTP_STATUS

DEFAULT_ENCODING: str = "utf8"

# Statuses that never have a body
NO_BODY_STATUS: frozenset[int] = frozenset((204, 304))

# Header names are sent by clients, so only the most recent ones are kept
HEADER_NAMES_CACHE: int = 256

# -----------------------------------------------------------------------------
#
# HELPERS
#
# -----------------------------------------------------------------------------


@lru_cache(maxsize=HEADER_NAMES_CACHE)
def headername(name: str) -> str:
	"""Normalizes the header name as `Kebab-Case`."""
	return "-".join(_.capitalize() for _ in name.split("-"))


# -----------------------------------------------------------------------------
#
# DATA MODEL
#
# -----------------------------------------------------------------------------


class HTTPRequestLine(NamedTuple):
	method: str
	# The raw request target, as sent by the client, and its path part
	uri: str
	path: str
	protocol: str


class HTTPHeaders(NamedTuple):
	"""Request headers by normalized name, with the parsed `Content-Length`
	the parser needs to skip the body."""

	headers: dict[str, str]
	contentLength: int | None = None


class HTTPProcessingStatus(Enum):
	"""What the parser yields besides requests."""

	Body = 1
	BadFormat = 12
	TooLarge = 13


# -----------------------------------------------------------------------------
#
# BODY
#
# -----------------------------------------------------------------------------


class HTTPBodyBlob(NamedTuple):
	payload: bytes = b""
	length: int = 0


class HTTPBodyFile(NamedTuple):
	"""A slice of a file, sent without loading it in memory."""

	path: Path
	offset: int
	length: int


THTTPBody: TypeAlias = HTTPBodyBlob | HTTPBodyFile


class HTTPBodyWriter(ABC):
	"""Sends response heads and bodies, subclasses implement the actual
	transport."""

	async def write(self, body: THTTPBody | bytes | None) -> bool:
		if isinstance(body, bytes):
			return await self._writeBytes(body)
		elif isinstance(body, HTTPBodyBlob):
			return await self._writeBytes(body.payload)
		elif isinstance(body, HTTPBodyFile):
			return await self._writeFile(body.path, body.offset, body.length)
		elif body is None:
			return True
		else:
			raise ValueError(f"Unsupported body format: {body}")

	@abstractmethod
	async def _writeBytes(self, chunk: bytes) -> bool: ...

	@abstractmethod
	async def _writeFile(self, path: Path, offset: int, length: int) -> bool: ...


# -----------------------------------------------------------------------------
#
# REQUESTS
#
# -----------------------------------------------------------------------------


class HTTPRequest(ResponseFactory["HTTPResponse"]):
	"""A parsed request, which also acts as a factory for responses."""

	__slots__ = ["method", "uri", "path", "protocol", "remote", "_headers"]

	def __init__(
		self,
		method: str,
		path: str,
		headers: HTTPHeaders,
		protocol: str = "HTTP/1.1",
		*,
		uri: str | None = None,
		remote: str | None = None,
	):
		super().__init__()
		self.method: str = method
		self.path: str = path
		self.protocol: str = protocol
		self.uri: str = path if uri is None else uri
		# The `ip:port` of the client, when known
		self.remote: str | None = remote
		self._headers: HTTPHeaders = headers

	@property
	def headers(self) -> dict[str, str]:
		return self._headers.headers

	def header(self, name: str) -> str | None:
		return self._headers.headers.get(headername(name))

	@property
	def keepAlive(self) -> bool:
		"""Tells if the client expects the connection to stay open."""
		connection = (self.header("Connection") or "").lower()
		if self.protocol == "HTTP/1.0":
			return connection == "keep-alive"
		else:
			return connection != "close"

	def respond(
		self,
		content: Any = None,
		contentType: str | None = None,
		status: int = 200,
		headers: dict[str, str] | None = None,
		message: str | None = None,
	) -> "HTTPResponse":
		return HTTPResponse.Create(
			status=status,
			message=message,
			content=content,
			contentType=contentType,
			protocol=self.protocol,
			headers=headers,
		)

	def __str__(self) -> str:
		return f"Request({self.method} {self.uri} {self.headers})"


# -----------------------------------------------------------------------------
#
# RESPONSE
#
# -----------------------------------------------------------------------------


class HTTPResponse:
	@staticmethod
	def Create(
		content: str | bytes | HTTPBodyFile | None = None,
		contentType: str | None = None,
		headers: dict[str, str] | None = None,
		status: int = 200,
		message: str | None = None,
		protocol: str = "HTTP/1.1",
	) -> "HTTPResponse":
		"""Creates a response, with its `Content-Type` and `Content-Length`
		headers set from the content."""
		body: THTTPBody | None = None
		length: int | None = None
		if content is None:
			# Keep-alive clients need to know there is nothing to read
			length = None if status in NO_BODY_STATUS else 0
		elif isinstance(content, HTTPBodyFile):
			body = content
			length = content.length
		else:
			payload = (
				content.encode(DEFAULT_ENCODING) if isinstance(content, str) else content
			)
			body = HTTPBodyBlob(payload, len(payload))
			length = body.length
		res_headers: dict[str, str] = {headername(k): v for k, v in (headers or {}).items()}
		if contentType is not None:
			res_headers["Content-Type"] = contentType
		if length is not None:
			res_headers["Content-Length"] = str(length)
		return HTTPResponse(
			status=status,
			message=message or HTTP_STATUS.get(status, "Unknown status"),
			headers=res_headers,
			body=body,
			protocol=protocol,
		)

	__slots__ = ["protocol", "status", "message", "headers", "body"]

	def __init__(
		self,
		protocol: str,
		status: int,
		message: str | None,
		headers: dict[str, str],
		body: THTTPBody | None = None,
	):
		self.protocol: str = protocol
		self.status: int = status
		self.message: str | None = message
		self.headers: dict[str, str] = headers
		self.body: THTTPBody | None = body

	def header(self, name: str) -> str | None:
		return self.headers.get(headername(name))

	def setHeader(self, name: str, value: str | int | None) -> "HTTPResponse":
		if value is None:
			self.headers.pop(headername(name), None)
		else:
			self.headers[headername(name)] = str(value)
		return self

	def setHeaders(self, headers: dict[str, str | int | None]) -> "HTTPResponse":
		for k, v in headers.items():
			self.setHeader(k, v)
		return self

	def head(self) -> bytes:
		"""Serializes the status line and headers."""
		message: str = self.message or HTTP_STATUS.get(self.status, "Unknown status")
		lines: list[str] = [f"{self.protocol} {self.status} {message}"]
		lines += [f"{k}: {v}" for k, v in self.headers.items()]
		lines += ["", ""]
		# NOTE: Header values we produce may hold non-ASCII file names, which
		# Latin-1 passes through like most servers do.
		return "\r\n".join(lines).encode("latin-1", "replace")

	def __str__(self) -> str:
		return f"Response({self.protocol} {self.status} {self.message} {self.headers} {self.body})"


# EOF
