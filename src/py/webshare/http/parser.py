from typing import Iterator, Literal, TypeAlias

from ..config import MAX_HEADER_SIZE
from ..utils.io import LineParser
from .model import (
	HTTPRequest,
	HTTPRequestLine,
	HTTPHeaders,
	HTTPProcessingStatus,
	headername,
)

# What the parser produces
HTTPAtom: TypeAlias = HTTPRequest | HTTPProcessingStatus

# TLS records start with this content type, see `MessageParser.feed`
TLS_HANDSHAKE: int = 0x16


class MessageParser:
	"""Parses an HTTP request line."""

	__slots__ = ["line", "value", "skipping"]

	def __init__(self) -> None:
		self.line: LineParser = LineParser()
		self.value: HTTPRequestLine | None = None
		self.skipping: int = 0

	def flush(self) -> HTTPRequestLine | None:
		res = self.value
		self.reset()
		return res

	def reset(self) -> "MessageParser":
		self.line.reset()
		self.value = None
		self.skipping = 0
		return self

	def feed(self, chunk: bytes, start: int = 0) -> tuple[bool | None, int]:
		"""Returns `True` when a request line was parsed, `False` when the
		line is not a valid request line and `None` when more data is needed."""
		available = len(chunk) - start
		if self.skipping:
			# We have remaining data of a TLS record to skip
			read = min(available, self.skipping)
			self.skipping -= read
			return None, read
		elif available >= 5 and chunk[start] == TLS_HANDSHAKE and not self.line.buffer:
			# Some browsers try TLS first, we skip the record based on its length
			size = 5 + (chunk[start + 3] << 8) + chunk[start + 4]
			if available >= size:
				return None, size
			else:
				self.skipping = size - available
				return None, available
		else:
			line, read = self.line.feed(chunk, start)
			if line is None:
				return None, read
			elif not line:
				# Empty lines before a request line are ignored
				self.line.flush()
				return None, read
			self.value = parseRequestLine(line.decode("utf-8", "surrogateescape"))
			return self.value is not None, read

	def __str__(self) -> str:
		return f"MessageParser({self.value})"


class HeadersParser:
	__slots__ = ["headers", "contentLength", "line"]

	def __init__(self) -> None:
		self.line: LineParser = LineParser()
		self.headers: dict[str, str] = {}
		self.contentLength: int | None = None

	def flush(self) -> HTTPHeaders:
		res = HTTPHeaders(self.headers, self.contentLength)
		self.reset()
		return res

	def reset(self) -> "HeadersParser":
		self.line.reset()
		self.headers = {}
		self.contentLength = None
		return self

	def feed(
		self, chunk: bytes, start: int = 0
	) -> tuple[str | Literal[False] | None, int]:
		"""Feeds data from chunk, starting at `start` offset. Returns
		a value and the next start offset. When the value is `None`, no
		header has been extracted, when the value is `False` it's an empty
		line, and when the value is a string, the header with that name was
		added."""
		line, read = self.line.feed(chunk, start)
		if line is None:
			return None, read
		elif not line:
			# An empty line denotes the end of headers
			return False, read
		ln: str = line.decode("latin-1")
		i = ln.find(":")
		if i == -1:
			# Not a header, we skip it
			return None, read
		h = ln[:i].lower().strip()
		v = ln[i + 1 :].strip()
		if h == "content-length":
			try:
				self.contentLength = int(v)
			except ValueError:
				self.contentLength = None
		n: str = headername(h)
		# Repeated headers are folded into a comma separated list
		self.headers[n] = f"{self.headers[n]}, {v}" if n in self.headers else v
		return n, read

	def __str__(self) -> str:
		return f"HeadersParser({self.headers})"


class BodySkipParser:
	"""Consumes (and drops) a body with a known length."""

	__slots__ = ["remaining"]

	def __init__(self) -> None:
		self.remaining: int = 0

	def reset(self, length: int = 0) -> "BodySkipParser":
		self.remaining = length
		return self

	def feed(self, chunk: bytes, start: int = 0) -> tuple[bool | None, int]:
		read = min(len(chunk) - start, self.remaining)
		self.remaining -= read
		return (True if self.remaining == 0 else None), read


class HTTPParser:
	"""A stateful HTTP request parser. Bytes are fed as they are received,
	requests are yielded once complete. Request bodies are not kept, as
	nothing we serve accepts one."""

	def __init__(self, maxHeaderSize: int = MAX_HEADER_SIZE) -> None:
		self.message: MessageParser = MessageParser()
		self.headers: HeadersParser = HeadersParser()
		self.body: BodySkipParser = BodySkipParser()
		self.parser: MessageParser | HeadersParser | BodySkipParser = self.message
		self.requestLine: HTTPRequestLine | None = None
		self.request: HTTPRequest | None = None
		self.maxHeaderSize: int = maxHeaderSize
		# Size of the request head (request line and headers) read so far
		self.headSize: int = 0

	def reset(self) -> "HTTPParser":
		self.parser = self.message.reset()
		self.headers.reset()
		self.requestLine = None
		self.request = None
		self.headSize = 0
		return self

	def feed(self, chunk: bytes) -> Iterator[HTTPAtom]:
		size: int = len(chunk)
		offset: int = 0
		while offset < size:
			# When we feed a chunk and it's partially read, we don't need to
			# re-feed it again. The underlying parser keeps a buffer until
			# it is flushed.
			ln, read = self.parser.feed(chunk, offset)
			offset += read
			if self.parser is not self.body:
				self.headSize += read
				if self.headSize > self.maxHeaderSize:
					yield HTTPProcessingStatus.TooLarge
					self.reset()
					return
			if ln is None:
				continue
			elif self.parser is self.message:
				line = self.message.flush()
				if not ln or line is None:
					yield HTTPProcessingStatus.BadFormat
					self.reset()
					return
				self.requestLine = line
				self.parser = self.headers
			elif self.parser is self.headers:
				if ln is not False:
					# `ln` is the header name, more headers to come
					continue
				headers = self.headers.flush()
				line = self.requestLine
				if line is None or (headers.contentLength or 0) < 0:
					yield HTTPProcessingStatus.BadFormat
					self.reset()
					return
				request = HTTPRequest(
					method=line.method,
					path=line.path,
					headers=headers,
					protocol=line.protocol,
					uri=line.uri,
				)
				if headers.contentLength:
					# The request is complete once its body is consumed
					self.request = request
					self.parser = self.body.reset(headers.contentLength)
					yield HTTPProcessingStatus.Body
				else:
					yield request
					self.reset()
			elif self.parser is self.body:
				if self.request:
					yield self.request
				self.reset()
			else:
				raise RuntimeError(f"Unsupported parser: {self.parser}")


def parseRequestLine(line: str) -> HTTPRequestLine | None:
	"""Parses a line like `GET /index.html?q=1 HTTP/1.1`, returning `None`
	when it is malformed."""
	parts = line.split(" ")
	if len(parts) != 3:
		return None
	method, uri, protocol = parts
	if not (method.isalpha() and uri and protocol.startswith("HTTP/")):
		return None
	path: str = uri.split("?", 1)[0]
	if "://" in path:
		# Absolute form, as sent to proxies: we only keep the path
		path = "/" + path.split("://", 1)[1].partition("/")[2]
	return HTTPRequestLine(method, uri, path, protocol)


# EOF
