import email.utils
from pathlib import Path
from typing import NamedTuple

from .model import HTTPBodyFile, HTTPRequest, HTTPResponse

# --
# Serving of static content: conditional requests (`If-Modified-Since` and
# friends) and byte ranges. Used for files and for in-memory resources.

# SEE: https://www.rfc-editor.org/rfc/rfc9110#section-13.2.2


class ByteRange(NamedTuple):
	start: int
	length: int

	def contentRange(self, size: int) -> str:
		return f"bytes {self.start}-{self.start + self.length - 1}/{size}"


class RangeError(ValueError):
	pass


def httpdate(timestamp: float) -> str:
	return email.utils.formatdate(timestamp, usegmt=True)


def parseHTTPDate(text: str | None) -> float | None:
	if not text:
		return None
	try:
		return email.utils.parsedate_to_datetime(text).timestamp()
	except (TypeError, ValueError, IndexError):
		return None


def parseRange(header: str | None, size: int) -> list[ByteRange] | None:
	"""Parses a `Range` header like `bytes=0-99,-50` for content of the given
	size. Returns `None` when there is no range, raises `RangeError` when
	the header is malformed or no range overlaps the content."""
	if not header:
		return None
	if not header.startswith("bytes="):
		raise RangeError("invalid range")
	ranges: list[ByteRange] = []
	no_overlap: bool = False
	for item in header[6:].split(","):
		item = item.strip()
		if not item:
			continue
		start, sep, end = item.partition("-")
		start, end = start.strip(), end.strip()
		if not sep:
			raise RangeError("invalid range")
		elif not start:
			# A suffix range, like `-500` for the last 500 bytes
			if not end.isdigit():
				raise RangeError("invalid range")
			n = min(int(end), size)
			if n == 0:
				no_overlap = True
				continue
			ranges.append(ByteRange(size - n, n))
		else:
			if not start.isdigit() or (end and not end.isdigit()):
				raise RangeError("invalid range")
			i = int(start)
			if i >= size:
				# The range starts after the end of the content
				no_overlap = True
				continue
			if not end:
				ranges.append(ByteRange(i, size - i))
			else:
				j = int(end)
				if i > j:
					raise RangeError("invalid range")
				ranges.append(ByteRange(i, min(j, size - 1) - i + 1))
	if no_overlap and not ranges:
		raise RangeError("invalid range: failed to overlap")
	return ranges


def checkPreconditions(request: HTTPRequest, modified: float) -> int | None:
	"""Evaluates the conditional headers of the request against the
	modification time of the content, returning the status to respond with
	(`304` or `412`) or `None` when the content should be served."""
	# Dates in headers have a one second resolution
	mtime: int = int(modified)
	if_match = request.header("If-Match")
	if if_match is not None:
		# We don't produce ETags, so only `*` matches
		if if_match.strip() != "*":
			return 412
	elif (t := parseHTTPDate(request.header("If-Unmodified-Since"))) is not None:
		if mtime > t:
			return 412
	if_none_match = request.header("If-None-Match")
	if if_none_match is not None:
		if if_none_match.strip() == "*":
			return 304 if request.method in ("GET", "HEAD") else 412
	elif request.method in ("GET", "HEAD"):
		t = parseHTTPDate(request.header("If-Modified-Since"))
		if t is not None and mtime <= t:
			return 304
	return None


def checkIfRange(request: HTTPRequest, modified: float) -> bool:
	"""Tells if the `Range` header should be honoured, which is when there is
	no `If-Range` or when it holds the exact modification date."""
	if_range = request.header("If-Range")
	if if_range is None:
		return True
	t = parseHTTPDate(if_range)
	return t is not None and int(modified) == int(t)


def serveContent(
	request: HTTPRequest,
	content: bytes | Path,
	*,
	modified: float,
	contentType: str,
	size: int | None = None,
) -> HTTPResponse:
	"""Responds with the given content (bytes or a file path), supporting
	conditional and range requests."""
	headers: dict[str, str] = {"Accept-Ranges": "bytes"}
	if modified > 0:
		headers["Last-Modified"] = httpdate(modified)
		status = checkPreconditions(request, modified)
		if status == 304:
			return request.notModified(headers)
		elif status:
			return request.empty(status)
	if size is None:
		size = len(content) if isinstance(content, bytes) else content.stat().st_size
	try:
		ranges = (
			parseRange(request.header("Range"), size)
			if checkIfRange(request, modified)
			else None
		)
	except RangeError as e:
		return request.error(
			416, str(e), headers=headers | {"Content-Range": f"bytes */{size}"}
		)
	# NOTE: Several ranges would need a `multipart/byteranges` response, we
	# send the whole content instead, which clients accept.
	if ranges and len(ranges) == 1 and ranges[0].length <= size:
		r = ranges[0]
		return request.respond(
			(
				content[r.start : r.start + r.length]
				if isinstance(content, bytes)
				else HTTPBodyFile(content, r.start, r.length)
			),
			contentType=contentType,
			status=206,
			headers=headers | {"Content-Range": r.contentRange(size)},
		)
	else:
		return request.respond(
			content if isinstance(content, bytes) else HTTPBodyFile(content, 0, size),
			contentType=contentType,
			headers=headers,
		)


# EOF
