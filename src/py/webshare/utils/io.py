# Lines end with CRLF, a bare LF is accepted too
EOL: bytes = b"\n"
CR: bytes = b"\r"


class LineParser:
	"""Accumulates bytes until an end of line is found."""

	__slots__ = ["buffer", "line", "eol", "eolsize", "offset"]

	def __init__(self, eol: bytes = EOL) -> None:
		self.buffer: bytearray = bytearray()
		self.line: bytes | None = None
		self.offset: int = 0
		self.eol: bytes = eol
		self.eolsize: int = len(eol)

	def reset(self, eol: bytes = EOL) -> "LineParser":
		self.buffer.clear()
		self.line = None
		self.offset = 0
		self.eol = eol
		self.eolsize = len(eol)
		return self

	def flush(self) -> bytes | None:
		line = self.line
		self.line = None
		return line

	def feed(self, chunk: bytes, start: int = 0) -> tuple[bytes | None, int]:
		"""Returns the matching line (without the end of line) and how many
		bytes were read in chunk from start. When line is None, then the
		whole chunk has been buffered."""
		pos = len(self.buffer)
		self.buffer += chunk[start:]
		end = self.buffer.find(self.eol, self.offset)
		if end == -1:
			# The end of line may be split between two chunks
			self.offset = max(0, len(self.buffer) - self.eolsize + 1)
			return None, len(chunk) - start
		else:
			self.line = bytes(self.buffer[:end]).removesuffix(CR)
			self.buffer.clear()
			self.offset = 0
			return self.line, (end - pos) + self.eolsize


# EOF
