import posixpath

# Logged URIs are cut after this many characters
MAX_URI_LENGTH: int = 500

HEX_DIGITS: frozenset[int] = frozenset(b"0123456789abcdefABCDEF")


class URIError(ValueError):
	"""Raised when a URI cannot be unescaped."""


def unescape(text: str, *, plus: bool = True) -> str:
	"""Decodes `%XY` escapes in the given text, and `+` as a space when
	`plus` is set (query semantics). Unlike `urllib.parse.unquote`, malformed
	escapes raise a `URIError`. Bytes that are not UTF-8 are kept as
	surrogates, so that the result maps back to the original bytes, like
	file names do with `os.fsencode`."""
	if "%" not in text and not (plus and "+" in text):
		return text
	# Request lines are decoded with `surrogateescape`, so this gives back
	# the original bytes.
	data: bytes = text.encode("utf-8", "surrogateescape")
	res = bytearray()
	i: int = 0
	n: int = len(data)
	while i < n:
		c = data[i]
		if c == 0x25:
			if i + 2 >= n or data[i + 1] not in HEX_DIGITS or data[i + 2] not in HEX_DIGITS:
				escape = data[i : i + 3].decode("utf-8", "replace")
				raise URIError(f'invalid URL escape "{escape}"')
			res.append(int(data[i + 1 : i + 3], 16))
			i += 3
		elif c == 0x2B and plus:
			res.append(0x20)
			i += 1
		else:
			res.append(c)
			i += 1
	return res.decode("utf-8", "surrogateescape")


def displayable(text: str) -> str:
	"""Returns the text with the bytes that are not UTF-8 (kept as
	surrogates) replaced, so that it can be written as UTF-8."""
	return text.encode("utf-8", "surrogateescape").decode("utf-8", "replace")


def shorten(uri: str, limit: int = MAX_URI_LENGTH) -> str:
	"""Shortens the URI for logging, the URI used to serve is never
	shortened."""
	return f"{uri[:limit]} ..." if len(uri) > limit else uri


def cleanPath(path: str) -> str:
	"""Returns the canonical, absolute form of the given URL path, keeping
	a trailing slash."""
	if not path.startswith("/"):
		path = f"/{path}"
	res = posixpath.normpath(path)
	# POSIX allows a leading double slash, we don't
	if res.startswith("//"):
		res = "/" + res.lstrip("/")
	if path.endswith("/") and res != "/":
		res += "/"
	return res


# EOF
