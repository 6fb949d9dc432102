import mimetypes
import os.path
from pathlib import Path

mimetypes.init()

# Types that `mimetypes` gets wrong or does not know about on some systems
MIME_TYPES: dict[str, str] = dict(
	bz2="application/x-bzip",
	gz="application/x-gzip",
	js="text/javascript; charset=utf-8",
	mjs="text/javascript; charset=utf-8",
	md="text/markdown; charset=utf-8",
	wasm="application/wasm",
)

# Types that get a charset appended when guessed by `mimetypes`
CHARSET_TYPES: tuple[str, ...] = (
	"text/",
	"application/json",
	"application/javascript",
	"application/xml",
	"image/svg+xml",
)

SNIFF_SIZE: int = 512


def isText(data: bytes) -> bool:
	"""Tells if the given sample looks like UTF-8 text."""
	if b"\x00" in data:
		return False
	try:
		data.decode("utf-8")
		return True
	except UnicodeDecodeError as e:
		# The sample may end in the middle of a multi-byte character
		return e.start >= len(data) - 3 and e.reason == "unexpected end of data"


def guessContentType(path: Path | str) -> str | None:
	"""Guesses the content type from the extension of the given path, returns
	`None` when the extension is unknown."""
	name = str(path)
	ext = os.path.splitext(name)[1][1:].lower()
	if res := MIME_TYPES.get(ext):
		return res
	guessed = mimetypes.guess_type(name)[0]
	if guessed and guessed.startswith(CHARSET_TYPES):
		return f"{guessed}; charset=utf-8"
	return guessed


def sniffContentType(sample: bytes) -> str:
	return "text/plain; charset=utf-8" if isText(sample) else "application/octet-stream"


# EOF
