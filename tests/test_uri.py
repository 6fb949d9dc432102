import pytest

from webshare.utils.uri import (
	MAX_URI_LENGTH,
	URIError,
	cleanPath,
	displayable,
	shorten,
	unescape,
)


def test_unescape() -> None:
	assert unescape("/index.html") == "/index.html"
	assert unescape("/a%20b+c") == "/a b c"
	assert unescape("/a%20b+c", plus=False) == "/a b+c"
	assert unescape("/caf%C3%A9?q=%2F") == "/café?q=/"
	assert unescape("/%7e%7E") == "/~~"


@pytest.mark.parametrize(
	"uri,escape",
	[("/%zz", "%zz"), ("/a%4", "%4"), ("/a%", "%"), ("/%g1/b", "%g1")],
)
def test_unescape_invalid(uri: str, escape: str) -> None:
	with pytest.raises(URIError) as e:
		unescape(uri)
	assert str(e.value) == f'invalid URL escape "{escape}"'


def test_unescape_bytes() -> None:
	# Escaped bytes need not be UTF-8, they map back to the same bytes
	assert unescape("/%ff%fe") == "/\udcff\udcfe"
	assert unescape("/%ff%fe").encode("utf-8", "surrogateescape") == b"/\xff\xfe"
	assert unescape("/caf%E9") == "/caf\udce9"
	# Raw bytes received on the wire are kept as they were
	assert unescape("/caf\udcc3\udca9%20") == "/café "


def test_displayable() -> None:
	assert displayable("/caf\udce9") == "/caf\ufffd"
	assert displayable("/café") == "/café"


def test_shorten() -> None:
	uri = "/" + "a" * 9_999
	short = shorten(uri)
	assert len(short) == MAX_URI_LENGTH + 4
	assert short == uri[:500] + " ..."
	assert shorten("/" * 500) == "/" * 500
	assert shorten("/short") == "/short"
	assert shorten("/abcdef", 3) == "/ab ..."


@pytest.mark.parametrize(
	"path,expected",
	[
		("/", "/"),
		("", "/"),
		("a/b", "/a/b"),
		("/a/./b/", "/a/b/"),
		("/a/../../b", "/b"),
		("/../../etc/passwd", "/etc/passwd"),
		("//a//b", "/a/b"),
		("/a/..", "/"),
	],
)
def test_clean_path(path: str, expected: str) -> None:
	assert cleanPath(path) == expected


# EOF
