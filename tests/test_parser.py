from webshare.http.model import (
	HEADER_NAMES_CACHE,
	HTTPProcessingStatus,
	HTTPRequest,
	headername,
)
from webshare.http.parser import HTTPParser, parseRequestLine

REQUEST: bytes = (
	b"GET /docs/index.html?lang=en&x HTTP/1.1\r\n"
	b"Host: localhost:8080\r\n"
	b"user-agent: curl/8.0\r\n"
	b"Accept: text/html\r\n"
	b"accept: */*\r\n"
	b"\r\n"
)


def requests(atoms: list) -> list[HTTPRequest]:
	return [_ for _ in atoms if isinstance(_, HTTPRequest)]


def test_request() -> None:
	(req,) = requests(list(HTTPParser().feed(REQUEST)))
	assert req.method == "GET"
	assert req.uri == "/docs/index.html?lang=en&x"
	assert req.path == "/docs/index.html"
	assert req.protocol == "HTTP/1.1"
	assert req.header("host") == "localhost:8080"
	assert req.headers["User-Agent"] == "curl/8.0"
	# Repeated headers are folded
	assert req.header("Accept") == "text/html, */*"
	assert req.keepAlive


def test_chunked_feed() -> None:
	# The request may be received byte by byte
	for size in (1, 2, 3, 7, 64):
		parser = HTTPParser()
		atoms = []
		for i in range(0, len(REQUEST), size):
			atoms += list(parser.feed(REQUEST[i : i + size]))
		(req,) = requests(atoms)
		assert req.path == "/docs/index.html"
		assert len(req.headers) == 3


def test_pipelining() -> None:
	payload = (
		b"GET /a HTTP/1.1\r\n\r\n"
		b"HEAD /b HTTP/1.1\r\nConnection: close\r\n\r\n"
	)
	a, b = requests(list(HTTPParser().feed(payload)))
	assert (a.method, a.path) == ("GET", "/a")
	assert (b.method, b.path) == ("HEAD", "/b")
	assert a.keepAlive
	assert not b.keepAlive


def test_body_is_skipped() -> None:
	payload = (
		b"POST /upload HTTP/1.1\r\nContent-Length: 11\r\n\r\n"
		b"hello world"
		b"GET /next HTTP/1.1\r\n\r\n"
	)
	parser = HTTPParser()
	atoms = list(parser.feed(payload[:50]))
	atoms += list(parser.feed(payload[50:]))
	assert HTTPProcessingStatus.Body in atoms
	post, get = requests(atoms)
	assert post.method == "POST"
	assert post.header("Content-Length") == "11"
	assert get.path == "/next"


def test_leading_empty_lines() -> None:
	(req,) = requests(list(HTTPParser().feed(b"\r\n\r\nGET / HTTP/1.1\n\n")))
	assert req.path == "/"


def test_bad_format() -> None:
	for line in (
		b"GET /\r\n\r\n",
		b"GET / HTTP/1.1 extra\r\n\r\n",
		b"G3T / HTTP/1.1\r\n\r\n",
		b"GET / FTP/1.0\r\n\r\n",
	):
		assert list(HTTPParser().feed(line)) == [HTTPProcessingStatus.BadFormat]
	negative = b"POST / HTTP/1.1\r\nContent-Length: -1\r\n\r\n"
	assert list(HTTPParser().feed(negative)) == [HTTPProcessingStatus.BadFormat]


def test_too_large() -> None:
	parser = HTTPParser(maxHeaderSize=1024)
	atoms = list(parser.feed(b"GET / HTTP/1.1\r\n"))
	atoms += list(parser.feed(b"Cookie: " + b"x" * 2048 + b"\r\n\r\n"))
	assert atoms == [HTTPProcessingStatus.TooLarge]
	# A head that fits is fine
	(req,) = requests(list(HTTPParser(maxHeaderSize=1024).feed(REQUEST)))
	assert req.method == "GET"


def test_tls_is_skipped() -> None:
	record = bytes([0x16, 0x03, 0x01, 0x00, 0x04]) + b"\x01\x02\x03\x04"
	(req,) = requests(list(HTTPParser().feed(record + b"GET / HTTP/1.1\r\n\r\n")))
	assert req.path == "/"


def test_header_names_bounded() -> None:
	# Clients choose header names, only a bounded number is remembered
	parser = HTTPParser()
	for i in range(50):
		head = b"".join(b"X-Custom-%d-%d: 1\r\n" % (i, j) for j in range(100))
		(req,) = requests(list(parser.feed(b"GET / HTTP/1.1\r\n" + head + b"\r\n")))
		assert req.header(f"x-custom-{i}-99") == "1"
	assert headername.cache_info().currsize <= HEADER_NAMES_CACHE
	assert headername("content-type") == "Content-Type"


def test_request_line() -> None:
	line = parseRequestLine("GET http://example.com/a/b?c=1 HTTP/1.1")
	assert line is not None
	assert line.path == "/a/b"
	assert line.uri == "http://example.com/a/b?c=1"
	assert parseRequestLine("GET  HTTP/1.1") is None


# EOF
