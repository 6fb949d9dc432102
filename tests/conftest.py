import io
from pathlib import Path
from typing import Callable

import pytest

from webshare.http.model import (
	HTTPBodyBlob,
	HTTPBodyFile,
	HTTPHeaders,
	HTTPRequest,
	HTTPResponse,
	headername,
)
from webshare.utils import logging

INDEX_HTML: str = "<html><body>Hello, web-share</body></html>\n"


def makeRequest(
	uri: str = "/",
	method: str = "GET",
	headers: dict[str, str] | None = None,
	remote: str | None = "127.0.0.1:50000",
) -> HTTPRequest:
	"""Creates a request like the parser would for the given target."""
	return HTTPRequest(
		method,
		uri.partition("?")[0],
		HTTPHeaders({headername(k): v for k, v in (headers or {}).items()}),
		uri=uri,
		remote=remote,
	)


def bodyOf(response: HTTPResponse) -> bytes:
	"""Returns the bytes that would be sent as the body of the response."""
	body = response.body
	if body is None:
		return b""
	elif isinstance(body, HTTPBodyBlob):
		return body.payload
	elif isinstance(body, HTTPBodyFile):
		with open(body.path, "rb") as f:
			f.seek(body.offset)
			return f.read(body.length)
	else:
		raise ValueError(f"Unsupported body: {body}")


@pytest.fixture
def request_for() -> Callable[..., HTTPRequest]:
	return makeRequest


@pytest.fixture
def body() -> Callable[[HTTPResponse], bytes]:
	return bodyOf


@pytest.fixture
def logs(monkeypatch: pytest.MonkeyPatch) -> io.StringIO:
	"""Captures what the logger writes."""
	stream = io.StringIO()
	monkeypatch.setattr(logging, "ERR", stream)
	return stream


@pytest.fixture
def root(tmp_path: Path) -> Path:
	"""A shared directory with an index, a few files and subdirectories."""
	(tmp_path / "index.html").write_text(INDEX_HTML)
	(tmp_path / "notes.txt").write_text("0123456789" * 10)
	(tmp_path / "README").write_text("Plain text without extension\n")
	(tmp_path / "data.bin").write_bytes(bytes(range(256)))
	(tmp_path / "sub").mkdir()
	(tmp_path / "sub" / "file.txt").write_text("In a subdirectory\n")
	(tmp_path / "sub" / "with space.txt").write_text("Spaced\n")
	(tmp_path / "sub" / "nested").mkdir()
	return tmp_path


# EOF
