import asyncio
import io
import threading
from pathlib import Path
from typing import Awaitable, Callable

import pytest

from webshare.model import Service
from webshare.server import AIOSocketServer, ServerOptions, remoteAddress
from webshare.services.share import ShareService

Response = tuple[int, dict[str, str], bytes]


async def readResponse(reader: asyncio.StreamReader, *, head: bool = False) -> Response:
	"""Reads a response, the body is only read when there is no `HEAD`."""
	data = await reader.readuntil(b"\r\n\r\n")
	lines = data.decode("latin-1").split("\r\n")
	status = int(lines[0].split(" ", 2)[1])
	headers: dict[str, str] = {}
	for line in lines[1:]:
		if line:
			name, _, value = line.partition(":")
			headers[name.strip().lower()] = value.strip()
	length = 0 if head else int(headers.get("content-length", 0))
	return status, headers, await reader.readexactly(length)


def serving(
	service: Service,
	client: Callable[[int], Awaitable[None]],
	options: ServerOptions = ServerOptions(host="127.0.0.1", port=0),
) -> None:
	"""Runs the server on an ephemeral port while the client coroutine runs."""

	async def main() -> None:
		server = AIOSocketServer.Bind(options)
		port = server.getsockname()[1]
		task = asyncio.create_task(AIOSocketServer.Serve(service, options, server))
		try:
			await asyncio.wait_for(client(port), timeout=10)
		finally:
			task.cancel()
			await asyncio.gather(task, return_exceptions=True)

	asyncio.run(main())


async def connect(port: int) -> tuple[asyncio.StreamReader, asyncio.StreamWriter]:
	return await asyncio.open_connection("127.0.0.1", port)


def test_get_index(root: Path, logs: io.StringIO) -> None:
	async def client(port: int) -> None:
		reader, writer = await connect(port)
		writer.write(b"GET / HTTP/1.1\r\nHost: localhost\r\n\r\n")
		status, headers, body = await readResponse(reader)
		assert status == 200
		assert body == (root / "index.html").read_bytes()
		assert headers["server"] == "web-share"
		assert headers["cache-control"] == "no-cache, no-store, must-revalidate"
		assert headers["pragma"] == "no-cache"
		assert headers["expires"] == "0"
		assert "date" in headers
		writer.close()
		await writer.wait_closed()

	serving(ShareService(root), client)


def test_keeps_serving_after_bad_uri(root: Path, logs: io.StringIO) -> None:
	async def client(port: int) -> None:
		reader, writer = await connect(port)
		writer.write(b"GET /%zz HTTP/1.1\r\n\r\n")
		status, headers, body = await readResponse(reader)
		assert status == 400
		assert body == b"Invalid URI\n"
		# The same connection is still usable
		writer.write(b"GET /notes.txt HTTP/1.1\r\n\r\n")
		status, _, body = await readResponse(reader)
		assert status == 200
		assert body == (root / "notes.txt").read_bytes()
		writer.close()
		await writer.wait_closed()
		# And so is the server
		reader, writer = await connect(port)
		writer.write(b"GET /favicon.ico HTTP/1.1\r\nConnection: close\r\n\r\n")
		status, headers, _ = await readResponse(reader)
		assert status == 200
		assert headers["content-type"] == "image/x-icon"
		assert headers["connection"] == "close"
		assert await reader.read() == b""
		writer.close()
		await writer.wait_closed()

	serving(ShareService(root), client)
	assert "Closed" in logs.getvalue()


def test_pipelining_and_head(root: Path, logs: io.StringIO) -> None:
	async def client(port: int) -> None:
		reader, writer = await connect(port)
		writer.write(
			b"HEAD /notes.txt HTTP/1.1\r\n\r\n"
			b"GET /notes.txt HTTP/1.1\r\nRange: bytes=90-\r\n\r\n"
		)
		status, headers, body = await readResponse(reader, head=True)
		assert status == 200
		assert headers["content-length"] == "100"
		status, headers, body = await readResponse(reader)
		assert status == 206
		assert headers["content-range"] == "bytes 90-99/100"
		assert body == b"0123456789"
		writer.close()
		await writer.wait_closed()

	serving(ShareService(root), client)


def test_header_too_large(root: Path, logs: io.StringIO) -> None:
	async def client(port: int) -> None:
		reader, writer = await connect(port)
		writer.write(b"GET / HTTP/1.1\r\nCookie: " + b"x" * 4096 + b"\r\n\r\n")
		status, headers, _ = await readResponse(reader)
		assert status == 431
		assert headers["connection"] == "close"
		writer.close()

	serving(
		ShareService(root),
		client,
		ServerOptions(host="127.0.0.1", port=0, maxHeaderSize=1024),
	)


def test_bad_request_line(root: Path, logs: io.StringIO) -> None:
	async def client(port: int) -> None:
		reader, writer = await connect(port)
		writer.write(b"NOT HTTP\r\n\r\n")
		status, _, _ = await readResponse(reader)
		assert status == 400
		assert await reader.read() == b""
		writer.close()
		await writer.wait_closed()

	serving(ShareService(root), client)


def test_service_failure(root: Path, logs: io.StringIO) -> None:
	class Failing(Service):
		def process(self, request):
			raise RuntimeError("Failure")

	async def client(port: int) -> None:
		reader, writer = await connect(port)
		writer.write(b"GET / HTTP/1.1\r\n\r\n")
		status, _, _ = await readResponse(reader)
		assert status == 500
		writer.close()
		await writer.wait_closed()

	serving(Failing(), client)
	assert "Failure" in logs.getvalue()


def test_blocking_service(logs: io.StringIO) -> None:
	waiting = threading.Event()
	released = threading.Event()

	class Blocking(Service):
		def process(self, request):
			if request.path == "/release":
				released.set()
				return request.respond("released", "text/plain")
			waiting.set()
			# Only another connection can release this one
			return request.respond("waited" if released.wait(5) else "stalled", "text/plain")

	async def client(port: int) -> None:
		slow_reader, slow_writer = await connect(port)
		slow_writer.write(b"GET /wait HTTP/1.1\r\n\r\n")
		assert await asyncio.to_thread(waiting.wait, 5)
		reader, writer = await connect(port)
		writer.write(b"GET /release HTTP/1.1\r\n\r\n")
		status, _, body = await readResponse(reader)
		assert (status, body) == (200, b"released")
		status, _, body = await readResponse(slow_reader)
		assert (status, body) == (200, b"waited")
		for w in (writer, slow_writer):
			w.close()
			await w.wait_closed()

	serving(Blocking(), client)


def test_read_timeout(root: Path, logs: io.StringIO) -> None:
	async def client(port: int) -> None:
		reader, writer = await connect(port)
		# The server gives up on idle clients
		assert await reader.read() == b""
		writer.close()
		await writer.wait_closed()

	serving(
		ShareService(root),
		client,
		ServerOptions(host="127.0.0.1", port=0, readTimeout=0.1),
	)
	assert "Client timed out" in logs.getvalue()


def test_bind_error() -> None:
	options = ServerOptions(host="127.0.0.1", port=0)
	server = AIOSocketServer.Bind(options)
	try:
		port = server.getsockname()[1]
		with pytest.raises(OSError):
			AIOSocketServer.Bind(ServerOptions(host="127.0.0.1", port=port))
	finally:
		server.close()


def test_remote_address() -> None:
	assert remoteAddress(("10.0.0.1", 4242)) == "10.0.0.1:4242"
	assert remoteAddress("unix") == "unix"


# EOF
