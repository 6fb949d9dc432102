import asyncio
import errno
import inspect
import socket
from email.utils import formatdate
from pathlib import Path
from typing import Any, Callable, Literal, NamedTuple

from .config import MAX_HEADER_SIZE, READ_TIMEOUT, SERVER_NAME, WRITE_TIMEOUT
from .http.model import (
	HTTPBodyWriter,
	HTTPProcessingStatus,
	HTTPRequest,
	HTTPResponse,
)
from .http.parser import HTTPParser
from .model import Service
from .utils.limits import LimitType, unlimit
from .utils.logging import error, event, exception, info, warning


class ServerOptions(NamedTuple):
	host: str = "0.0.0.0"  # nosec: B104
	port: int = 8080
	backlog: int = 10_000
	# Time allowed to receive each chunk of a request, and to send each
	# chunk of a response.
	readTimeout: float = READ_TIMEOUT
	writeTimeout: float = WRITE_TIMEOUT
	maxHeaderSize: int = MAX_HEADER_SIZE
	# This is the polling timeout for accepting new requests. Every second is
	# good
	polling: float = 1.0
	readsize: int = 64_000
	condition: Callable[[], bool] | None = None


OPTIONS: ServerOptions = ServerOptions()


def errorResponse(status: int, message: str) -> bytes:
	"""A response sent when the request could not be parsed, the
	connection is closed right after."""
	body = f"{status} {message}\n".encode("ascii")
	return (
		f"HTTP/1.1 {status} {message}\r\n"
		f"Content-Type: text/plain; charset=utf-8\r\n"
		f"Content-Length: {len(body)}\r\n"
		f"Server: {SERVER_NAME}\r\n"
		"Connection: close\r\n"
		"\r\n"
	).encode("ascii") + body


SERVER_BAD_REQUEST: bytes = errorResponse(400, "Bad Request")
SERVER_TOO_LARGE: bytes = errorResponse(431, "Request Header Fields Too Large")
SERVER_ERROR: bytes = errorResponse(500, "Internal Server Error")


class AIOSocketBodyWriter(HTTPBodyWriter):
	"""Specialized body writer to work with AIO sockets, each write must
	complete within the given timeout."""

	def __init__(
		self,
		client: "socket.socket",
		loop: asyncio.AbstractEventLoop,
		timeout: float = WRITE_TIMEOUT,
	) -> None:
		super().__init__()
		self.client: socket.socket = client
		self.loop: asyncio.AbstractEventLoop = loop
		self.timeout: float = timeout

	async def _writeBytes(self, chunk: bytes | None | Literal[False]) -> bool:
		if chunk:
			await asyncio.wait_for(
				self.loop.sock_sendall(self.client, chunk), timeout=self.timeout
			)
		return True

	async def _writeFile(
		self, path: Path, offset: int, length: int, size: int = 64_000
	) -> bool:
		with open(path, "rb") as f:
			await asyncio.wait_for(
				self.loop.sock_sendfile(self.client, f, offset, length),
				timeout=self.timeout,
			)
		return True


def remoteAddress(address: Any) -> str:
	"""Formats the address returned by `accept` as `ip:port`."""
	if isinstance(address, tuple) and len(address) >= 2:
		return f"{address[0]}:{address[1]}"
	else:
		return str(address)


# NOTE: Based on benchmarks, plain sockets with asyncio gave the best
# performance.
class AIOSocketServer:
	"""AsyncIO backend using sockets directly."""

	@classmethod
	async def OnRequest(
		cls,
		service: Service,
		client: socket.socket,
		remote: str,
		*,
		loop: asyncio.AbstractEventLoop,
		options: ServerOptions,
	) -> None:
		"""Asynchronous worker, processing the requests of a client
		connection until it closes."""
		keep_alive: bool = True
		req_count: int = 0
		try:
			parser: HTTPParser = HTTPParser(options.maxHeaderSize)
			writer: AIOSocketBodyWriter = AIOSocketBodyWriter(
				client, loop, options.writeTimeout
			)
			while keep_alive:
				try:
					chunk = await asyncio.wait_for(
						loop.sock_recv(client, options.readsize),
						timeout=options.readTimeout,
					)
				except TimeoutError:
					warning("Client timed out", Client=remote, Requests=req_count)
					break
				if not chunk:
					# A no-data means a close
					break
				# NOTE: With HTTP Pipelining, we may receive more than one
				# request in the same payload.
				for atom in parser.feed(chunk):
					if atom is HTTPProcessingStatus.TooLarge:
						await writer.write(SERVER_TOO_LARGE)
						keep_alive = False
					elif atom is HTTPProcessingStatus.BadFormat:
						await writer.write(SERVER_BAD_REQUEST)
						keep_alive = False
					elif isinstance(atom, HTTPRequest):
						atom.remote = remote
						req_count += 1
						keep_alive = atom.keepAlive and not atom.header(
							"Transfer-Encoding"
						)
						if not await cls.SendResponse(
							atom, service, writer, close=not keep_alive
						):
							keep_alive = False
					if not keep_alive:
						break
		except (BrokenPipeError, ConnectionResetError):
			# Client did an early close
			pass
		except TimeoutError:
			warning("Client did not read response in time", Client=remote)
		except Exception as e:
			exception(e)
		finally:
			client.close()
			info("Closed", Client=remote)

	@staticmethod
	async def SendResponse(
		request: HTTPRequest,
		service: Service,
		writer: HTTPBodyWriter,
		*,
		close: bool = False,
	) -> HTTPResponse | None:
		"""Processes the request within the service and sends a response
		using the given writer."""
		try:
			if inspect.iscoroutinefunction(service.process):
				res = await service.process(request)
			else:
				# Serving files blocks on the filesystem, other connections
				# are served meanwhile.
				res = await asyncio.to_thread(service.process, request)
		except Exception as e:
			exception(e, f"Could not process {request.method} {request.path}")
			await writer.write(SERVER_ERROR)
			return None
		res.setHeader("Date", formatdate(usegmt=True))
		if close:
			res.setHeader("Connection", "close")
		# We send the request head, and the body unless it's a HEAD
		await writer.write(res.head())
		if request.method != "HEAD":
			await writer.write(res.body)
		return res

	@staticmethod
	def Bind(options: ServerOptions = OPTIONS) -> socket.socket:
		"""Creates the listening socket, bind errors are propagated."""
		server = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
		try:
			server.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
			server.setsockopt(socket.IPPROTO_TCP, socket.TCP_NODELAY, 1)
			server.bind((options.host, options.port))
			# The argument is the backlog of connections that will be accepted
			# before they are refused.
			server.listen(options.backlog)
		except OSError:
			server.close()
			raise
		# This is what we need to use it with asyncio
		server.setblocking(False)
		return server

	@classmethod
	async def Serve(
		cls,
		service: Service,
		options: ServerOptions = OPTIONS,
		server: socket.socket | None = None,
	) -> None:
		"""Main server coroutine."""
		if server is None:
			server = cls.Bind(options)
		loop = asyncio.get_running_loop()
		tasks: set[asyncio.Task[None]] = set()
		host, port = server.getsockname()[:2]
		await service.start()
		info("Server listening", Host=host, Port=port)
		try:
			while True:
				if options.condition and not options.condition():
					break
				try:
					client, address = await asyncio.wait_for(
						loop.sock_accept(server), timeout=options.polling or 1.0
					)
				except TimeoutError:
					continue
				except OSError as e:
					if e.errno == errno.EMFILE:
						# Open connections will eventually free descriptors
						warning("Too many open files", Connections=len(tasks))
						await asyncio.sleep(0.1)
					else:
						error("Cannot accept connection", e.errno, Error=str(e))
					continue
				remote = remoteAddress(address)
				task = loop.create_task(
					cls.OnRequest(service, client, remote, loop=loop, options=options)
				)
				tasks.add(task)
				task.add_done_callback(tasks.discard)
		finally:
			server.close()
			for task in tasks:
				task.cancel()
			await asyncio.gather(*tasks, return_exceptions=True)
			await service.stop()


def run(
	service: Service,
	host: str = OPTIONS.host,
	port: int = OPTIONS.port,
	*,
	backlog: int = OPTIONS.backlog,
	readTimeout: float = OPTIONS.readTimeout,
	writeTimeout: float = OPTIONS.writeTimeout,
	maxHeaderSize: int = OPTIONS.maxHeaderSize,
	server: socket.socket | None = None,
) -> None:
	"""High level function to run the server, until the process is
	interrupted."""
	unlimit(LimitType.Files)
	options = ServerOptions(
		host=host,
		port=port,
		backlog=backlog,
		readTimeout=readTimeout,
		writeTimeout=writeTimeout,
		maxHeaderSize=maxHeaderSize,
	)
	try:
		asyncio.run(AIOSocketServer.Serve(service, options, server))
	except KeyboardInterrupt:
		event("ManualShutdown")


# EOF
