from typing import Any, Coroutine, Optional

from .http.model import HTTPRequest, HTTPResponse

# -----------------------------------------------------------------------------
#
# SERVICE
#
# -----------------------------------------------------------------------------


class Service:
	"""A service processes requests into responses. The server only needs
	`process`, `start` and `stop`."""

	def __init__(self, name: Optional[str] = None) -> None:
		self.name: str = name or self.__class__.__name__
		self.init()

	def init(self) -> None:
		pass

	async def start(self) -> None:
		"""Can be overridden to do asynchronous pre-start work"""
		pass

	async def stop(self) -> None:
		"""Can be overridden to do asynchronous post-stop work"""
		pass

	def process(
		self, request: HTTPRequest
	) -> HTTPResponse | Coroutine[Any, Any, HTTPResponse]:
		raise NotImplementedError

	def __repr__(self) -> str:
		return f"(Service {self.name})"


# EOF
