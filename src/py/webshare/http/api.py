from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

from .status import HTTP_STATUS

T = TypeVar("T")

# -----------------------------------------------------------------------------
#
# API
#
# -----------------------------------------------------------------------------

# --
# == HTTP Request Response API
#
# Defines the high level API functions (orthogonal to the underlying model)
# to create responses from a request.


class ResponseFactory(ABC, Generic[T]):
	@abstractmethod
	def respond(
		self,
		content: Any = None,
		contentType: str | None = None,
		status: int = 200,
		headers: dict[str, str] | None = None,
		message: str | None = None,
	) -> T: ...

	def empty(
		self,
		status: int = 200,
		headers: dict[str, str] | None = None,
	) -> T:
		return self.respond(content=None, status=status, headers=headers)

	def error(
		self,
		status: int,
		content: str | None = None,
		contentType: str = "text/plain; charset=utf-8",
		headers: dict[str, str] | None = None,
	) -> T:
		"""Responds with a plain text error, the content defaults to the
		status message."""
		message = HTTP_STATUS.get(status, "Server Error")
		base_headers = {"X-Content-Type-Options": "nosniff"}
		return self.respond(
			content=f"{message if content is None else content}\n",
			contentType=contentType,
			status=status,
			message=message,
			headers=base_headers | headers if headers else base_headers,
		)

	def badRequest(self, content: str = "Bad Request") -> T:
		return self.error(400, content)

	def notAuthorized(self, content: str = "403 Forbidden") -> T:
		return self.error(403, content)

	def notFound(self, content: str = "404 page not found") -> T:
		return self.error(404, content)

	def notModified(self, headers: dict[str, str] | None = None) -> T:
		return self.empty(304, headers)

	def fail(self, content: str = "500 Internal Server Error") -> T:
		return self.error(500, content)

	def redirect(self, url: str, permanent: bool = False) -> T:
		# SEE: https://developer.mozilla.org/en-US/docs/Web/HTTP/Redirections
		return self.empty(
			status=301 if permanent else 302, headers={"Location": str(url)}
		)

	def respondHTML(self, html: str | bytes, status: int = 200) -> T:
		return self.respond(
			content=html, contentType="text/html; charset=utf-8", status=status
		)


# EOF
