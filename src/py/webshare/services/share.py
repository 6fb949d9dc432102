from pathlib import Path

from ..config import SERVER_NAME
from ..favicon import FAVICON, FAVICON_TIMESTAMP, FAVICON_TYPE
from ..http.content import serveContent
from ..http.model import HTTPRequest, HTTPResponse
from ..model import Service
from ..utils.logging import event, warning
from ..utils.uri import URIError, shorten, unescape
from .files import FileService

FAVICON_PATH: str = "/favicon.ico"

# SEE: http://stackoverflow.com/questions/49547/making-sure-a-web-page-is-not-cached-across-all-browsers
NO_CACHE_HEADERS: dict[str, str | int | None] = {
	"Cache-Control": "no-cache, no-store, must-revalidate",
	"Pragma": "no-cache",
	"Expires": "0",
}


class ShareService(Service):
	"""Shares a directory: every request is logged, `/favicon.ico` is
	served from the embedded icon and everything else is delegated to a
	`FileService` with caching disabled."""

	def __init__(self, root: str | Path | None = None):
		super().__init__()
		self.files: FileService = FileService(root)

	@property
	def root(self) -> Path:
		return self.files.root

	def process(self, request: HTTPRequest) -> HTTPResponse:
		res = self.dispatch(request)
		res.setHeader("Server", SERVER_NAME)
		return res

	def dispatch(self, request: HTTPRequest) -> HTTPResponse:
		try:
			uri = unescape(request.uri)
		except URIError as e:
			warning("Invalid URI", Client=request.remote, Error=str(e))
			return request.badRequest("Invalid URI")
		# Requests for the whole content are the norm, only partial ones
		# are worth logging.
		rng = request.header("Range")
		event(
			request.method,
			shorten(uri),
			Client=request.remote,
			Range=rng if rng and rng != "bytes=0-" else None,
		)
		if uri == FAVICON_PATH:
			return serveContent(
				request,
				FAVICON,
				modified=FAVICON_TIMESTAMP,
				contentType=FAVICON_TYPE,
			)
		else:
			# The path part can't fail as it is part of the URI, `+` is
			# a literal in paths.
			res = self.files.serve(request, unescape(request.path, plus=False))
			return res.setHeaders(NO_CACHE_HEADERS)


# EOF
