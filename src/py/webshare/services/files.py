import os
import posixpath
from pathlib import Path
from stat import S_ISDIR
from urllib.parse import quote

from ..http.content import serveContent
from ..http.model import HTTPRequest, HTTPResponse
from ..utils.files import SNIFF_SIZE, guessContentType, sniffContentType
from ..utils.htmpl import Node, H, html
from ..utils.logging import exception
from ..utils.uri import cleanPath, displayable

INDEX_FILE: str = "index.html"

FILE_CSS: str = """
:root {
    font-family: sans-serif;
    font-size: 14px;
    line-height: 1.35em;
    padding: 20px;
    background: #F0F0F0;
}
h1 {
    margin-top: 1.75em;
    margin-bottom: 1.75em;
    line-height:1.25em;
}
ul {
    padding: 0px 20px;
    margin: 1.25em 0em;
}
li {
    padding: 0px 10px;
    margin: 0.5em 0em;
}
"""


class FileService:
	"""Serves (unescaped) URL paths from a directory of the local
	filesystem: directories are served through their `index.html` or
	listed, files with a content type guessed from their name or content,
	with support for conditional and range requests."""

	def __init__(self, root: str | Path | None = None):
		self.root: Path = (
			root if isinstance(root, Path) else Path(root or ".")
		).absolute()

	def serve(self, request: HTTPRequest, path: str) -> HTTPResponse:
		"""Serves the given (unescaped) URL path."""
		if path.endswith(f"/{INDEX_FILE}"):
			# The index is only served through its directory
			return self.localRedirect(request, "./")
		local_path = self.resolvePath(path)
		if local_path is None:
			return request.notFound()
		try:
			if S_ISDIR(local_path.stat().st_mode):
				if not path.endswith("/"):
					return self.localRedirect(request, f"{posixpath.basename(path)}/")
				index_path = local_path / INDEX_FILE
				if index_path.is_file():
					return self.renderFile(request, index_path)
				else:
					return self.renderDir(request, path, local_path)
			elif path.endswith("/"):
				return self.localRedirect(
					request, f"../{posixpath.basename(path.rstrip('/'))}"
				)
			else:
				return self.renderFile(request, local_path)
		except (FileNotFoundError, NotADirectoryError):
			return request.notFound()
		except PermissionError:
			return request.notAuthorized()
		except OSError as e:
			exception(e, f"Cannot serve {local_path}")
			return request.fail()

	def resolvePath(self, path: str) -> Path | None:
		"""Maps the URL path to a local path, which is always within the
		root directory."""
		if "\x00" in path:
			return None
		local_path = self.root.joinpath(cleanPath(path).lstrip("/")).absolute()
		if not local_path.parts[: len(parts := self.root.parts)] == parts:
			return None
		return local_path

	def localRedirect(self, request: HTTPRequest, location: str) -> HTTPResponse:
		"""Redirects relatively to the current path, keeping the query."""
		url = quote(os.fsencode(location), safe="/.")
		if query := request.uri.partition("?")[2]:
			url = f"{url}?{query}"
		return request.redirect(url, permanent=True)

	def renderFile(self, request: HTTPRequest, localPath: Path) -> HTTPResponse:
		# The file is opened so that unreadable files fail here, with a 403
		with open(localPath, "rb") as f:
			stats = os.fstat(f.fileno())
			content_type = guessContentType(localPath) or sniffContentType(
				f.read(SNIFF_SIZE)
			)
		return serveContent(
			request,
			localPath,
			modified=stats.st_mtime,
			contentType=content_type,
			size=stats.st_size,
		)

	def renderDir(self, request: HTTPRequest, path: str, localPath: Path) -> HTTPResponse:
		files: list[Node] = []
		dirs: list[Node] = []
		for p in sorted(localPath.iterdir(), key=lambda _: _.name):
			# Links are relative to the directory URL, which ends with a slash.
			# Names are bytes on POSIX, the link keeps them as is.
			href: str = quote(os.fsencode(p.name))
			name: str = displayable(p.name)
			if p.is_dir():
				dirs.append(H.li(H.a(f"{name}/", href=f"{href}/")))
			else:
				files.append(H.li(H.a(name, href=href)))
		if path != "/":
			dirs.insert(0, H.li(H.a("..", href="../")))
		title: str = displayable(path)
		nodes: list[Node] = []
		if dirs:
			nodes.append(
				H.section(H.ul(dirs, style='list-style-type: "\\1F4C1";'))
			)
		if files:
			nodes.append(
				H.section(H.ul(files, style='list-style-type: "\\1F4C4";'))
			)
		return request.respondHTML(
			"".join(
				html(
					H.html(
						H.head(
							H.meta(charset="utf-8"),
							H.meta(
								name="viewport",
								content="width=device-width, initial-scale=1.0",
							),
							H.title(f"Listing for {title}"),
							H.style(FILE_CSS),
						),
						H.body(H.h1("Listing for ", title), nodes),
					),
					doctype="html",
				)
			)
		)


# EOF
