import argparse
import sys
from typing import NoReturn

from . import config
from .config import (
	ServerConfig,
	WebShareError,
	validateDirectory,
	validateInterface,
	validatePort,
)
from .network import boundAddress
from .server import ServerOptions, AIOSocketServer, run
from .services.share import ShareService
from .utils.logging import info


class ArgumentParser(argparse.ArgumentParser):
	"""Argument parser that fails like any other startup error."""

	def error(self, message: str) -> NoReturn:
		die(message)


def die(message: str | BaseException) -> NoReturn:
	"""Prints the error on stderr and exits with status 1."""
	sys.stderr.write(f"ERROR: {message or 'Unknown internal error'}\n")
	sys.stderr.flush()
	sys.exit(1)


def parser() -> ArgumentParser:
	res = ArgumentParser(
		prog="web-share",
		description="Shares a directory over HTTP, on the given network interface.",
		formatter_class=argparse.ArgumentDefaultsHelpFormatter,
	)
	res.add_argument(
		"-i",
		"--interface",
		default=config.INTERFACE,
		help="(required) Network interface to run the server on.",
	)
	res.add_argument(
		"-p",
		"--port",
		type=int,
		default=config.PORT,
		help="Network port number to listen on.",
	)
	res.add_argument(
		"-d",
		"--directory",
		default=config.DIRECTORY,
		help="Root directory to serve files from.",
	)
	return res


def main(args: list[str] | None = None) -> int:
	options = parser().parse_args(args)
	try:
		# Checks and logs happen in this order, so that a bad port is
		# reported before anything else.
		port = validatePort(options.port)
		interface = validateInterface(options.interface)
		address = boundAddress(interface, port)
		info(f"Listening on {address}")
		settings = ServerConfig(interface, port, validateDirectory(options.directory))
		info(f"Serving files from {settings.root}")
		server = AIOSocketServer.Bind(
			ServerOptions(host=address.host, port=settings.port)
		)
	except (WebShareError, OSError) as e:
		die(e)
	run(ShareService(settings.root), address.host, settings.port, server=server)
	return 0


# EOF
