import io
from pathlib import Path
from typing import Any

import pytest

from webshare import cli, config, network
from webshare.server import AIOSocketServer
from webshare.services.share import ShareService


@pytest.fixture
def bind(monkeypatch: pytest.MonkeyPatch) -> list[Any]:
	"""Records the options the listening socket would be bound with."""
	calls: list[Any] = []

	def fakeBind(options: Any) -> str:
		calls.append(options)
		return "server"

	monkeypatch.setattr(AIOSocketServer, "Bind", staticmethod(fakeBind))
	return calls


def fails(args: list[str], capsys: pytest.CaptureFixture[str]) -> str:
	"""Runs the command, which must fail, and returns its error output."""
	with pytest.raises(SystemExit) as e:
		cli.main(args)
	assert e.value.code == 1
	return capsys.readouterr().err


@pytest.mark.parametrize("port", ["0", "65536", "-80"])
def test_invalid_port(port: str, capsys: pytest.CaptureFixture[str], bind: list) -> None:
	# The port is checked before anything else
	err = fails(["-i", "nosuchiface0", "-p", port], capsys)
	assert f"ERROR: Invalid port number: {port}" in err
	assert not bind


def test_port_not_a_number(capsys: pytest.CaptureFixture[str], bind: list) -> None:
	assert "ERROR: " in fails(["-i", "lo", "-p", "http"], capsys)
	assert not bind


def test_missing_interface(capsys: pytest.CaptureFixture[str], bind: list) -> None:
	err = fails(["-i", ""], capsys)
	assert "ERROR: Network interface is not specified" in err
	assert not bind


def test_unknown_interface(capsys: pytest.CaptureFixture[str], bind: list) -> None:
	err = fails(["-i", "nosuchiface0"], capsys)
	assert "ERROR: Invalid interface name" in err
	# No listener was opened
	assert not bind


def test_directory_is_file(
	tmp_path: Path,
	capsys: pytest.CaptureFixture[str],
	monkeypatch: pytest.MonkeyPatch,
	bind: list,
) -> None:
	path = tmp_path / "file.txt"
	path.write_text("Not a directory")
	monkeypatch.setattr(network, "findIPv4", lambda name: "127.0.0.1")
	err = fails(["-i", "eth9", "-d", str(path)], capsys)
	assert f"ERROR: Not a directory: {path}" in err
	assert not bind


def test_bind_failure(
	tmp_path: Path,
	capsys: pytest.CaptureFixture[str],
	monkeypatch: pytest.MonkeyPatch,
) -> None:
	def failingBind(options: Any) -> None:
		raise OSError(98, "Address already in use")

	monkeypatch.setattr(network, "findIPv4", lambda name: "127.0.0.1")
	monkeypatch.setattr(AIOSocketServer, "Bind", staticmethod(failingBind))
	err = fails(["-i", "eth9", "-d", str(tmp_path)], capsys)
	assert "ERROR: [Errno 98] Address already in use" in err


def test_run(
	tmp_path: Path,
	monkeypatch: pytest.MonkeyPatch,
	bind: list,
	logs: io.StringIO,
) -> None:
	runs: list[tuple[Any, ...]] = []

	def run(service: ShareService, host: str, port: int, **kwargs: Any) -> None:
		runs.append((service, host, port, kwargs))

	monkeypatch.setattr(network, "findIPv4", lambda name: "192.168.1.20")
	monkeypatch.setattr(cli, "run", run)
	assert cli.main(["--interface", "eth9", "--port", "9000", "-d", str(tmp_path)]) == 0
	(options,) = bind
	assert (options.host, options.port) == ("192.168.1.20", 9000)
	((service, host, port, kwargs),) = runs
	assert isinstance(service, ShareService)
	assert service.root == tmp_path
	assert (host, port) == ("192.168.1.20", 9000)
	assert kwargs["server"] == "server"
	assert "Listening on 192.168.1.20:9000" in logs.getvalue()
	assert f"Serving files from {tmp_path}" in logs.getvalue()


def test_port_from_environment(
	capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch, bind: list
) -> None:
	# `WEBSHARE_PORT` is parsed like the option, a bad value is a usage error
	monkeypatch.setattr(config, "PORT", "http")
	err = fails(["-i", "lo"], capsys)
	assert "ERROR: argument -p/--port: invalid int value: 'http'" in err
	assert not bind
	monkeypatch.setattr(config, "PORT", "9090")
	assert cli.parser().parse_args(["-i", "eth0"]).port == 9090


def test_defaults() -> None:
	options = cli.parser().parse_args(["-i", "eth0"])
	assert options.interface == "eth0"
	assert options.port == 8080
	assert options.directory == "."


# EOF
