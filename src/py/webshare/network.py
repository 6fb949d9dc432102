import errno
import fcntl
import ipaddress
import socket
import struct
from pathlib import Path
from typing import NamedTuple

from .config import WebShareError

# --
# Network interfaces are looked up in the host interface table through
# `ioctl` calls (Linux), the same way `ifconfig` does.

SIOCGIFFLAGS: int = 0x8913
SIOCGIFADDR: int = 0x8915
IFF_UP: int = 0x1
IFNAMSIZ: int = 16
# `struct ifreq` is the name followed by a union, we give it enough room.
IFREQ_SIZE: int = 256
# Offset of `sin_addr` in the `sockaddr_in` stored in the union
IFREQ_ADDR: int = IFNAMSIZ + 4

PROC_IF_INET6: Path = Path("/proc/net/if_inet6")


class InterfaceError(WebShareError):
	pass


class NetworkInterface(NamedTuple):
	"""An entry of the host network interface table."""

	name: str
	index: int
	flags: int

	@property
	def isUp(self) -> bool:
		return bool(self.flags & IFF_UP)


def ifreq(name: str) -> bytes:
	return struct.pack(f"{IFREQ_SIZE}s", name.encode("utf8")[: IFNAMSIZ - 1])


def interface(name: str) -> NetworkInterface:
	"""Returns the interface with the given name, failing with an
	`InterfaceError` when there is none."""
	try:
		index = socket.if_nametoindex(name)
	except OSError as e:
		raise InterfaceError("Invalid interface name", e) from e
	with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
		try:
			res = fcntl.ioctl(sock.fileno(), SIOCGIFFLAGS, ifreq(name))
		except OSError as e:
			raise InterfaceError("Invalid interface name", e) from e
	(flags,) = struct.unpack("H", res[IFNAMSIZ : IFNAMSIZ + 2])
	return NetworkInterface(name, index, flags)


def interfaceAddresses(name: str) -> list[str]:
	"""Lists the addresses configured on the given interface, IPv4 first,
	in the order reported by the OS."""
	addresses: list[str] = []
	with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
		try:
			res = fcntl.ioctl(sock.fileno(), SIOCGIFADDR, ifreq(name))
			addresses.append(socket.inet_ntoa(res[IFREQ_ADDR : IFREQ_ADDR + 4]))
		except OSError as e:
			# An interface without IPv4 address gives EADDRNOTAVAIL
			if e.errno != errno.EADDRNOTAVAIL:
				raise
	if PROC_IF_INET6.exists():
		# Lines are like `fe800000000000000000000000000001 02 40 20 80 eth0`
		for line in PROC_IF_INET6.read_text().splitlines():
			fields = line.split()
			if len(fields) == 6 and fields[5] == name:
				addresses.append(str(ipaddress.IPv6Address(bytes.fromhex(fields[0]))))
	return addresses


def isIPv4(address: str) -> bool:
	try:
		return ipaddress.ip_address(address).version == 4
	except ValueError:
		return False


def findIPv4(name: str) -> str:
	"""Returns the first IPv4 address of the interface with the given name,
	the interface must be up."""
	itf = interface(name)
	if not itf.isUp:
		raise InterfaceError("Interface is DOWN")
	try:
		addresses = interfaceAddresses(name)
	except OSError as e:
		raise InterfaceError("Cannot get interface address list", e) from e
	for address in addresses:
		if isIPv4(address):
			return address
	raise InterfaceError(f"Cannot find IPv4 address of {name}")


class BoundAddress(NamedTuple):
	"""The address the server listens on, shown as `ip:port`."""

	host: str
	port: int

	def __str__(self) -> str:
		return f"{self.host}:{self.port}"


def boundAddress(interface: str, port: int) -> BoundAddress:
	"""Returns the address to listen on: the first IPv4 address of the
	interface, with the given port."""
	return BoundAddress(findIPv4(interface), port)


# EOF
