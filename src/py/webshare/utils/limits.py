from typing import NamedTuple
from enum import Enum
import resource


class LimitType(Enum):
	Files = resource.RLIMIT_NOFILE


# Each connection holds a socket and possibly an open file being sent.
REASONABLE_LIMITS: dict[LimitType, int] = {
	LimitType.Files: 10 * 10240,
}


class Limit(NamedTuple):
	type: LimitType
	soft: int
	hard: int


def limit(scope: LimitType) -> Limit:
	return Limit(scope, *resource.getrlimit(scope.value))


def unlimit(
	scope: LimitType, ratio: float = 1.0, *, maximum: int | None = 0
) -> int | bool:
	"""Raises the soft limit towards the hard limit, returning the new soft
	limit or `False` when the system refused."""
	lm = limit(scope)
	# Darwin reports really high hard limits that lead to OverflowErrors.
	maximum = REASONABLE_LIMITS.get(scope) if maximum == 0 else maximum
	if lm.hard == resource.RLIM_INFINITY:
		target = maximum or lm.soft
	else:
		target = int(lm.soft + ratio * (lm.hard - lm.soft))
		if maximum:
			target = min(maximum, target)
	if target <= lm.soft:
		return lm.soft
	try:
		resource.setrlimit(scope.value, (target, lm.hard))
		return target
	except ValueError:
		return False
	except OSError:
		return False


# EOF
