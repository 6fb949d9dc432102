import sys
import time
from enum import Enum
from typing import NamedTuple, Any
from .term import Term

# --
# Request and server logs, one line per entry on stderr, like:
#
#   2024/05/01 10:12:03 [webshare] GET /index.html Client=10.0.0.3:51234
#
# stdout is left alone.

ERR = sys.stderr

# Shown in brackets after the timestamp
ORIGIN: str = "webshare"

TIMESTAMP_FORMAT: str = "%Y/%m/%d %H:%M:%S"


class LogType(Enum):
	Message = 0
	Event = 20


class LogLevel(Enum):
	Info = 10
	Warning = 30
	Error = 40  # A managed error


LOG_LEVEL_COLOR = {
	LogLevel.Info: 75,
	LogLevel.Warning: 202,
	LogLevel.Error: 160,
}


class LogEntry(NamedTuple):
	time: float
	type: LogType = LogType.Message
	level: LogLevel = LogLevel.Info
	# Messages have a text, events a name and an optional value
	message: str | None = None
	name: str | None = None
	value: Any = None
	context: dict[str, Any] | None = None


def timestamp(at: float) -> str:
	return time.strftime(TIMESTAMP_FORMAT, time.localtime(at))


def formatData(value: Any) -> str:
	"""Formats a logged value, strings with spaces are quoted so that
	`Key=value` pairs stay readable. `None` values are omitted."""
	if value is None or value == () or value == [] or value == {}:
		return ""
	elif isinstance(value, dict):
		return " ".join(
			f"{Term.BOLD}{k}{Term.RESET}={formatData(v)}"
			for k, v in value.items()
			if v is not None
		)
	elif isinstance(value, list) or isinstance(value, tuple):
		return ",".join(formatData(v) for v in value)
	elif isinstance(value, str):
		return repr(value) if " " in value else value
	elif isinstance(value, bool):
		return "✓" if value else "✗"
	elif isinstance(value, float):
		return f"{value:0.2f}"
	else:
		return str(value)


def formatEntry(entry: LogEntry) -> str:
	clr: str = Term.Color(LOG_LEVEL_COLOR[entry.level])
	parts: list[str] = [
		f"{Term.DIM}{timestamp(entry.time)}{Term.RESET}",
		f"{clr}{Term.BOLD}[{ORIGIN}]{Term.RESET}",
	]
	if entry.type == LogType.Event:
		parts.append(f"{clr}{entry.name}{Term.RESET}")
		if (value := formatData(entry.value)) != "":
			parts.append(value)
	else:
		parts.append(f"{clr}{entry.message}{Term.RESET}")
	if context := formatData(entry.context):
		parts.append(context)
	return " ".join(parts)


def send(entry: LogEntry) -> LogEntry:
	ERR.write(f"{formatEntry(entry)}\n")
	ERR.flush()
	return entry


def entry(
	*,
	type: LogType = LogType.Message,
	level: LogLevel = LogLevel.Info,
	message: str | None = None,
	name: str | None = None,
	value: Any = None,
	context: dict[str, Any] | None = None,
) -> LogEntry:
	return LogEntry(
		time=time.time(),
		type=type,
		level=level,
		message=message,
		name=name,
		value=value,
		context=context,
	)


def log(level: LogLevel, message: str, context: dict[str, Any]) -> LogEntry:
	return send(entry(message=message, level=level, context=context))


def info(message: str, **context: Any) -> LogEntry:
	return log(LogLevel.Info, message, context)


def warning(message: str, **context: Any) -> LogEntry:
	return log(LogLevel.Warning, message, context)


def error(
	message: str,
	code: int | str | None = None,
	**context: Any,
) -> LogEntry:
	return log(
		LogLevel.Error,
		message,
		context if code is None else {"Code": code} | context,
	)


def event(
	event: str,
	value: Any = None,
	**context: Any,
) -> LogEntry:
	"""Logs a named event, like an HTTP method with its target."""
	return send(
		entry(
			name=event,
			value=value,
			type=LogType.Event,
			context=context,
		)
	)


def exception(
	exception: BaseException,
	message: str | None = None,
) -> BaseException:
	"""Logs the exception with its traceback, never fails."""
	try:
		stream = ERR
		label = f"[{exception.__class__.__name__}] {exception}"
		stream.write(
			f"{timestamp(time.time())} !!! EXCP {f'{message}: {label}' if message else label}\n"
		)
		tb = exception.__traceback__
		while tb:
			code = tb.tb_frame.f_code
			stream.write(
				f"... in {code.co_name:15s} at {tb.tb_lineno:4d} in {code.co_filename}\n",
			)
			tb = tb.tb_next
		stream.flush()
	except Exception:  # nosec: B110
		# Called from exception handlers, a failing stderr must not add to it
		pass
	return exception


# EOF
