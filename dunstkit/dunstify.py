"""Command line parsing for a small client that sends desktop notifications."""

from __future__ import annotations

import argparse
import enum
import re
import sys
from dataclasses import dataclass, field

__all__ = [
    "Urgency",
    "DunstifyOptions",
    "Hint",
    "parse_urgency",
    "parse_action",
    "parse_hint",
    "parse_commandline",
]

EXPIRES_DEFAULT = -1
DEFAULT_APPNAME = "dunstify"
PLACEHOLDER_SUMMARY = "These are not the summaries you are looking for"

_UINT32_MASK = 0xFFFFFFFF
_UINT64_MAX = 2**64 - 1

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_UINT_PREFIX = re.compile(r"\s*([+-]?)(\d+)")
_FLOAT_PREFIX = re.compile(
    r"\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)
_ESCAPE = re.compile(r"\\([0-7]{1,3}|.)|\\\Z", re.DOTALL)
_SIMPLE_ESCAPES = {"b": "\b", "f": "\f", "n": "\n", "r": "\r", "t": "\t", "v": "\v"}


class Urgency(enum.IntEnum):
    """Urgency levels of a notification."""

    LOW = 0
    NORMAL = 1
    CRITICAL = 2


@dataclass(frozen=True)
class Hint:
    """A typed hint: kind is one of int, double, string or byte."""

    kind: str
    name: str
    value: int | float | str


@dataclass
class DunstifyOptions:
    """Everything given on the command line."""

    appname: str = DEFAULT_APPNAME
    summary: str | None = None
    body: str | None = None
    urgency: Urgency = Urgency.NORMAL
    hints: list[Hint] = field(default_factory=list)
    actions: list[tuple[str, str]] = field(default_factory=list)
    timeout: int = EXPIRES_DEFAULT
    icon: str | None = None
    raw_icon_path: str | None = None
    capabilities: bool = False
    serverinfo: bool = False
    printid: bool = False
    replace_id: int = 0
    close_id: int = 0
    block: bool = False


def _err(message: str) -> None:
    print(message, file=sys.stderr)


def parse_urgency(text: str) -> Urgency:
    """Map the first character of text to an urgency; unknown ones mean normal."""
    first = text[:1]
    if first in ("l", "L", "0"):
        return Urgency.LOW
    if first in ("n", "N", "1"):
        return Urgency.NORMAL
    if first in ("c", "C", "2"):
        return Urgency.CRITICAL
    _err(f"Unknown urgency: {text}")
    _err("Assuming normal urgency")
    return Urgency.NORMAL


def parse_action(text: str) -> tuple[str, str]:
    """Split "action,label" at the first comma; raise ValueError if malformed."""
    action, comma, label = text.partition(",")
    if not comma or not label:
        raise ValueError(f'Malformed action. Excpected "action,label", got "{text}"')
    return action, label


def _atoi(text: str) -> int:
    match = _INT_PREFIX.match(text)
    if not match:
        return 0
    value = int(match.group(1)) & _UINT32_MASK
    return value - 2**32 if value >= 2**31 else value


def _atof(text: str) -> float:
    match = _FLOAT_PREFIX.match(text)
    return float(match.group(1)) if match else 0.0


def _strtoull_as_gint(text: str) -> int:
    match = _UINT_PREFIX.match(text)
    if not match:
        return 0
    value = min(int(match.group(2)), _UINT64_MAX)
    if match.group(1) == "-":
        value = -value % 2**64
    value &= _UINT32_MASK
    return value - 2**32 if value >= 2**31 else value


def parse_hint(text: str) -> Hint:
    """Parse "type:name:value"; raise ValueError if malformed."""
    malformed = f'Malformed hint. Expected "type:name:value", got "{text}"'
    kind, colon, rest = text.partition(":")
    if not colon or not rest:
        raise ValueError(malformed)
    name, colon, value = rest.partition(":")
    if not colon or not value:
        raise ValueError(malformed)

    if kind == "int":
        return Hint(kind, name, _atoi(value))
    if kind == "double":
        return Hint(kind, name, _atof(value))
    if kind == "string":
        return Hint(kind, name, value)
    if kind == "byte":
        number = _strtoull_as_gint(value)
        if not 0 <= number <= 0xFF:
            raise ValueError(f'Not a byte: "{value}"')
        return Hint(kind, name, number)
    raise ValueError(
        f"Malformed hint. Expected a type of int, double, string or byte, got {kind}"
    )


def _strcompress(text: str) -> str:
    def replace(match: re.Match[str]) -> str:
        escaped = match.group(1)
        if escaped is None:
            return ""
        if escaped[0] in "01234567":
            return chr(int(escaped, 8) & 0xFF)
        return _SIMPLE_ESCAPES.get(escaped, escaped)

    return _ESCAPE.sub(replace, text)


class _Parser(argparse.ArgumentParser):
    def error(self, message: str):  # type: ignore[override]
        raise ValueError(f"Invalid commandline: {message}")


def _build_parser() -> _Parser:
    parser = _Parser(prog="dunstify", description="- Dunstify", add_help=False)
    parser.add_argument("-?", "--help", action="help", help="Show help options")
    parser.add_argument("-a", "--appname", default=DEFAULT_APPNAME, metavar="NAME",
                        help="Name of your application")
    parser.add_argument("-u", "--urgency", metavar="URG",
                        help="The urgency of this notification")
    parser.add_argument("-h", "--hints", action="append", default=[], metavar="HINT",
                        help="User specified hints")
    parser.add_argument("-A", "--action", action="append", default=[], metavar="ACTION",
                        help="Actions the user can invoke")
    parser.add_argument("-t", "--timeout", type=int, default=EXPIRES_DEFAULT,
                        metavar="TIMEOUT",
                        help="The time until the notification expires")
    parser.add_argument("-i", "--icon", metavar="ICON",
                        help="An Icon that should be displayed with the notification")
    parser.add_argument("-I", "--raw_icon", metavar="RAW_ICON",
                        help="Path to the icon to be sent as raw image data")
    parser.add_argument("-c", "--capabilities", action="store_true",
                        help="Print the server capabilities and exit")
    parser.add_argument("-s", "--serverinfo", action="store_true",
                        help="Print server information and exit")
    parser.add_argument("-p", "--printid", action="store_true",
                        help="Print id, which can be used to update/replace "
                             "this notification")
    parser.add_argument("-r", "--replace", type=int, default=0, metavar="ID",
                        help="Set id of this notification.")
    parser.add_argument("-C", "--close", type=int, default=0, metavar="ID",
                        help="Close the notification with the specified ID")
    parser.add_argument("-b", "--block", action="store_true",
                        help="Block until notification is closed and print close reason")
    parser.add_argument("args", nargs="*", help=argparse.SUPPRESS)
    return parser


def parse_commandline(argv: list[str] | None = None) -> DunstifyOptions:
    """Parse the arguments (without the program name) into options.

    Raises ValueError for an invalid command line or a missing summary.
    Malformed actions and hints are reported on stderr and skipped.
    """
    if argv is None:
        argv = sys.argv[1:]
    ns = _build_parser().parse_intermixed_args(list(argv))

    options = DunstifyOptions(
        appname=ns.appname,
        timeout=ns.timeout,
        icon=ns.icon,
        raw_icon_path=ns.raw_icon,
        capabilities=ns.capabilities,
        serverinfo=ns.serverinfo,
        printid=ns.printid,
        replace_id=ns.replace & _UINT32_MASK,
        close_id=ns.close & _UINT32_MASK,
        block=ns.block,
    )

    if options.capabilities or options.serverinfo:
        return options

    positional = ns.args
    if not positional and options.close_id < 1:
        raise ValueError("I need at least a summary")
    options.summary = positional[0] if positional else PLACEHOLDER_SUMMARY
    if len(positional) > 1:
        options.body = _strcompress(positional[1])

    if ns.urgency is not None:
        options.urgency = parse_urgency(ns.urgency)

    for text in ns.action:
        try:
            options.actions.append(parse_action(text))
        except ValueError as error:
            _err(str(error))
    for text in ns.hints:
        try:
            options.hints.append(parse_hint(text))
        except ValueError as error:
            _err(str(error))

    return options