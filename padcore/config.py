"""Settings file, command-line options and standard-input reading."""

from __future__ import annotations

import argparse
import codecs
import locale
import os
import select
import sys
from dataclasses import dataclass
from pathlib import Path

APP_NAME = "padcore"
DEFAULT_VERSION = "0.8.0"

# Settings files written by releases older than this minor number use a
# different layout and are ignored.
_MIN_MINOR = 8


class UsageError(ValueError):
    """The command line could not be parsed."""


@dataclass
class Config:
    """Window size, font and view options kept between sessions."""

    width: int = 600
    height: int = 400
    fontname: str = "Monospace 12"
    wordwrap: bool = False
    linenumbers: bool = False
    autoindent: bool = False


@dataclass
class Options:
    """What the command line asked for.

    ``tab_width`` and ``jump`` are 0 when not given; ``charset`` is only
    set to a codeset the system knows.
    """

    charset: str | None = None
    tab_width: int = 0
    jump: int = 0
    filename: str | None = None
    show_version: bool = False


def config_path() -> Path:
    """Location of the settings file in the user's configuration directory."""
    base = os.environ.get("XDG_CONFIG_HOME")
    root = Path(base) if base else Path.home() / ".config"
    return root / APP_NAME / f"{APP_NAME}rc"


def _leading_int(text: str) -> int:
    """Parse an integer prefix the way ``atoi`` does; 0 when there is none."""
    text = text.lstrip()
    sign = 1
    if text[:1] in ("+", "-"):
        if text[0] == "-":
            sign = -1
        text = text[1:]
    digits = ""
    for ch in text:
        if not ch.isdigit() or not ch.isascii():
            break
        digits += ch
    return sign * int(digits) if digits else 0


def _version_supported(line: str) -> bool:
    parts = line.split(".", 2)
    if len(parts) < 3:
        return False
    return _leading_int(parts[1]) >= _MIN_MINOR and _leading_int(parts[2]) >= 0


def load_config(path: str | os.PathLike[str] | None = None) -> Config:
    """Read the settings file; defaults stand for whatever cannot be read."""
    config = Config()
    target = Path(path) if path is not None else config_path()
    try:
        with open(target, encoding="utf-8") as fp:
            lines = fp.read().splitlines()
    except OSError:
        return config
    if not lines or not _version_supported(lines[0]):
        return config

    values = lines[1:7]
    fields = ["width", "height", "fontname", "wordwrap", "linenumbers", "autoindent"]
    for name, raw in zip(fields, values):
        if name == "fontname":
            config.fontname = raw
        elif name in ("width", "height"):
            setattr(config, name, _leading_int(raw))
        else:
            setattr(config, name, bool(_leading_int(raw)))
    return config


def save_config(
    config: Config,
    path: str | os.PathLike[str] | None = None,
    version: str = DEFAULT_VERSION,
) -> Path:
    """Write the settings file, creating its directory; return where it went."""
    target = Path(path) if path is not None else config_path()
    directory = target.parent
    if not directory.is_dir():
        directory.mkdir(mode=0o700, parents=True, exist_ok=True)
    lines = [
        version,
        str(int(config.width)),
        str(int(config.height)),
        config.fontname,
        str(int(bool(config.wordwrap))),
        str(int(bool(config.linenumbers))),
        str(int(bool(config.autoindent))),
    ]
    with open(target, "w", encoding="utf-8") as fp:
        fp.write("".join(f"{line}\n" for line in lines))
    return target


class _Parser(argparse.ArgumentParser):
    def error(self, message: str) -> None:  # type: ignore[override]
        raise UsageError(message)


def _build_parser() -> argparse.ArgumentParser:
    parser = _Parser(prog=APP_NAME, usage="%(prog)s [OPTION...] [filename]", add_help=True)
    parser.add_argument("--codeset", metavar="CODESET", help="Set codeset to open file")
    parser.add_argument("--tab-width", type=int, default=0, metavar="WIDTH", help="Set tab width")
    parser.add_argument("--jump", type=int, default=0, metavar="LINENUM", help="Jump to specified line")
    parser.add_argument("--version", action="store_true", help="Show version number")
    parser.add_argument("filename", nargs="?")
    parser.add_argument("rest", nargs="*", help=argparse.SUPPRESS)
    return parser


def _codeset_known(name: str) -> bool:
    try:
        "TEST".encode(codecs.lookup(name).name)
    except (LookupError, UnicodeError):
        return False
    return True


def parse_args(argv: list[str] | None = None) -> Options:
    """Parse command-line arguments (without the program name).

    An unknown codeset is silently dropped; malformed options raise
    :class:`UsageError`.
    """
    args = _build_parser().parse_args(sys.argv[1:] if argv is None else list(argv))
    options = Options(show_version=args.version, filename=args.filename)
    if args.codeset and _codeset_known(args.codeset):
        options.charset = args.codeset
    if args.tab_width:
        options.tab_width = args.tab_width
    if args.jump:
        options.jump = args.jump
    return options


def read_stdin(timeout: float = 0.1) -> str | None:
    """Return all of standard input if data arrives within ``timeout`` seconds."""
    stream = sys.stdin
    if stream is None:
        return None
    try:
        ready, _, _ = select.select([stream], [], [], timeout)
    except (OSError, ValueError):
        return None
    if not ready:
        return None
    try:
        raw = stream.buffer.read() if hasattr(stream, "buffer") else stream.read()
    except OSError:
        return None
    if isinstance(raw, str):
        return raw
    return raw.decode(locale.getpreferredencoding(False), errors="replace")