"""
Parser for ``cd``/``ls`` terminal transcripts.

The transcript grammar is line oriented::

    $ cd /            -> ChangeDirectory(Root)
    $ cd ..           -> ChangeDirectory(Parent)
    $ cd <name>       -> ChangeDirectory(Child(name))
    $ ls              -> ListDirectory(entries), followed by entry lines:
    dir <name>        -> Directory(name)
    <size> <name>     -> File(name, size)

Names start with a letter or one of ``. _ -`` and continue with letters,
digits or ``. _ -``. Sizes are ASCII digits, optionally with ``_`` after any
digit, and must fit an unsigned 64-bit integer. The last entry line of a
transcript may end at end of input instead of a line break.
"""

import logging
import re
from typing import Iterator, Optional

from nospace.entities.command import (
    ChangeDirectory,
    Child,
    Command,
    ListDirectory,
    Parent,
    Root,
    Target,
)
from nospace.entities.directory_entry import (
    MAX_FILE_SIZE,
    Directory,
    DirectoryEntry,
    File,
)
from nospace.exceptions import TranscriptParseError

NAME_PATTERN = r"[A-Za-z._-][A-Za-z0-9._-]*"
SIZE_PATTERN = r"(?:[0-9]_*)+"

_ENTRY_BODY = (
    rf"(?:(?P<size>{SIZE_PATTERN})[ \t]+(?P<file>{NAME_PATTERN})"
    rf"|dir[ \t]+(?P<dir>{NAME_PATTERN}))"
)
_LINE_ENDS = r"(?:\r?\n)+"
_ENTRY_END = r"(?:(?:\r?\n)+|\Z)"

_TARGET_RE = re.compile(rf"/|{NAME_PATTERN}")
_ENTRY_RE = re.compile(_ENTRY_BODY)
_ENTRY_LINE_RE = re.compile(_ENTRY_BODY + _ENTRY_END)
_PROMPT_RE = re.compile(r"\$[ \t]+")
_CD_RE = re.compile(rf"cd[ \t]+(?P<target>/|{NAME_PATTERN}){_LINE_ENDS}")
_LS_RE = re.compile(r"ls\r?\n")


def _line_number(text: str, pos: int) -> int:
    return text.count("\n", 0, pos) + 1


def _target_from_token(token: str) -> Target:
    if token == "/":
        return Root()
    if token == "..":
        return Parent()
    return Child(token)


def _oversized(match: re.Match) -> bool:
    size = match.group("size")
    return size is not None and int(size.replace("_", "")) > MAX_FILE_SIZE


def _entry_from_match(match: re.Match) -> DirectoryEntry:
    if match.group("dir") is not None:
        return Directory(match.group("dir"))

    if _oversized(match):
        raise TranscriptParseError(
            f"file size does not fit an unsigned 64-bit integer: {match.group('size')}"
        )
    return File(match.group("file"), int(match.group("size").replace("_", "")))


def parse_target(token: str) -> Target:
    """
    Parse the argument of a ``cd`` command.

    Args:
        token: ``/``, ``..`` or a directory name

    Returns:
        The matching directory change target

    Raises:
        TranscriptParseError: If the token is not a valid target
    """
    if not _TARGET_RE.fullmatch(token):
        raise TranscriptParseError(f"invalid cd target: '{token}'")
    return _target_from_token(token)


def parse_entry(line: str) -> DirectoryEntry:
    """
    Parse one ``ls`` output line (without its line break).

    Args:
        line: ``dir <name>`` or ``<size> <name>``

    Returns:
        The directory entry described by the line

    Raises:
        TranscriptParseError: If the line is not a valid entry
    """
    match = _ENTRY_RE.fullmatch(line)
    if not match:
        raise TranscriptParseError(f"invalid directory entry: '{line}'")
    return _entry_from_match(match)


def parse_command(text: str, pos: int = 0) -> tuple[Command, int]:
    """
    Parse the command starting at ``pos``, including any ``ls`` output lines.

    Args:
        text: Full transcript text
        pos: Offset of the ``$`` prompt

    Returns:
        The command and the offset just past it

    Raises:
        TranscriptParseError: If no command starts at ``pos``
    """
    start = pos
    prompt = _PROMPT_RE.match(text, pos)
    if not prompt:
        raise TranscriptParseError(
            f"expected command prompt: '{_excerpt(text, pos)}'", _line_number(text, start)
        )
    pos = prompt.end()

    cd = _CD_RE.match(text, pos)
    if cd:
        return ChangeDirectory(_target_from_token(cd.group("target"))), cd.end()

    ls = _LS_RE.match(text, pos)
    if not ls:
        raise TranscriptParseError(
            f"unknown command: '{_excerpt(text, pos)}'", _line_number(text, start)
        )
    pos = ls.end()

    entries: list[DirectoryEntry] = []
    while True:
        entry_line = _ENTRY_LINE_RE.match(text, pos)
        # An oversized file size ends the listing like any other bad line.
        if not entry_line or _oversized(entry_line):
            break
        entries.append(_entry_from_match(entry_line))
        pos = entry_line.end()
    return ListDirectory(tuple(entries)), pos


def _excerpt(text: str, pos: int) -> str:
    end = text.find("\n", pos)
    return text[pos:] if end == -1 else text[pos:end]


class CommandStream:
    """
    Lazy sequence of commands parsed from one transcript.

    Every iteration starts again from the beginning of the text. Iteration
    stops at the end of the text or at the first text that does not match the
    grammar; the mismatch is logged, not raised.
    """

    def __init__(self, text: str, logger: Optional[logging.Logger] = None):
        self._text = text
        self._logger = logger or logging.getLogger(__name__)

    def __iter__(self) -> Iterator[Command]:
        pos = 0
        while pos < len(self._text):
            try:
                command, pos = parse_command(self._text, pos)
            except TranscriptParseError as e:
                self._logger.error(f"Parse error: {e}")
                return
            self._logger.debug(f"Parsed {command!r}")
            yield command


class CommandParser:
    """Turns transcript text into a :class:`CommandStream`."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self._logger = logger or logging.getLogger(__name__)

    def parse(self, text: str) -> CommandStream:
        return CommandStream(text, self._logger)
