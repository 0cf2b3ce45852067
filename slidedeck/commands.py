"""Commands embedded in presentation comments."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Optional

import yaml


class CommandParseError(ValueError):
    """A comment could not be parsed as a command."""


class CommandKind(enum.Enum):
    """Every command that can be written in a comment."""

    PAUSE = "pause"
    END_SLIDE = "end_slide"
    NEW_LINE = "new_line"
    NEW_LINES = "new_lines"
    INIT_COLUMN_LAYOUT = "column_layout"
    COLUMN = "column"
    RESET_LAYOUT = "reset_layout"
    JUMP_TO_MIDDLE = "jump_to_middle"
    INCREMENTAL_LISTS = "incremental_lists"
    NO_FOOTER = "no_footer"
    SPEAKER_NOTE = "speaker_note"
    FONT_SIZE = "font_size"
    ALIGNMENT = "alignment"
    SKIP_SLIDE = "skip_slide"


class CommandAlignment(enum.Enum):
    """Alignment selected through the ``alignment`` command."""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


@dataclass(frozen=True)
class CommentCommand:
    """A parsed command and its argument, if it takes one."""

    kind: CommandKind
    value: Any = None


_ALIASES = {"newline": CommandKind.NEW_LINE, "newlines": CommandKind.NEW_LINES}

_UNIT_KINDS = frozenset(
    {
        CommandKind.PAUSE,
        CommandKind.END_SLIDE,
        CommandKind.NEW_LINE,
        CommandKind.RESET_LAYOUT,
        CommandKind.JUMP_TO_MIDDLE,
        CommandKind.NO_FOOTER,
        CommandKind.SKIP_SLIDE,
    }
)

_U8_MAX = 2**8 - 1
_U32_MAX = 2**32 - 1


def _lookup_kind(name: Any) -> CommandKind:
    if isinstance(name, str):
        if name in _ALIASES:
            return _ALIASES[name]
        try:
            return CommandKind(name)
        except ValueError:
            pass
    expected = ", ".join(f"`{kind.value}`" for kind in CommandKind)
    raise CommandParseError(f"unknown variant `{name}`, expected one of {expected}")


def _unsigned(value: Any, maximum: Optional[int]) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise CommandParseError(f"invalid type: {value!r}, expected an unsigned integer")
    if value < 0 or (maximum is not None and value > maximum):
        raise CommandParseError(f"invalid value: integer `{value}` is out of range")
    return value


def _convert_value(kind: CommandKind, value: Any) -> Any:
    if kind is CommandKind.NEW_LINES:
        return _unsigned(value, _U32_MAX)
    if kind is CommandKind.INIT_COLUMN_LAYOUT:
        if not isinstance(value, list):
            raise CommandParseError(f"invalid type: {value!r}, expected a sequence")
        return tuple(_unsigned(column, _U8_MAX) for column in value)
    if kind is CommandKind.COLUMN:
        return _unsigned(value, None)
    if kind is CommandKind.FONT_SIZE:
        return _unsigned(value, _U8_MAX)
    if kind is CommandKind.INCREMENTAL_LISTS:
        if not isinstance(value, bool):
            raise CommandParseError(f"invalid type: {value!r}, expected a boolean")
        return value
    if kind is CommandKind.SPEAKER_NOTE:
        if not isinstance(value, str):
            raise CommandParseError(f"invalid type: {value!r}, expected a string")
        return value
    if kind is CommandKind.ALIGNMENT:
        try:
            return CommandAlignment(value)
        except ValueError:
            raise CommandParseError(
                f"unknown variant `{value}`, expected one of `left`, `center`, `right`"
            ) from None
    raise CommandParseError(f"invalid type: map, expected unit variant `{kind.value}`")


def parse_comment_command(text: str) -> CommentCommand:
    """Parse a command such as ``pause`` or ``column_layout: [1, 2]``."""
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as error:
        raise CommandParseError(str(error).split(" at line")[0].strip()) from None

    if isinstance(data, dict):
        if len(data) != 1:
            raise CommandParseError("invalid length, expected map containing 1 entry")
        (name, value), = data.items()
        kind = _lookup_kind(name)
        if kind in _UNIT_KINDS:
            raise CommandParseError(f"invalid type: map, expected unit variant `{kind.value}`")
        return CommentCommand(kind, _convert_value(kind, value))

    kind = _lookup_kind(data)
    if kind not in _UNIT_KINDS:
        raise CommandParseError(f"invalid type: unit variant, expected `{kind.value}` with a value")
    return CommentCommand(kind)


def should_ignore_comment(comment: str, command_prefix: str) -> bool:
    """Whether a comment that is not a valid command is an ordinary user comment."""
    if "\n" in comment or not comment.startswith(command_prefix):
        return True
    stripped = comment.strip()
    if stripped.startswith("vim:"):
        return True
    return stripped in ("{{{", "}}}")


def parse_comment(comment: str, command_prefix: str) -> Optional[CommentCommand]:
    """Parse a comment as a command; return None for comments that are not commands."""
    comment = comment.strip()
    command_text = comment
    while command_prefix and command_text.startswith(command_prefix):
        command_text = command_text[len(command_prefix):]
    try:
        return parse_comment_command(command_text)
    except CommandParseError:
        if should_ignore_comment(comment, command_prefix):
            return None
        raise