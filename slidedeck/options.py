"""Options that control how a presentation is built."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any, Mapping, Optional, Tuple


def _optional_bool(key: str, value: Any) -> Optional[bool]:
    if value is None or isinstance(value, bool):
        return value
    raise ValueError(f"option '{key}' must be a boolean, got {value!r}")


def _optional_str(key: str, value: Any) -> Optional[str]:
    if value is None or isinstance(value, str):
        return value
    raise ValueError(f"option '{key}' must be a string, got {value!r}")


def _languages(key: str, value: Any) -> Tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, (str, bytes)) or not isinstance(value, (list, tuple)):
        raise ValueError(f"option '{key}' must be a list of languages, got {value!r}")
    for language in value:
        if not isinstance(language, str):
            raise ValueError(f"option '{key}' holds a non-string language: {language!r}")
    return tuple(value)


@dataclass(frozen=True)
class OptionsConfig:
    """Options set in a presentation's front matter; unset ones are None."""

    implicit_slide_ends: Optional[bool] = None
    incremental_lists: Optional[bool] = None
    end_slide_shorthand: Optional[bool] = None
    strict_front_matter_parsing: Optional[bool] = None
    command_prefix: Optional[str] = None
    image_attributes_prefix: Optional[str] = None
    auto_render_languages: Tuple[str, ...] = ()

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[str, Any]]) -> "OptionsConfig":
        """Build options from a parsed mapping, rejecting unknown keys and bad types."""
        if data is None:
            return cls()
        if not isinstance(data, Mapping):
            raise ValueError(f"options must be a mapping, got {data!r}")
        known = {option.name for option in fields(cls)}
        unknown = sorted(str(key) for key in data if key not in known)
        if unknown:
            raise ValueError(f"unknown option(s): {', '.join(unknown)}")

        values = {}
        for key, value in data.items():
            if key in ("command_prefix", "image_attributes_prefix"):
                values[key] = _optional_str(key, value)
            elif key == "auto_render_languages":
                values[key] = _languages(key, value)
            else:
                values[key] = _optional_bool(key, value)
        return cls(**values)


@dataclass
class BuilderOptions:
    """Everything that changes how markdown elements turn into slides."""

    allow_mutations: bool = True
    implicit_slide_ends: bool = False
    command_prefix: str = ""
    image_attribute_prefix: str = "image:"
    incremental_lists: bool = False
    force_default_theme: bool = False
    end_slide_shorthand: bool = False
    print_modal_background: bool = False
    strict_front_matter_parsing: bool = True
    enable_snippet_execution: bool = False
    enable_snippet_execution_replace: bool = False
    render_speaker_notes_only: bool = False
    auto_render_languages: Tuple[str, ...] = field(default_factory=tuple)
    font_size_supported: bool = False
    pause_before_incremental_lists: bool = True
    pause_after_incremental_lists: bool = True

    def merge(self, options: OptionsConfig) -> None:
        """Override these options with the ones set in ``options``."""
        if options.implicit_slide_ends is not None:
            self.implicit_slide_ends = options.implicit_slide_ends
        if options.incremental_lists is not None:
            self.incremental_lists = options.incremental_lists
        if options.end_slide_shorthand is not None:
            self.end_slide_shorthand = options.end_slide_shorthand
        if options.strict_front_matter_parsing is not None:
            self.strict_front_matter_parsing = options.strict_front_matter_parsing
        if options.command_prefix is not None:
            self.command_prefix = options.command_prefix
        if options.image_attributes_prefix is not None:
            self.image_attribute_prefix = options.image_attributes_prefix
        if options.auto_render_languages:
            self.auto_render_languages = tuple(options.auto_render_languages)