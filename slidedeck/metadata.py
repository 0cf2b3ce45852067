"""Front matter: the metadata block at the top of a presentation."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Tuple

import yaml

from slidedeck.options import OptionsConfig

_STRING_FIELDS = ("title", "sub_title", "event", "location", "date", "author")
_KNOWN_FIELDS = frozenset(_STRING_FIELDS + ("authors", "theme", "options"))


class MetadataError(ValueError):
    """The front matter of a presentation is invalid."""

    def __init__(self, message: str) -> None:
        super().__init__(f"invalid presentation metadata: {message}")
        self.message = message


class _FrontMatterLoader(yaml.SafeLoader):
    """A YAML loader that keeps dates and words such as ``yes`` as text."""


_FrontMatterLoader.yaml_implicit_resolvers = {
    first: [
        (tag, regexp)
        for tag, regexp in resolvers
        if tag not in ("tag:yaml.org,2002:timestamp", "tag:yaml.org,2002:bool")
    ]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}
_FrontMatterLoader.add_implicit_resolver(
    "tag:yaml.org,2002:bool",
    re.compile(r"^(?:true|True|TRUE|false|False|FALSE)$"),
    list("tTfF"),
)


def _text(key: str, value: Any) -> Optional[str]:
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    raise MetadataError(f"'{key}' must be a string, got {value!r}")


@dataclass(frozen=True)
class ThemeMetadata:
    """The theme a presentation asks for, and overrides on top of it."""

    name: Optional[str] = None
    path: Optional[str] = None
    overrides: Optional[Mapping[str, Any]] = None

    @classmethod
    def _from_value(cls, value: Any) -> "ThemeMetadata":
        if value is None:
            return cls()
        if not isinstance(value, Mapping):
            raise MetadataError(f"'theme' must be a mapping, got {value!r}")
        overrides = value.get("override")
        if overrides is not None and not isinstance(overrides, Mapping):
            raise MetadataError(f"'theme.override' must be a mapping, got {overrides!r}")
        theme = cls(
            name=_text("theme.name", value.get("name")),
            path=_text("theme.path", value.get("path")),
            overrides=dict(overrides) if overrides is not None else None,
        )
        if theme.name is not None and theme.path is not None:
            raise MetadataError("cannot have both theme path and theme name")
        if theme.overrides is not None and theme.overrides.get("extends") is not None:
            raise MetadataError("theme overrides can't use 'extends'")
        return theme


@dataclass(frozen=True)
class PresentationMetadata:
    """Everything a presentation's front matter can set."""

    title: Optional[str] = None
    sub_title: Optional[str] = None
    event: Optional[str] = None
    location: Optional[str] = None
    date: Optional[str] = None
    author: Optional[str] = None
    authors: Tuple[str, ...] = ()
    theme: ThemeMetadata = field(default_factory=ThemeMetadata)
    options: Optional[OptionsConfig] = None

    def has_frontmatter(self) -> bool:
        """Whether any field that makes up an intro slide is set."""
        return (
            any(getattr(self, name) is not None for name in _STRING_FIELDS)
            or bool(self.authors)
        )


def _authors(value: Any) -> Tuple[str, ...]:
    if value is None:
        return ()
    if not isinstance(value, list):
        raise MetadataError(f"'authors' must be a list, got {value!r}")
    return tuple(_text("authors", author) or "" for author in value)


def parse_front_matter(contents: str, strict: bool = True) -> PresentationMetadata:
    """Parse front matter YAML; in strict mode unknown fields are errors."""
    try:
        data = yaml.load(contents, Loader=_FrontMatterLoader)
    except yaml.YAMLError as error:
        raise MetadataError(str(error)) from None
    if data is None:
        data = {}
    if not isinstance(data, Mapping):
        raise MetadataError(f"expected a mapping, got {data!r}")

    if strict:
        unknown = sorted(str(key) for key in data if key not in _KNOWN_FIELDS)
        if unknown:
            raise MetadataError(f"unknown field(s): {', '.join(unknown)}")

    options = None
    if data.get("options") is not None:
        try:
            options = OptionsConfig.from_mapping(data["options"])
        except ValueError as error:
            raise MetadataError(str(error)) from None

    metadata = PresentationMetadata(
        **{name: _text(name, data.get(name)) for name in _STRING_FIELDS},
        authors=_authors(data.get("authors")),
        theme=ThemeMetadata._from_value(data.get("theme")),
        options=options,
    )
    if metadata.author is not None and metadata.authors:
        raise MetadataError("cannot have both 'author' and 'authors'")
    return metadata