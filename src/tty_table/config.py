"""Table configuration: global options, per-column options, and merging."""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Any, Callable, Literal, Mapping, Union

import click

Alignment = Literal["left", "center", "right"]
RowRole = Literal["header", "body", "footer"]
Truncate = Union[bool, str]

ALIGNMENTS: tuple[str, ...] = ("left", "center", "right")
DEFAULT_ALIGN: Alignment = "center"

# Width reserved per column for the vertical border separator
GUTTER = 1

# camelCase option names accepted from mappings
_ALIASES: dict[str, str] = {
    "paddingLeft": "padding_left",
    "paddingRight": "padding_right",
    "marginLeft": "margin_left",
    "marginTop": "margin_top",
    "headerAlign": "header_align",
    "footerAlign": "footer_align",
    "headerColor": "header_color",
    "footerColor": "footer_color",
    "viewportWidth": "viewport_width",
    "GUTTER": "gutter",
    "alignment": "align",
    "headerAlignment": "header_align",
    "alias": "value",
}


def _normalize_keys(data: Mapping[str, Any], allowed: set[str]) -> dict[str, Any]:
    out: dict[str, Any] = {}
    for key, value in data.items():
        name = _ALIASES.get(key, key)
        if name in allowed:
            out[name] = value
    return out


def _valid_align(value: Any) -> Alignment | None:
    return value if value in ALIGNMENTS else None


def _check_non_negative(name: str, value: int) -> None:
    if not isinstance(value, int) or value < 0:
        raise ValueError(f"{name} must be a non-negative integer, got {value!r}")


def _check_color(name: str, value: Any) -> None:
    try:
        click.style("", fg=value)
    except TypeError as e:
        raise ValueError(f"{name}: {e}") from e


@dataclass(frozen=True)
class TableConfig:
    """Global table options."""

    width: int | Literal["auto"] = "auto"
    padding_left: int = 1
    padding_right: int = 1
    gutter: int = GUTTER
    margin_left: int = 2
    margin_top: int = 0
    truncate: Truncate = False
    align: Alignment = DEFAULT_ALIGN
    header_align: Alignment = DEFAULT_ALIGN
    footer_align: Alignment = DEFAULT_ALIGN
    viewport_width: int | None = None

    def __post_init__(self) -> None:
        if self.width != "auto" and (
            isinstance(self.width, bool) or not isinstance(self.width, int) or self.width <= 0
        ):
            raise ValueError(f"width must be 'auto' or a positive integer, got {self.width!r}")
        for name in ("padding_left", "padding_right", "gutter", "margin_left", "margin_top"):
            _check_non_negative(name, getattr(self, name))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> TableConfig:
        """Build a config from an options mapping, ignoring unknown keys."""
        if not data:
            return cls()
        allowed = {f.name for f in fields(cls)}
        return cls(**_normalize_keys(data, allowed))

    def merge(self, data: Mapping[str, Any] | None) -> TableConfig:
        """Return a copy with the options in *data* applied on top."""
        if not data:
            return self
        allowed = {f.name for f in fields(self)}
        return replace(self, **_normalize_keys(data, allowed))

    def role_align(self, role: str) -> Alignment:
        if role == "header":
            value = self.header_align
        elif role == "body":
            value = self.align
        else:
            value = self.footer_align
        return _valid_align(value) or DEFAULT_ALIGN


@dataclass(frozen=True)
class ColumnOptions:
    """Options declared on a header column. ``None`` means inherit."""

    value: Any = None
    width: int | Literal["auto"] | None = None
    align: str | None = None
    header_align: str | None = None
    footer_align: str | None = None
    padding_left: int | None = None
    padding_right: int | None = None
    truncate: Truncate | None = None
    # Applied to each body value of the column before layout
    formatter: Callable[[Any], Any] | None = None
    color: str | None = None
    header_color: str | None = None
    footer_color: str | None = None

    def __post_init__(self) -> None:
        if self.width is not None and self.width != "auto" and (
            isinstance(self.width, bool) or not isinstance(self.width, int) or self.width <= 0
        ):
            raise ValueError(f"column width must be 'auto' or a positive integer, got {self.width!r}")
        for name in ("padding_left", "padding_right"):
            if getattr(self, name) is not None:
                _check_non_negative(name, getattr(self, name))
        if self.formatter is not None and not callable(self.formatter):
            raise ValueError(f"formatter must be callable, got {self.formatter!r}")
        for name in ("color", "header_color", "footer_color"):
            if getattr(self, name) is not None:
                _check_color(name, getattr(self, name))

    @classmethod
    def coerce(cls, descriptor: Any) -> ColumnOptions:
        """Accept a plain header value, a mapping of options, or ColumnOptions."""
        if isinstance(descriptor, ColumnOptions):
            return descriptor
        if isinstance(descriptor, Mapping):
            allowed = {f.name for f in fields(cls)}
            return cls(**_normalize_keys(descriptor, allowed))
        return cls(value=descriptor)

    @property
    def has_width(self) -> bool:
        return isinstance(self.width, int)

    def format_value(self, value: Any) -> Any:
        return value if self.formatter is None else self.formatter(value)


@dataclass(frozen=True)
class CellOptions:
    """Fully resolved options for the cells of one column."""

    align: Alignment
    header_align: Alignment
    footer_align: Alignment
    padding_left: int
    padding_right: int
    truncate: Truncate
    color: str | None = None
    header_color: str | None = None
    footer_color: str | None = None

    def align_for(self, role: str) -> Alignment:
        if role == "header":
            return self.header_align
        if role == "body":
            return self.align
        return self.footer_align

    def color_for(self, role: str) -> str | None:
        if role == "header":
            return self.header_color
        if role == "body":
            return self.color
        return self.footer_color

    def equalized(self) -> CellOptions:
        """Return options with both paddings set to the larger of the two."""
        pad = max(self.padding_left, self.padding_right, 0)
        return replace(self, padding_left=pad, padding_right=pad)


def resolve_cell_options(config: TableConfig, column: Any = None) -> CellOptions:
    """Merge a column's options over the global defaults.

    Unsupported alignment strings fall back to the row-role default.
    """
    col = ColumnOptions.coerce(column)
    truncate = config.truncate if col.truncate is None else col.truncate
    return CellOptions(
        align=_valid_align(col.align) or config.role_align("body"),
        header_align=_valid_align(col.header_align) or config.role_align("header"),
        footer_align=_valid_align(col.footer_align) or config.role_align("footer"),
        padding_left=config.padding_left if col.padding_left is None else col.padding_left,
        padding_right=config.padding_right if col.padding_right is None else col.padding_right,
        truncate=truncate,
        color=col.color,
        header_color=col.header_color,
        footer_color=col.footer_color,
    )
