"""Shared type aliases for icon entries and worker options."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from pathlib import Path
from typing import TypeAlias

IconName: TypeAlias = str
IconDefinition: TypeAlias = object
IconEntry: TypeAlias = tuple[IconName, IconDefinition]
IconMapping: TypeAlias = Mapping[IconName, IconDefinition]
OutputEvent: TypeAlias = object

Listener: TypeAlias = Callable[[OutputEvent], None]
ErrorListener: TypeAlias = Callable[[BaseException], None]
CompleteListener: TypeAlias = Callable[[], None]

OptionScalar: TypeAlias = str | int | float | bool | None | Path
OptionValue: TypeAlias = (
    OptionScalar
    | tuple["OptionValue", ...]
    | list["OptionValue"]
    | dict[str, "OptionValue"]
)
