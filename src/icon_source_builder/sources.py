"""Resolve icon metadata mappings from import references."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from pydantic import ValidationError

from icon_source_builder.errors import IconSourceError, PluginError
from icon_source_builder.schemas import IconSourceReference
from icon_source_builder.types import IconMapping
from icon_source_builder.workers.registry import import_module_or_path

logger = logging.getLogger(__name__)


def parse_reference(reference: str) -> IconSourceReference:
    """Split ``module:attribute`` (or ``path/to/file.py:attribute``).

    The attribute defaults to ``icons`` when omitted.

    Raises
    ------
    IconSourceError
        If either part is empty.
    """
    target, sep, attribute = reference.strip().rpartition(":")
    if not sep or "/" in attribute or "\\" in attribute:
        target, attribute = reference.strip(), "icons"
    try:
        return IconSourceReference(target=target, attribute=attribute)
    except ValidationError as exc:
        raise IconSourceError(f"Invalid icon source reference '{reference}': {exc}") from exc


def load_icon_source(reference: str) -> IconMapping:
    """Load the icon mapping named by ``reference``.

    Parameters
    ----------
    reference : str
        ``package.module:attribute`` or ``path/to/file.py:attribute``.

    Returns
    -------
    Mapping[str, object]
        The mapping object itself, not a copy, so its iteration order is kept.

    Raises
    ------
    IconSourceError
        If the module cannot be imported, the attribute is missing, or the
        attribute is not a mapping with string keys.
    """
    parsed = parse_reference(reference)
    try:
        module = import_module_or_path(parsed.target)
    except PluginError as exc:
        raise IconSourceError(str(exc)) from exc

    try:
        icons = getattr(module, parsed.attribute)
    except AttributeError as exc:
        raise IconSourceError(
            f"Module '{parsed.target}' has no attribute '{parsed.attribute}'."
        ) from exc

    if not isinstance(icons, Mapping):
        raise IconSourceError(
            f"Icon source '{reference}' must be a mapping, got {type(icons).__name__}."
        )
    bad_keys = [key for key in icons if not isinstance(key, str)]
    if bad_keys:
        raise IconSourceError(f"Icon names must be strings, got {bad_keys[0]!r}.")

    logger.debug("loaded %d icons from %s", len(icons), reference)
    return icons
