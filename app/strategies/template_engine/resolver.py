"""Placeholder type resolution.

Types default from a naming convention and can be overridden per name.
Override maps are kept sparse: an override equal to the convention is
dropped rather than stored.
"""

from collections.abc import Iterable, Mapping

from app.strategies.template_engine.models import PlaceholderType

TABLE_SUFFIXES = ("_table", "_csv")
LIST_SUFFIXES = ("_list", "_items")


def default_type(name: str) -> PlaceholderType:
    """Infer a placeholder type from its name suffix (case-insensitive)."""
    lowered = name.lower()
    if lowered.endswith(TABLE_SUFFIXES):
        return PlaceholderType.TABLE
    if lowered.endswith(LIST_SUFFIXES):
        return PlaceholderType.LIST
    return PlaceholderType.TEXT


def resolve_type(
    name: str, overrides: Mapping[str, PlaceholderType | str] | None = None
) -> PlaceholderType:
    """Return the override for ``name`` if present, else the convention default."""
    if overrides and name in overrides:
        try:
            return PlaceholderType(overrides[name])
        except ValueError:
            # Unknown tag in a caller-supplied map.
            return default_type(name)
    return default_type(name)


def resolve_types(
    names: Iterable[str], overrides: Mapping[str, PlaceholderType | str] | None = None
) -> dict[str, PlaceholderType]:
    """Resolve the type of every name."""
    return {name: resolve_type(name, overrides) for name in names}


def set_type_override(
    overrides: Mapping[str, PlaceholderType],
    name: str,
    placeholder_type: PlaceholderType | str,
) -> dict[str, PlaceholderType]:
    """Return a new override map with ``name`` set to ``placeholder_type``.

    The entry is removed when the requested type matches the naming
    convention.
    """
    updated = dict(overrides)
    placeholder_type = PlaceholderType(placeholder_type)
    if placeholder_type == default_type(name):
        updated.pop(name, None)
    else:
        updated[name] = placeholder_type
    return updated
