"""Name normalization and module-path parsing.

Everything here is pure: the functions are total on string input (except
``parse_module_path``, which rejects paths without a usable segment) and the
descriptors are frozen once built.

Pluralization is a three-rule suffix heuristic, not an English pluralizer.
Generated API route paths depend on it, so it must not be "improved"::

    pluralize("song")     -> "songs"
    pluralize("category") -> "categories"
    pluralize("status")   -> "status"
"""

from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict

from sv_modular.errors import InvalidModulePathError


# ---------------------------------------------------------------------------
# Name normalizer
# ---------------------------------------------------------------------------


def to_kebab(value: str) -> str:
    """Trim, lowercase, and collapse whitespace/underscore runs to ``-``.

    ``"User Profile"`` -> ``"user-profile"``. Mixed case is only lowercased,
    never split on case boundaries.
    """
    return re.sub(r"[\s_]+", "-", value.strip().lower())


def to_pascal(value: str) -> str:
    """Convert ``user-profile`` or ``bands/song`` to ``UserProfile`` / ``BandsSong``."""
    return "".join(part[:1].upper() + part[1:] for part in re.split(r"[-/]", value))


def to_constant(value: str) -> str:
    """Convert ``user-profile`` to ``USER_PROFILE`` for exported constants."""
    return re.sub(r"[-/\s]", "_", value.upper())


def pluralize(word: str) -> str:
    """Naive suffix pluralizer (see module docstring)."""
    if word.endswith("s"):
        return word
    if word.endswith("y"):
        return word[:-1] + "ies"
    return word + "s"


# ---------------------------------------------------------------------------
# Descriptors
# ---------------------------------------------------------------------------


class ModuleDescriptor(BaseModel):
    """A parsed module path such as ``bands/linkinpark/song``."""

    model_config = ConfigDict(frozen=True)

    name: str
    folder_path: str
    segments: tuple[str, ...]


class RouteDescriptor(BaseModel):
    """The pluralized API route derived from a module descriptor."""

    model_config = ConfigDict(frozen=True)

    plural_segment: str
    route_path: str


# ---------------------------------------------------------------------------
# Path parser / route builder
# ---------------------------------------------------------------------------


def parse_module_path(value: str) -> ModuleDescriptor:
    """Split a slash-delimited module path into a ``ModuleDescriptor``.

    Empty and whitespace-only segments are discarded, so leading, trailing
    and doubled slashes are harmless.

    Raises:
        InvalidModulePathError: If no segment remains.
    """
    segments = tuple(part for part in value.split("/") if part.strip() != "")
    if not segments:
        raise InvalidModulePathError(value)
    return ModuleDescriptor(
        name=segments[-1],
        folder_path="/".join(segments),
        segments=segments,
    )


def build_route_path(segments: tuple[str, ...] | list[str]) -> str:
    """Join the parent segments with the pluralized leaf.

    ``["bands", "linkinpark", "song"]`` -> ``"bands/linkinpark/songs"``;
    ``["song"]`` -> ``"songs"``.
    """
    parents = "/".join(segments[:-1])
    leaf_plural = pluralize(segments[-1])
    return f"{parents}/{leaf_plural}" if parents else leaf_plural


def describe_route(module: ModuleDescriptor) -> RouteDescriptor:
    """Build the ``RouteDescriptor`` for *module*."""
    return RouteDescriptor(
        plural_segment=pluralize(module.name),
        route_path=build_route_path(module.segments),
    )
