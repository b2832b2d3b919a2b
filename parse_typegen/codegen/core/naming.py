"""
Naming utilities for Parse class generation.

Decides the visible name, base class and emission policy of every record
kind, and computes import paths between generated files.
"""

import posixpath
import re
from enum import Enum
from pathlib import PurePath
from typing import Dict, Mapping, Optional, Union

from .errors import ConfigError

# Built-in Parse classes and the SDK class each one extends.
BUILTIN_BASE_CLASSES: Mapping[str, str] = {
    "_User": "Parse.User",
    "_Role": "Parse.Role",
    "_Session": "Parse.Session",
}

BUILTIN_KINDS = frozenset(BUILTIN_BASE_CLASSES)

GENERIC_BASE_CLASS = "Parse.Object"

ATTRIBUTES_SUFFIX = "Attributes"

OverrideValue = Union[bool, str, None]


class ReferenceStyle(Enum):
    """How a field refers to the type of another record kind."""

    BASE_CLASS = "base_class"  # Parse.Object<PostAttributes>
    CLASS_NAME = "class_name"  # Post


def is_builtin(kind: str) -> bool:
    """Check whether a kind is one of the built-in Parse classes."""
    return kind in BUILTIN_KINDS


def attributes_name(name: str) -> str:
    """Name of the attributes interface for a resolved class name."""
    return f"{name}{ATTRIBUTES_SUFFIX}"


class NameResolver:
    """Resolves names and base classes for built-in and user-defined kinds."""

    def __init__(
        self,
        overrides: Optional[Mapping[str, OverrideValue]] = None,
        reference_style: ReferenceStyle = ReferenceStyle.BASE_CLASS,
    ):
        """
        Initialize resolver.

        Args:
            overrides: Built-in kind -> True (keep own name), a replacement
                name, or a falsy value (do not emit)
            reference_style: How Pointer/Relation fields name their targets

        Raises:
            ConfigError: If a key is not a built-in kind or a value has the wrong type
        """
        self.reference_style = reference_style
        self._names: Dict[str, str] = self._build_names(overrides or {})

    @staticmethod
    def _build_names(overrides: Mapping[str, OverrideValue]) -> Dict[str, str]:
        names = {}
        for kind, value in overrides.items():
            if kind not in BUILTIN_KINDS:
                raise ConfigError(
                    f"Only built-in classes can be overridden, got '{kind}'. "
                    f"Valid keys: {', '.join(sorted(BUILTIN_KINDS))}"
                )
            if value is not None and not isinstance(value, (bool, str)):
                raise ConfigError(
                    f"Override for '{kind}' must be a boolean or a class name, "
                    f"got {type(value).__name__}"
                )
            if not value:
                continue
            names[kind] = value if isinstance(value, str) else kind
        return names

    @property
    def overridden_names(self) -> Dict[str, str]:
        """Copy of the effective built-in renames."""
        return dict(self._names)

    def is_overridden(self, kind: str) -> bool:
        return kind in self._names

    def should_emit(self, kind: str) -> bool:
        """False only for a built-in kind without a truthy override."""
        return not is_builtin(kind) or self.is_overridden(kind)

    def resolve_name(self, kind: str) -> str:
        """Return the externally visible name of a kind."""
        if kind in self._names:
            return self._names[kind]
        if is_builtin(kind):
            return BUILTIN_BASE_CLASSES[kind]
        return kind

    def base_class_for(self, kind: str) -> str:
        """Return the SDK class a generated class for this kind extends."""
        return BUILTIN_BASE_CLASSES.get(kind, GENERIC_BASE_CLASS)

    def reference_type(self, kind: str) -> str:
        """
        Type expression used when a field refers to this kind.

        Unmodified built-ins have no generated attributes interface, so they
        are referenced by their bare SDK class.
        """
        if not self.should_emit(kind):
            return self.base_class_for(kind)
        name = self.resolve_name(kind)
        if self.reference_style == ReferenceStyle.CLASS_NAME:
            return name
        return f"{self.base_class_for(kind)}<{attributes_name(name)}>"


_IMPORT_SUFFIX = re.compile(r"(\.d\.ts|\.tsx?|\.jsx?|\.mjs|\.cjs)$")


def relative_import_path(from_file: Union[str, PurePath], to_file: Union[str, PurePath]) -> str:
    """
    Compute a module specifier for importing `to_file` from `from_file`.

    The result is relative to the directory of `from_file`, uses forward
    slashes, has source/declaration extensions removed and always starts
    with a dot.
    """
    from_dir = posixpath.dirname(str(from_file).replace("\\", "/")) or "."
    target = str(to_file).replace("\\", "/")
    relative = posixpath.relpath(target, from_dir)
    relative = _IMPORT_SUFFIX.sub("", relative)

    if not relative.startswith("."):
        relative = f"./{relative}"
    return relative
