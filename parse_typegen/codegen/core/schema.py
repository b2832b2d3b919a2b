"""
Core schema representation for code generation.

Converts Parse REST schema output into a normalized internal format
that generators can work with consistently.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Any, Iterable
from enum import Enum


class FieldKind(Enum):
    """Field types recognized in a Parse class schema."""

    NUMBER = "Number"
    STRING = "String"
    BOOLEAN = "Boolean"
    DATE = "Date"
    POINTER = "Pointer"
    RELATION = "Relation"
    ARRAY = "Array"
    OBJECT = "Object"
    FILE = "File"
    GEOPOINT = "GeoPoint"
    POLYGON = "Polygon"
    UNKNOWN = "Unknown"

    @classmethod
    def from_raw(cls, raw_type: Optional[str]) -> "FieldKind":
        """Map a raw schema type string to a FieldKind (Unknown if unrecognized)."""
        for kind in cls:
            if kind.value == raw_type and kind is not cls.UNKNOWN:
                return kind
        return cls.UNKNOWN


# Present on every Parse class; never translated.
IMPLICIT_FIELDS = frozenset({"ACL", "createdAt", "updatedAt"})


@dataclass(frozen=True)
class FieldDescriptor:
    """Represents a single field of a schema entry."""

    name: str
    kind: FieldKind
    required: bool = False
    target_kind: Optional[str] = None  # Pointer/Relation only
    default: Any = None  # literal default, only used when required
    raw_type: Optional[str] = None  # raw type string, for diagnostics

    @property
    def optional(self) -> bool:
        return not self.required

    @property
    def has_default(self) -> bool:
        return self.default is not None


@dataclass(frozen=True)
class SchemaEntry:
    """Represents one record kind (a Parse class) and its fields in order."""

    kind: str
    fields: List[FieldDescriptor] = field(default_factory=list)

    def translatable_fields(self) -> List[FieldDescriptor]:
        """Fields in declaration order, without the implicit ones."""
        return [f for f in self.fields if f.name not in IMPLICIT_FIELDS]


def convert_field(name: str, details: Dict[str, Any]) -> FieldDescriptor:
    """
    Convert one raw field definition to a FieldDescriptor.

    Args:
        name: Field name
        details: Raw definition, e.g. {"type": "Pointer", "targetClass": "_User"}

    Returns:
        FieldDescriptor with the kind resolved from the raw type string
    """
    if not isinstance(details, dict):
        raise ValueError(f"Field '{name}' must be an object, got {type(details).__name__}")

    raw_type = details.get("type")
    return FieldDescriptor(
        name=name,
        kind=FieldKind.from_raw(raw_type),
        required=bool(details.get("required", False)),
        target_kind=details.get("targetClass"),
        default=details.get("defaultValue"),
        raw_type=raw_type,
    )


def convert_schema_entry(raw: Dict[str, Any]) -> SchemaEntry:
    """
    Convert a Parse REST schema object to a SchemaEntry.

    Args:
        raw: {"className": ..., "fields": {...}}; other keys such as
            classLevelPermissions and indexes are ignored.

    Returns:
        SchemaEntry preserving field insertion order
    """
    if not isinstance(raw, dict):
        raise ValueError(f"Schema entry must be an object, got {type(raw).__name__}")

    class_name = raw.get("className")
    if not class_name or not isinstance(class_name, str):
        raise ValueError("Schema entry is missing 'className'")

    fields = raw.get("fields")
    if fields is None:
        fields = {}
    if not isinstance(fields, dict):
        raise ValueError(f"Schema entry '{class_name}' has invalid 'fields'")

    return SchemaEntry(
        kind=class_name,
        fields=[convert_field(name, details) for name, details in fields.items()],
    )


def convert_schemas(raw_schemas: Iterable[Any]) -> List[SchemaEntry]:
    """Convert raw schema objects, passing through values that are already SchemaEntry."""
    entries = []
    for raw in raw_schemas:
        if isinstance(raw, SchemaEntry):
            entries.append(raw)
        else:
            entries.append(convert_schema_entry(raw))
    return entries


class ConstructorShape(Enum):
    """Constructor variants of generated classes."""

    ACCOUNT = "account"  # _User: merged attributes, no class name argument
    ROLE = "role"  # _Role: class name + ACL
    SESSION = "session"  # _Session: static defaults only
    GENERIC = "generic"  # class name + merged attributes

    @classmethod
    def for_kind(cls, kind: str) -> "ConstructorShape":
        return _CONSTRUCTOR_SHAPES.get(kind, cls.GENERIC)


_CONSTRUCTOR_SHAPES = {
    "_User": ConstructorShape.ACCOUNT,
    "_Role": ConstructorShape.ROLE,
    "_Session": ConstructorShape.SESSION,
}


@dataclass(frozen=True)
class AttributeSpec:
    """One property of a generated attributes interface."""

    name: str
    type_expr: str
    optional: bool = False

    def render(self) -> str:
        marker = "?" if self.optional else ""
        return f"{self.name}{marker}: {self.type_expr};"


@dataclass(frozen=True)
class DefaultValueSpec:
    """One entry of a generated DEFAULT_VALUES table."""

    name: str
    literal: str

    def render(self) -> str:
        return f"{self.name}: {self.literal}"


@dataclass(frozen=True)
class ConstructorSpec:
    """Constructor of a generated class."""

    shape: ConstructorShape
    class_name: str
    attributes_name: str


@dataclass(frozen=True)
class ClassDescriptor:
    """Translator output for one emittable record kind."""

    kind: str
    name: str
    base_class: str
    attributes_name: str
    attributes: tuple = ()
    default_values: tuple = ()
    constructor: Optional[ConstructorSpec] = None

    @property
    def attribute_lines(self) -> List[str]:
        return [attribute.render() for attribute in self.attributes]

    @property
    def default_value_entries(self) -> List[str]:
        return [default.render() for default in self.default_values]

    @property
    def heritage(self) -> str:
        """Base class parameterized by the attributes interface."""
        return f"{self.base_class}<{self.attributes_name}>"
