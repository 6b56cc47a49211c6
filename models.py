# models.py
"""
Data structures for the ARIA spec extraction pipeline.
Entities are frozen once built; sequences are tuples in document order.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple


@dataclass(frozen=True)
class Role:
    """An ARIA role and the attributes it declares directly."""
    ref: str
    name: str
    description: Optional[str] = None
    abstract: bool = False
    super_class_roles: Tuple[str, ...] = ()
    attributes: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "ref": self.ref,
            "name": self.name,
            "description": self.description,
            "abstract": self.abstract,
            "superClassRoles": list(self.super_class_roles),
            "attributes": list(self.attributes),
        }

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "Role":
        return cls(
            ref=d["ref"],
            name=d["name"],
            description=d.get("description"),
            abstract=d.get("abstract", False),
            super_class_roles=tuple(d.get("superClassRoles", [])),
            attributes=tuple(d.get("attributes", [])),
        )


@dataclass(frozen=True)
class ValueType:
    """A primitive kind of attribute value (token, true/false, ID reference...)."""
    ref: str
    name: str
    description: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {"ref": self.ref, "name": self.name, "description": self.description}

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "ValueType":
        return cls(ref=d["ref"], name=d["name"], description=d.get("description"))


@dataclass(frozen=True)
class AttributeValue:
    """One row of an attribute's value table."""
    value: str
    is_default: bool = False
    description: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {"value": self.value, "isDefault": self.is_default, "description": self.description}

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "AttributeValue":
        return cls(value=d["value"], is_default=d.get("isDefault", False), description=d.get("description"))


@dataclass(frozen=True)
class Attribute:
    """An ARIA state or property.

    ``values`` is None when the page has no value table for the attribute,
    an empty tuple when the table has no rows.
    """
    ref: str
    name: str
    value_type: str
    description: Optional[str] = None
    values: Optional[Tuple[AttributeValue, ...]] = None

    def to_dict(self) -> Dict[str, Any]:
        d: Dict[str, Any] = {
            "ref": self.ref,
            "name": self.name,
            "description": self.description,
            "valueType": self.value_type,
        }
        if self.values is not None:
            d["values"] = [v.to_dict() for v in self.values]
        return d

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "Attribute":
        values = d.get("values")
        return cls(
            ref=d["ref"],
            name=d["name"],
            value_type=d["valueType"],
            description=d.get("description"),
            values=None if values is None else tuple(AttributeValue.from_dict(v) for v in values),
        )


@dataclass(frozen=True)
class AriaData:
    """The three ref-keyed mappings written to data.json."""
    roles: Dict[str, Role] = field(default_factory=dict)
    value_types: Dict[str, ValueType] = field(default_factory=dict)
    attributes: Dict[str, Attribute] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "roles": {ref: r.to_dict() for ref, r in self.roles.items()},
            "valueTypes": {ref: v.to_dict() for ref, v in self.value_types.items()},
            "attributes": {ref: a.to_dict() for ref, a in self.attributes.items()},
        }

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "AriaData":
        return cls(
            roles={ref: Role.from_dict(r) for ref, r in d["roles"].items()},
            value_types={ref: ValueType.from_dict(v) for ref, v in d["valueTypes"].items()},
            attributes={ref: Attribute.from_dict(a) for ref, a in d["attributes"].items()},
        )
