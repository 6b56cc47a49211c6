# schema.py
"""
Shape and reference checks for the serialized ARIA data.
Both checks are pure: they read the dict and raise jsonschema.ValidationError.
"""

from collections import deque
from typing import Any, Dict

from jsonschema import Draft202012Validator, ValidationError

from utils import format_error_path

MAYBE_STRING = {"type": ["string", "null"]}
STRING_LIST = {"type": "array", "items": {"type": "string"}}

ARIA_DATA_SCHEMA: Dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "required": ["roles", "valueTypes", "attributes"],
    "additionalProperties": False,
    "properties": {
        "roles": {"type": "object", "additionalProperties": {"$ref": "#/$defs/Role"}},
        "valueTypes": {"type": "object", "additionalProperties": {"$ref": "#/$defs/ValueType"}},
        "attributes": {"type": "object", "additionalProperties": {"$ref": "#/$defs/Attribute"}},
    },
    "$defs": {
        "Role": {
            "type": "object",
            "required": ["ref", "name", "abstract", "superClassRoles", "attributes"],
            "additionalProperties": False,
            "properties": {
                "ref": {"type": "string"},
                "name": {"type": "string"},
                "description": MAYBE_STRING,
                "abstract": {"type": "boolean"},
                "superClassRoles": STRING_LIST,
                "attributes": STRING_LIST,
            },
        },
        "ValueType": {
            "type": "object",
            "required": ["ref", "name"],
            "additionalProperties": False,
            "properties": {
                "ref": {"type": "string"},
                "name": {"type": "string"},
                "description": MAYBE_STRING,
            },
        },
        "Attribute": {
            "type": "object",
            "required": ["ref", "name", "valueType"],
            "additionalProperties": False,
            "properties": {
                "ref": {"type": "string"},
                "name": {"type": "string"},
                "description": MAYBE_STRING,
                "valueType": {"type": "string"},
                "values": {
                    "type": ["array", "null"],
                    "items": {"$ref": "#/$defs/AttributeValue"},
                },
            },
        },
        "AttributeValue": {
            "type": "object",
            "required": ["value", "isDefault", "description"],
            "additionalProperties": False,
            "properties": {
                "value": {"type": "string"},
                "isDefault": {"type": "boolean"},
                "description": MAYBE_STRING,
            },
        },
    },
}


def validate_data(data: Dict[str, Any]) -> Dict[str, Any]:
    """Raise ValidationError (first error by path) unless ``data`` matches ARIA_DATA_SCHEMA."""
    validator = Draft202012Validator(ARIA_DATA_SCHEMA)
    errors = sorted(validator.iter_errors(data), key=lambda e: [str(p) for p in e.absolute_path])
    if errors:
        err = errors[0]
        err.message = f"{format_error_path(err.absolute_path)}: {err.message}"
        raise err
    return data


def _dangling(path, ref: str, target: str) -> ValidationError:
    return ValidationError(
        f'{format_error_path(path)}: "{ref}" does not resolve to an entry in {target}',
        path=deque(path),
    )


def check_references(data: Dict[str, Any]) -> Dict[str, Any]:
    """Every superClassRoles / attributes / valueType entry must be a key of its mapping."""
    roles, attributes, value_types = data["roles"], data["attributes"], data["valueTypes"]
    for key, role in roles.items():
        for i, ref in enumerate(role["superClassRoles"]):
            if ref not in roles:
                raise _dangling(["roles", key, "superClassRoles", i], ref, "roles")
        for i, ref in enumerate(role["attributes"]):
            if ref not in attributes:
                raise _dangling(["roles", key, "attributes", i], ref, "attributes")
    for key, attr in attributes.items():
        if attr["valueType"] not in value_types:
            raise _dangling(["attributes", key, "valueType"], attr["valueType"], "valueTypes")
    return data
