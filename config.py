# config.py
import os
from dataclasses import dataclass, field
from typing import Optional

_FALSY = {"", "0", "false", "no", "off"}


def env_flag(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() not in _FALSY


@dataclass
class IngestConfig:
    # Roles
    role_selector: str = ".role"
    role_name_selector: str = ".role-name code"
    role_index_selector: str = "#index_role dt a"
    role_abstract_selector: str = ".role-abstract"
    role_parent_selector: str = ".role-parent .role-reference"
    role_attribute_selector: str = ".role-properties .state-reference, .role-properties .property-reference"
    abstract_marker: str = "True"
    # Value types
    value_type_selector: str = "#propcharacteristic_value dt"
    # States and properties
    attribute_selector: str = ".property, .state"
    attribute_name_selector: str = ".property-name code, .state-name code"
    attribute_index_selector: str = "#index_state_prop dt a"
    attribute_value_type_selector: str = ".property-value a, .state-value a"
    value_table_selector: str = ".value-descriptions"
    value_row_selector: str = "tbody tr"
    value_name_selector: str = ".value-name"
    value_description_selector: str = ".value-description"
    # e.g. "true (default)"
    default_suffix_regex: str = r" \(default\)$"


@dataclass
class LoaderConfig:
    spec_url: str = "https://www.w3.org/TR/wai-aria-1.1/"
    # seconds; None waits forever
    timeout: Optional[float] = 60.0


@dataclass
class OutputConfig:
    output_path: str = os.path.join(os.path.dirname(os.path.abspath(__file__)), "data.json")
    indent: int = 2


@dataclass
class AppConfig:
    ingest: IngestConfig = field(default_factory=IngestConfig)
    loader: LoaderConfig = field(default_factory=LoaderConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    debug: bool = field(default_factory=lambda: env_flag("DEBUG"))


# Global defaults used across modules
DEFAULTS = AppConfig()
