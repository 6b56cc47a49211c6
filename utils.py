# utils.py
"""
Shared utility functions for the ARIA spec extraction pipeline.
Console diagnostics, error-path formatting and role graph queries.
"""

import json
from typing import Iterable, List, Optional, Union

from models import AriaData, Role


# ==========================
# Console Diagnostics
# ==========================

DEBUG_TIP = "Tip: Set DEBUG=true to run in debug mode..."


class ConsoleLogger:
    """
    Prints pipeline diagnostics.

    Warnings and info lines are only shown in debug mode. In quiet mode the
    first suppressed line is replaced by a one-time tip about DEBUG.
    """

    def __init__(self, debug: bool = False):
        self.debug = debug
        self.tip_shown = False

    def step(self, index: int, total: int, message: str) -> None:
        print(f"[{index}/{total}] {message}")

    def info(self, message: str) -> None:
        self._gated("[INFO]", message)

    def warn(self, message: str) -> None:
        self._gated("[WARN]", message)

    def error(self, message: str) -> None:
        # never gated
        print(f"[ERROR] {message}")

    def _gated(self, prefix: str, message: str) -> None:
        if self.debug:
            print(f"{prefix} {message}")
            return
        if not self.tip_shown:
            print(DEBUG_TIP)
            self.tip_shown = True


# ==========================
# Error Formatting
# ==========================

def format_error_path(path: Iterable[Union[str, int]], root: str = "data") -> str:
    """Render a JSON path like data.roles['https://...#alert'].superClassRoles[0]."""
    out = root
    for part in path:
        if isinstance(part, int):
            out += f"[{part}]"
        elif part.isidentifier():
            out += f".{part}"
        else:
            out += f"[{part!r}]"
    return out


# ==========================
# Role Graph Utilities
# ==========================

def find_role(data: AriaData, name: str) -> Optional[Role]:
    """First role (document order) whose name is ``name``."""
    for role in data.roles.values():
        if role.name == name:
            return role
    return None


def collect_inherited_attributes(data: AriaData, role: Role) -> List[str]:
    """
    Own attribute refs followed by those of each superclass, recursively.

    Superclasses are walked in superClassRoles order and nothing is
    de-duplicated: a role reached through two paths contributes twice.
    """
    attrs = list(role.attributes)
    for ref in role.super_class_roles:
        attrs.extend(collect_inherited_attributes(data, data.roles[ref]))
    return attrs


def inherited_attribute_names(data: AriaData, role: Role) -> List[str]:
    return [data.attributes[ref].name for ref in collect_inherited_attributes(data, role)]


def load_data(path: str) -> AriaData:
    """Read a previously written data.json."""
    with open(path, "r", encoding="utf-8") as f:
        return AriaData.from_dict(json.load(f))
