# aria_ingestor.py
"""
ARIA Spec Ingestor

Walks a loaded WAI-ARIA spec page and builds the roles / value types /
attributes mappings.
"""

import re
from dataclasses import replace
from typing import Callable, Dict, List, Optional, Tuple

from config import DEFAULTS, IngestConfig
from document import SpecDocument, SpecNode
from models import AriaData, Attribute, AttributeValue, Role, ValueType
from utils import ConsoleLogger


class ExtractionError(RuntimeError):
    """A mandatory field is missing from the spec page."""


def apply_role_synonyms(roles: Dict[str, Role], to_ref: Callable[[str], str]) -> Dict[str, Role]:
    """
    Spec erratum: ``none`` is a synonym of ``presentation`` but the page does
    not list it as a superclass. Returns a new mapping in which ``none``'s
    superclasses contain ``presentation`` exactly once.
    """
    none_role = roles.get(to_ref("none"))
    presentation_role = roles.get(to_ref("presentation"))
    if none_role is None or presentation_role is None:
        return dict(roles)
    target = presentation_role.ref
    parents = none_role.super_class_roles
    if target in parents:
        # keep the first listing, drop repeats
        first = parents.index(target)
        parents = parents[:first + 1] + tuple(p for p in parents[first + 1:] if p != target)
    else:
        parents = parents + (target,)
    out = dict(roles)
    out[none_role.ref] = replace(none_role, super_class_roles=parents)
    return out


class AriaSpecIngestor:
    """Extracts AriaData from a SpecDocument using the configured selectors."""

    def __init__(self, cfg: Optional[IngestConfig] = None, logger: Optional[ConsoleLogger] = None):
        self.cfg = cfg or DEFAULTS.ingest
        self.logger = logger or ConsoleLogger()
        self.default_pattern = re.compile(self.cfg.default_suffix_regex)

    # ---------- Public API ----------

    def parse(self, document: SpecDocument) -> AriaData:
        """Run every extraction pass over ``document``; raises ExtractionError on missing mandatory data."""
        roles = self.parse_roles(document)
        roles = apply_role_synonyms(roles, document.to_ref)
        value_types = self.parse_value_types(document)
        attributes = self.parse_attributes(document)
        self.logger.info(
            f"Parsed {len(roles)} roles, {len(value_types)} value types, {len(attributes)} attributes"
        )
        return AriaData(roles=roles, value_types=value_types, attributes=attributes)

    def parse_roles(self, document: SpecDocument) -> Dict[str, Role]:
        cfg = self.cfg
        index = self._index_links(document, cfg.role_index_selector)
        roles: Dict[str, Role] = {}
        for ref, node in self._discover(document, cfg.role_selector, "role").items():
            roles[ref] = Role(
                ref=ref,
                name=self._require_name(node, cfg.role_name_selector, "role", ref),
                description=self._describe(index, "role", ref),
                abstract=self._abstract(node, ref),
                super_class_roles=self._links(node, cfg.role_parent_selector, "role.superClassRoles", ref),
                attributes=self._links(node, cfg.role_attribute_selector, "role.attributes", ref),
            )
        return roles

    def parse_value_types(self, document: SpecDocument) -> Dict[str, ValueType]:
        value_types: Dict[str, ValueType] = {}
        for ref, node in self._discover(document, self.cfg.value_type_selector, "valueType").items():
            name = node.text
            if not name:
                raise ExtractionError(f'valueType.name could not be found for "{ref}"')
            desc_node = node.next_element_sibling
            if desc_node is None:
                self.logger.warn(f'valueType.description could not be found for "{ref}"')
            value_types[ref] = ValueType(
                ref=ref,
                name=name,
                description=desc_node.text if desc_node is not None else None,
            )
        return value_types

    def parse_attributes(self, document: SpecDocument) -> Dict[str, Attribute]:
        cfg = self.cfg
        index = self._index_links(document, cfg.attribute_index_selector)
        attributes: Dict[str, Attribute] = {}
        for ref, node in self._discover(document, cfg.attribute_selector, "attr").items():
            attributes[ref] = Attribute(
                ref=ref,
                name=self._require_name(node, cfg.attribute_name_selector, "attr", ref),
                description=self._describe(index, "attr", ref),
                value_type=self._value_type(node, ref),
                values=self._values(node, ref),
            )
        return attributes

    def parse_value_text(self, text: str, description: Optional[str] = None) -> AttributeValue:
        """'true (default)' -> AttributeValue('true', is_default=True)."""
        is_default = self.default_pattern.search(text) is not None
        return AttributeValue(
            value=self.default_pattern.sub("", text),
            is_default=is_default,
            description=description,
        )

    # ---------- Internal methods ----------

    def _discover(self, document: SpecDocument, selector: str, kind: str) -> Dict[str, SpecNode]:
        """Matching nodes keyed by ref, in document order."""
        found: Dict[str, SpecNode] = {}
        for node in document.select(selector):
            if not node.id:
                raise ExtractionError(f"{kind} node has no id: {node!r}")
            found[document.to_ref(node.id)] = node
        return found

    def _index_links(self, document: SpecDocument, selector: str) -> Dict[str, SpecNode]:
        # first link wins, like a linear find over the index
        links: Dict[str, SpecNode] = {}
        for link in document.select(selector):
            href = link.href
            if href and href not in links:
                links[href] = link
        return links

    def _require_name(self, node: SpecNode, selector: str, kind: str, ref: str) -> str:
        name_node = node.select_one(selector)
        if name_node is None or not name_node.text:
            raise ExtractionError(f'{kind}.name could not be found for "{ref}"')
        return name_node.text

    def _describe(self, index: Dict[str, SpecNode], kind: str, ref: str) -> Optional[str]:
        link = index.get(ref)
        term = link.parent if link is not None else None
        definition = term.next_element_sibling if term is not None else None
        if definition is None:
            self.logger.warn(f'{kind}.description could not be found for "{ref}"')
            return None
        return definition.text

    def _abstract(self, node: SpecNode, ref: str) -> bool:
        marker = node.select_one(self.cfg.role_abstract_selector)
        if marker is None:
            self.logger.warn(f'role.abstract could not be found for "{ref}"')
            return False
        return self.cfg.abstract_marker in marker.text

    def _links(self, node: SpecNode, selector: str, field_name: str, ref: str) -> Tuple[str, ...]:
        hrefs = [link.href for link in node.select(selector) if link.href]
        if not hrefs:
            self.logger.warn(f'{field_name} could not be found for "{ref}"')
        return tuple(hrefs)

    def _value_type(self, node: SpecNode, ref: str) -> str:
        link = node.select_one(self.cfg.attribute_value_type_selector)
        if link is None or not link.href:
            raise ExtractionError(f'attr.valueType could not be found for "{ref}"')
        return link.href

    def _values(self, node: SpecNode, ref: str) -> Optional[Tuple[AttributeValue, ...]]:
        table = node.select_one(self.cfg.value_table_selector)
        if table is None:
            self.logger.warn(f'attr.values could not be found for "{ref}"')
            return None
        rows: List[AttributeValue] = []
        for row in table.select(self.cfg.value_row_selector):
            rows.append(self._parse_value_row(row, ref))
        return tuple(rows)

    def _parse_value_row(self, row: SpecNode, ref: str) -> AttributeValue:
        name_node = row.select_one(self.cfg.value_name_selector)
        if name_node is None:
            raise ExtractionError(f'attr.values[].value could not be found for "{ref}"')
        desc_node = row.select_one(self.cfg.value_description_selector)
        return self.parse_value_text(name_node.text, desc_node.text if desc_node is not None else None)
