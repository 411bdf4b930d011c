import json
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, FrozenSet, Iterator, List, Optional, Set, Tuple

from ....utils.logger import Logger
from ....utils.tree import is_array, is_container, is_object

EXTRACTION_THRESHOLD = 3
# Keys of these maps are names chosen by the API author and are never stripped
NAME_MAP_KEYS = frozenset(["properties", "patternProperties"])


@dataclass
class Occurrence:
    """One inline candidate and the slot that holds it."""

    parent: Dict[str, Any]
    key: str
    path: Tuple[str, ...]
    value: Dict[str, Any]


class BaseComponentExtractor(ABC):
    """Template base class for hoisting repeated inline objects into a components table."""

    component_type: str
    stripped_fields: FrozenSet[str]
    fallback_names: Tuple[str, ...]

    def __init__(self):
        self.logger = Logger.get_logger(self.__class__.__module__)

    def extract(self, spec: Dict[str, Any]) -> int:
        """
        Main template method: groups structurally identical candidates and replaces
        every group with at least ``EXTRACTION_THRESHOLD`` members by references.

        Returns:
            int: Number of occurrences rewritten as references
        """
        groups: Dict[str, List[Occurrence]] = {}
        for occurrence in self.find_candidates(spec):
            groups.setdefault(self.canonical_key(occurrence.value), []).append(occurrence)

        used_names: Set[str] = set()
        fallback_index = 0
        rewritten = 0

        for occurrences in groups.values():
            if len(occurrences) < EXTRACTION_THRESHOLD:
                continue

            table = self.get_or_create_table(spec)
            representative = occurrences[0].value

            name = self.suggest_name(representative)
            if name is None:
                name = self.fallback_name(fallback_index)
                fallback_index += 1
            name = self.make_unique(name, table, used_names)
            used_names.add(name)

            reference = f"#/components/{self.component_type}/{name}"
            for occurrence in occurrences:
                occurrence.parent[occurrence.key] = {"$ref": reference}
            table[name] = representative
            rewritten += len(occurrences)

            self.logger.debug(f"   Extracted {len(occurrences)} occurrences into {reference}")

        if rewritten:
            self.logger.info(f"   Extracted {rewritten} repeated {self.component_type} into components")
        return rewritten

    def find_candidates(self, spec: Dict[str, Any]) -> Iterator[Occurrence]:
        """Yields candidates in document order."""
        yield from self._walk(spec, ())

    def _walk(self, node: Any, path: Tuple[str, ...]) -> Iterator[Occurrence]:
        if is_object(node):
            for key, value in node.items():
                child_path = path + (str(key),)
                if is_object(value) and "$ref" not in value and self.is_candidate(str(key), value, path):
                    yield Occurrence(parent=node, key=key, path=child_path, value=value)
                if is_container(value):
                    yield from self._walk(value, child_path)
        elif is_array(node):
            for index, item in enumerate(node):
                yield from self._walk(item, path + (str(index),))

    def canonicalize(self, value: Any, is_name_map: bool = False) -> Any:
        """Copy of ``value`` without the fields that may legitimately differ between duplicates."""
        if is_object(value):
            return {
                str(key): self.canonicalize(item, is_name_map=key in NAME_MAP_KEYS)
                for key, item in value.items()
                if is_name_map or key not in self.stripped_fields
            }
        if is_array(value):
            return [self.canonicalize(item) for item in value]
        return value

    def canonical_key(self, value: Any) -> str:
        return json.dumps(self.canonicalize(value), sort_keys=True, separators=(",", ":"), ensure_ascii=False)

    def get_or_create_table(self, spec: Dict[str, Any]) -> Dict[str, Any]:
        components = spec.setdefault("components", {})
        return components.setdefault(self.component_type, {})

    def fallback_name(self, index: int) -> str:
        pool_size = len(self.fallback_names)
        return f"{self.fallback_names[index % pool_size]}{index // pool_size + 1}"

    @staticmethod
    def make_unique(name: str, table: Dict[str, Any], used_names: Set[str]) -> str:
        if name not in table and name not in used_names:
            return name
        counter = 2
        while f"{name}{counter}" in table or f"{name}{counter}" in used_names:
            counter += 1
        return f"{name}{counter}"

    @staticmethod
    def matches_keyword(text: str, keyword: str) -> bool:
        return re.search(rf"\b{re.escape(keyword)}\b", text) is not None

    @abstractmethod
    def is_candidate(self, key: str, value: Dict[str, Any], parent_path: Tuple[str, ...]) -> bool:
        """Decides whether ``value`` stored under ``key`` may be extracted."""
        pass

    @abstractmethod
    def suggest_name(self, value: Dict[str, Any]) -> Optional[str]:
        """Returns a readable component name derived from content, or None."""
        pass
