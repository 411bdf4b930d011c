import re
from typing import Any, Dict, List, Optional, Set, Tuple

from ...utils.tree import is_array, is_object

COMPONENT_REF_PATTERN = re.compile(r"^#/components/([^/]+)/(.+)$")
LIVE_SECTIONS = ("paths", "webhooks", "callbacks")


def get_component_table(spec: Dict[str, Any], component_type: str) -> Optional[Dict[str, Any]]:
    """Returns ``components.<component_type>`` when present as a mapping."""
    components = spec.get("components")
    if not is_object(components):
        return None
    table = components.get(component_type)
    return table if is_object(table) else None


class ReferenceResolver:
    """Finds the component schemas that the operational parts of a document depend on."""

    def collect_refs(self, node: Any, refs: Optional[Set[str]] = None) -> Set[str]:
        """Recursively collects every ``$ref`` string below ``node``."""
        if refs is None:
            refs = set()

        if is_object(node):
            for key, value in node.items():
                if key == "$ref" and isinstance(value, str):
                    refs.add(value)
                else:
                    self.collect_refs(value, refs)
        elif is_array(node):
            for item in node:
                self.collect_refs(item, refs)

        return refs

    def collect_component_refs(self, node: Any) -> Set[Tuple[str, str]]:
        """Returns ``(component_type, name)`` for every local ``#/components/...`` pointer below ``node``."""
        targets = set()
        for ref in self.collect_refs(node):
            match = COMPONENT_REF_PATTERN.match(ref)
            if match:
                targets.add((match.group(1), match.group(2)))
        return targets

    def find_reachable_schemas(self, spec: Dict[str, Any]) -> Set[str]:
        """
        Computes the transitive closure of component references.

        The walk starts from the live sections (paths, webhooks, callbacks) and
        follows pointers into every component table, so a schema used by a
        referenced ``components.responses`` entry is reachable while one used
        only by an unreferenced ``components.parameters`` entry is not.

        Args:
            spec: The OpenAPI document

        Returns:
            Set[str]: Names of ``components.schemas`` entries that are reachable
        """
        if not get_component_table(spec, "schemas"):
            return set()

        roots: List[Any] = [spec[section] for section in LIVE_SECTIONS if section in spec]
        visited: Set[Tuple[str, str]] = set()
        to_check = list(self.collect_component_refs(roots))

        while to_check:
            target = to_check.pop()
            if target in visited:
                continue

            component_type, name = target
            table = get_component_table(spec, component_type)
            if table is None or name not in table:
                continue

            visited.add(target)
            to_check.extend(self.collect_component_refs(table[name]) - visited)

        return {name for component_type, name in visited if component_type == "schemas"}
