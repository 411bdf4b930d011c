from typing import Any, Dict, Optional

from .reference_resolver import ReferenceResolver, get_component_table
from ...utils.logger import Logger


class APIComponentsFilter:
    """Reduces API definition components to only those that are necessary."""

    def __init__(self, reference_resolver: Optional[ReferenceResolver] = None):
        self.reference_resolver = reference_resolver or ReferenceResolver()
        self.logger = Logger.get_logger(__name__)

    def remove_unused_schemas(self, spec: Dict[str, Any]) -> int:
        """
        Deletes every component schema that is not reachable by reference.

        Empty ``components.schemas`` and ``components`` containers are removed as well.

        Returns:
            int: Number of schemas removed
        """
        schemas = get_component_table(spec, "schemas")
        if schemas is None:
            return 0

        reachable = self.reference_resolver.find_reachable_schemas(spec)
        unused = [name for name in schemas if name not in reachable]
        for name in unused:
            del schemas[name]

        components = spec["components"]
        if not schemas:
            del components["schemas"]
        if not components:
            del spec["components"]

        if unused:
            self.logger.info(f"   Removed {len(unused)} unused schemas")
            self.logger.debug(f"   Unused schemas: {', '.join(unused)}")
        return len(unused)
