from typing import Any, Dict

from ...utils.logger import Logger
from ...utils.tree import is_object

HTTP_METHODS = ("get", "put", "post", "delete", "options", "head", "patch", "trace")


class DeprecatedPathsFilter:
    """Removes deprecated path items and operations."""

    def __init__(self):
        self.logger = Logger.get_logger(__name__)

    def remove_deprecated(self, spec: Dict[str, Any]) -> int:
        """
        Removes deprecated paths and operations from the document.

        A path is removed when the path item itself is deprecated or when every
        operation it holds is deprecated. Otherwise only the deprecated
        operations are removed.

        Returns:
            int: Number of whole paths removed
        """
        paths = spec.get("paths")
        if not is_object(paths):
            return 0

        removed_paths = 0
        removed_operations = 0

        for path in list(paths.keys()):
            path_item = paths[path]
            if not is_object(path_item):
                continue

            if path_item.get("deprecated") is True:
                del paths[path]
                removed_paths += 1
                continue

            operations = [method for method in HTTP_METHODS if is_object(path_item.get(method))]
            if not operations:
                continue

            deprecated = [method for method in operations if path_item[method].get("deprecated") is True]
            if len(deprecated) == len(operations):
                del paths[path]
                removed_paths += 1
                continue

            for method in deprecated:
                del path_item[method]
            removed_operations += len(deprecated)

        if removed_paths or removed_operations:
            self.logger.info(
                f"   Removed {removed_paths} deprecated paths and {removed_operations} deprecated operations"
            )
        return removed_paths
