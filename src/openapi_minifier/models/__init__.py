from .minification_result import MinificationStats, MinifyResult, RemovedElements

__all__ = [
    "MinificationStats",
    "MinifyResult",
    "RemovedElements",
]
