from .openapi_processor import OpenAPIProcessor

__all__ = ["OpenAPIProcessor"]
