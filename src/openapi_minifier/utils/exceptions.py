class OpenAPIMinifierError(Exception):
    """Base error for every failure surfaced by the minifier."""


class LoadError(OpenAPIMinifierError):
    def __init__(self, cause: str):
        super().__init__(f"Error loading API definition: {cause}")


class ParseError(OpenAPIMinifierError):
    def __init__(self, cause: str):
        super().__init__(f"Failed to parse OpenAPI specification: {cause}")


class SerializationError(OpenAPIMinifierError):
    def __init__(self, cause: str):
        super().__init__(f"Failed to serialize OpenAPI specification: {cause}")


class ValidationError(OpenAPIMinifierError):
    def __init__(self, cause: str):
        super().__init__(f"OpenAPI validation failed: {cause}")


class WriteError(OpenAPIMinifierError):
    def __init__(self, cause: str):
        super().__init__(f"Error writing minified specification: {cause}")
