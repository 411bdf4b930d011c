from typing import Optional

from .openapi import APIDefinitionLoader, APIDefinitionValidator, OpenAPIMinifier, parse_openapi
from ..configuration.config import Config
from ..models import MinifyResult
from ..services.file_service import FileService
from ..utils.exceptions import WriteError
from ..utils.logger import Logger


class OpenAPIProcessor:
    """Processes an API definition by orchestrating loading, validation, minification and writing."""

    def __init__(
        self,
        config: Config,
        file_service: FileService,
        minifier: OpenAPIMinifier,
        api_definition_loader: Optional[APIDefinitionLoader] = None,
        validator: Optional[APIDefinitionValidator] = None,
    ):
        """
        Initialize the OpenAPIProcessor.

        Args:
            config (Config): Settings of the run.
            file_service (FileService): Service used to write the result.
            minifier (OpenAPIMinifier): Core minification engine.
            api_definition_loader (APIDefinitionLoader): Service to load API definition from URL or file.
            validator (APIDefinitionValidator): Optional pre-flight conformance check.
        """
        self.config = config
        self.file_service = file_service
        self.minifier = minifier
        self.api_definition_loader = api_definition_loader or APIDefinitionLoader(file_service)
        self.validator = validator or APIDefinitionValidator()
        self.logger = Logger.get_logger(__name__)

    def process(self) -> MinifyResult:
        """
        Loads, optionally validates, minifies and writes the configured API definition.

        Returns:
            MinifyResult with the minified content and statistics.
        """
        options = self.config.options
        input_format = self.config.input_format
        output_format = self.config.resolve_output_format()
        output_path = self.config.resolve_output_path()

        self.logger.info(f"📁 Input: {self.config.api_definition}")
        self.logger.info(f"📁 Output: {output_path}\n")

        self.logger.info("📖 Reading input file...")
        content = self.api_definition_loader.load(self.config.api_definition)

        if options.validate_spec:
            self.logger.info("✅ Validating OpenAPI specification...")
            self.validator.validate(parse_openapi(content, input_format))
            self.logger.info("✅ OpenAPI specification is valid")

        self.logger.info("🔧 Minifying OpenAPI specification...")
        self.logger.info(f"   Preset: {options.preset.value if options.preset else 'none'}")
        self.logger.info(f"   Keep examples: {options.keep_examples}")
        self.logger.info(f"   Keep descriptions: {options.keep_descriptions.value}")
        result = self.minifier.minify(content, input_format, options, output_format)

        self.logger.info("💾 Writing minified specification...")
        try:
            self.file_service.write_file(output_path, result.minified_content)
        except OSError as e:
            raise WriteError(f"{output_path}: {e}") from e
        return result
