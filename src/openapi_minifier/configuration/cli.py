import argparse

from .config import Config
from .data_formats import DocumentFormat
from .options import DescriptionMode, MinificationOptions, Preset


class CLIArgumentParser:
    @staticmethod
    def parse_arguments() -> argparse.Namespace:
        parser = argparse.ArgumentParser(
            prog="openapi-minify",
            description=(
                "Minify OpenAPI v3 specifications by removing information "
                "that is not needed to understand and call the API."
            ),
        )
        parser.add_argument("api_definition", help="Input OpenAPI file (JSON or YAML) or URL")
        parser.add_argument("-o", "--output", dest="output_path", help="Output file path")
        parser.add_argument(
            "--preset",
            choices=[preset.value for preset in Preset],
            default=None,
            help="Minification preset (default: balanced)",
        )
        parser.add_argument(
            "--keep-examples", action="store_true", default=None, help="Keep example values"
        )
        parser.add_argument(
            "--keep-descriptions",
            choices=[mode.value for mode in DescriptionMode],
            default=None,
            help="Description handling",
        )
        parser.add_argument(
            "--keep-summaries", action="store_true", default=None, help="Keep summary fields"
        )
        parser.add_argument("--keep-tags", action="store_true", default=None, help="Keep tag descriptions")
        parser.add_argument(
            "--remove-deprecated",
            action="store_true",
            default=None,
            help="Remove deprecated paths and operations",
        )
        parser.add_argument(
            "--extract-common-responses",
            action="store_true",
            default=None,
            help="Move repeated inline responses into components.responses",
        )
        parser.add_argument(
            "--extract-common-schemas",
            action="store_true",
            default=None,
            help="Move repeated inline schemas into components.schemas",
        )
        parser.add_argument("--config", dest="options_file", help="JSON or YAML file with minification options")
        parser.add_argument("--validate", action="store_true", default=None, help="Enable OpenAPI validation")
        parser.add_argument(
            "--format",
            dest="output_format",
            choices=[document_format.value for document_format in DocumentFormat],
            default=None,
            help="Output format (default: same as input)",
        )
        parser.add_argument("--debug", action="store_true", help="Enable debug logging")
        parser.add_argument("--log-file", help="Also write logs to this file")
        return parser.parse_args()

    @staticmethod
    def build_config(args: argparse.Namespace) -> Config:
        """Resolves parsed arguments into a run configuration."""
        overrides = {
            "keep_examples": args.keep_examples,
            "keep_descriptions": args.keep_descriptions,
            "keep_summaries": args.keep_summaries,
            "keep_tags": args.keep_tags,
            "remove_deprecated": args.remove_deprecated,
            "extract_common_responses": args.extract_common_responses,
            "extract_common_schemas": args.extract_common_schemas,
            "validate_spec": args.validate,
        }
        if args.options_file:
            options = MinificationOptions.from_file(args.options_file, args.preset, **overrides)
        else:
            options = MinificationOptions.for_preset(args.preset, **overrides)

        return Config(
            api_definition=args.api_definition,
            output_path=args.output_path,
            output_format=DocumentFormat(args.output_format) if args.output_format else None,
            debug=args.debug,
            log_file=args.log_file,
            options=options,
        )
