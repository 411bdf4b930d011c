import logging
import sys

from dependency_injector import providers
from tabulate import tabulate

from .adapters.processors_adapter import ProcessorsAdapter
from .configuration.cli import CLIArgumentParser
from .configuration.config import Config
from .models import MinificationStats
from .utils.exceptions import OpenAPIMinifierError
from .utils.logger import Logger


def format_bytes(size: int) -> str:
    if size == 0:
        return "0 B"
    units = ["B", "KB", "MB", "GB"]
    index = 0
    value = float(size)
    while value >= 1024 and index < len(units) - 1:
        value /= 1024
        index += 1
    return f"{float(f'{value:.1f}'):g} {units[index]}"


def log_results(logger: logging.Logger, stats: MinificationStats) -> None:
    removed = stats.removed_elements
    rows = [
        ["Examples", removed.examples],
        ["Descriptions", removed.descriptions],
        ["Summaries", removed.summaries],
        ["Tags", removed.tags],
        ["Deprecated paths", removed.deprecated_paths],
        ["Extracted responses", removed.extracted_responses],
        ["Extracted schemas", removed.extracted_schemas],
        ["Unused schemas", removed.unused_schemas],
    ]

    logger.info("\n🎉 Minification completed successfully!\n")
    logger.info("📊 Results:")
    logger.info(f"   Original size: {format_bytes(stats.original_size)}")
    logger.info(f"   Minified size: {format_bytes(stats.minified_size)}")
    logger.info(f"   Size reduction: {stats.reduction_percentage:.1f}%\n")
    logger.info(tabulate(rows, headers=["Removed elements", "Count"], tablefmt="simple"))


def main():
    args = CLIArgumentParser.parse_arguments()
    Logger.configure_logger(Config(debug=args.debug, log_file=args.log_file))
    logger = Logger.get_logger(__name__)

    try:
        config = CLIArgumentParser.build_config(args)
    except (ValueError, OSError) as e:
        logger.error(f"❌ Error: invalid options: {e}")
        sys.exit(1)

    logger.info("🔍 OpenAPI Minifier\n")

    container = ProcessorsAdapter(config=providers.Object(config))
    processor = container.openapi_processor()

    try:
        result = processor.process()
    except OpenAPIMinifierError as e:
        logger.error(f"❌ Error: {e}")
        sys.exit(1)

    log_results(logger, result.stats)


if __name__ == "__main__":
    main()
