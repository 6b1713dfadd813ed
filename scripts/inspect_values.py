import argparse
import logging
import sys
from dataclasses import dataclass, field
from typing import Dict, List

from rich.console import Console

from parsed_config.config import ValueConfig
from parsed_config.registry import ConfigRegistry

@dataclass
class InspectorConfig:
    """Inspector settings"""
    properties: Dict[str, str]
    list_separator: str = ","
    map_entry_separator: str = ";"
    verbose: bool = False
    report_formats: List[str] = field(default_factory=lambda: ["rich"])

def parse_property(text: str) -> tuple[str, str]:
    """Split a key=value argument"""
    if '=' not in text:
        raise argparse.ArgumentTypeError(f"Expected key=value, got: {text}")
    key, value = text.split('=', 1)
    return key.strip(), value

def parse_arguments(argv: List[str]) -> InspectorConfig:
    """Parse command line arguments"""
    parser = argparse.ArgumentParser(
        description="Show every representation a config value is parsed into"
    )
    parser.add_argument(
        "properties",
        nargs="+",
        type=parse_property,
        help="One or more key=value pairs"
    )
    parser.add_argument(
        "--list-separator",
        default=",",
        help="Separator between list items"
    )
    parser.add_argument(
        "--entry-separator",
        default=";",
        help="Separator between map entries"
    )
    parser.add_argument(
        "--format",
        nargs="+",
        choices=["rich", "json"],
        default=["rich"],
        help="Report output formats (default: rich)"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose output"
    )

    args = parser.parse_args(argv)
    return InspectorConfig(
        properties=dict(args.properties),
        list_separator=args.list_separator,
        map_entry_separator=args.entry_separator,
        verbose=args.verbose,
        report_formats=args.format
    )

def setup_logging(verbose: bool) -> tuple[logging.Logger, Console]:
    """Setup logging and console output"""
    console = Console()

    log_level = logging.DEBUG if verbose else logging.INFO
    logger = logging.getLogger("parsed_config")
    logger.setLevel(log_level)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(
        logging.Formatter('%(levelname)s: %(message)s')
    )
    logger.addHandler(console_handler)

    return logger, console

def main(argv: List[str]) -> int:
    """Main entry point"""
    config = parse_arguments(argv)
    logger, console = setup_logging(config.verbose)

    registry = ConfigRegistry.from_mapping(
        config.properties,
        ValueConfig(
            list_separator=config.list_separator,
            map_entry_separator=config.map_entry_separator
        )
    )

    from modules.report import build_report, print_report, print_json_report

    report = build_report(registry)
    if "rich" in config.report_formats:
        print_report(report, console)
    if "json" in config.report_formats:
        print_json_report(report, console)

    logger.debug(f"Inspected {len(report)} properties")
    return 0

if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
