"""
Bahía lanes CLI - Main entry point.

Loads a YAML inventory into a LaneRegistry and prints registry views.
"""

import argparse
import json
import logging
import sys
from typing import List, Optional, Tuple

from bahia_registry import (
    LaneRegistry,
    RegistryConfig,
    RegistryError,
    InvalidSegmentError,
    SegmentNotFoundError,
)
from bahia_registry.logging import LogEvent, StructuredLogger, create_logger


def parse_status_assignment(raw: str) -> Tuple[str, str]:
    """
    Parse a NAME=STATUS assignment (split on the first '=').

    Raises:
        argparse.ArgumentTypeError: If there is no '=' or NAME is empty
    """
    name, sep, status = raw.partition("=")
    if not sep or not name.strip():
        raise argparse.ArgumentTypeError(
            f"Expected NAME=STATUS, got '{raw}'"
        )
    return name.strip(), status


def load_registry(config_path: str, logger: StructuredLogger) -> LaneRegistry:
    """
    Build a registry from an inventory YAML file.

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If YAML is invalid
    """
    config = RegistryConfig.from_yaml(config_path)
    registry = LaneRegistry.from_config(config)

    for record in registry.snapshot().segments:
        logger.debug(
            event=LogEvent.SEGMENT_ADDED,
            message=f"Segment '{record.name}' added",
            metadata=record.to_dict()
        )

    logger.info(
        event=LogEvent.REGISTRY_LOADED,
        message=f"Loaded {registry.count()} segments",
        metadata={'config': config_path, 'segment_count': registry.count()}
    )
    return registry


def apply_status_updates(
    registry: LaneRegistry,
    updates: List[Tuple[str, str]],
    logger: StructuredLogger
) -> None:
    """Apply NAME=STATUS updates in order (stops at the first unknown name)."""
    for name, status in updates:
        registry.update_status(name, status)
        logger.info(
            event=LogEvent.SEGMENT_STATUS_UPDATED,
            message=f"Status of '{name}' set to '{status}'",
            metadata={'name': name, 'status': status}
        )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bahia-lanes",
        description="Bahía de Cádiz bike-lane registry - reports from a YAML inventory",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Full report
  bahia-lanes report config/lanes/bahia_cadiz.yaml

  # Report after closing a segment, as JSON
  bahia-lanes report config/lanes/bahia_cadiz.yaml \\
      --set-status "Vía Verde=Cerrado por obras" --json

  # Single queries
  bahia-lanes total config/lanes/bahia_cadiz.yaml
  bahia-lanes status config/lanes/bahia_cadiz.yaml "Paseo Marítimo"
  bahia-lanes list config/lanes/bahia_cadiz.yaml
"""
    )

    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Structured log level on stderr (default: WARNING)"
    )

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    report = subparsers.add_parser('report', help='Print the segment report')
    report.add_argument('config', help='Path to inventory YAML')
    report.add_argument(
        '--set-status',
        dest='status_updates',
        action='append',
        type=parse_status_assignment,
        default=[],
        metavar='NAME=STATUS',
        help='Update a segment status before reporting (repeatable)'
    )
    report.add_argument('--json', action='store_true', help='Print report as JSON')

    total = subparsers.add_parser('total', help='Print total length in km')
    total.add_argument('config', help='Path to inventory YAML')

    status = subparsers.add_parser('status', help='Print the status of one segment')
    status.add_argument('config', help='Path to inventory YAML')
    status.add_argument('name', help='Segment name')

    listing = subparsers.add_parser('list', help='List segments and lengths')
    listing.add_argument('config', help='Path to inventory YAML')

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    logger = create_logger("cli", level=getattr(logging, args.log_level))

    try:
        registry = load_registry(args.config, logger)

        if args.command == 'report':
            apply_status_updates(registry, args.status_updates, logger)
            snapshot = registry.snapshot()
            if args.json:
                print(json.dumps(snapshot.to_dict(), ensure_ascii=False, indent=2))
            else:
                print(snapshot.render(), end="")
            logger.info(
                event=LogEvent.REPORT_GENERATED,
                message="Report generated",
                metadata={
                    'segment_count': snapshot.segment_count,
                    'total_length_km': snapshot.total_length_km,
                }
            )

        elif args.command == 'total':
            print(registry.total_length())

        elif args.command == 'status':
            print(registry.query_status(args.name))

        elif args.command == 'list':
            for name, length_km in registry.segments().items():
                print(f"{name}\t{length_km}")

    except SegmentNotFoundError as e:
        logger.error(
            event=LogEvent.SEGMENT_NOT_FOUND,
            message="Unknown segment",
            metadata={'name': e.name},
            exc_info=e
        )
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except InvalidSegmentError as e:
        logger.error(event=LogEvent.INVALID_SEGMENT, message="Invalid segment", exc_info=e)
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except (RegistryError, ValueError, FileNotFoundError) as e:
        logger.error(
            event=LogEvent.CONFIG_ERROR,
            message="Could not load inventory",
            metadata={'config': args.config},
            exc_info=e
        )
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
