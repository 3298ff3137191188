"""
Closed Boundary - Main CLI

Builds the closed boundary of an OSM relation and reports its winding.

Usage:
    python -m closed_boundary.main --osm-file <path> --relation-id <id>

Example:
    python -m closed_boundary.main --osm-file berlin.osm --relation-id 62422
"""

import argparse
import json
import logging
import os
import sys
from dataclasses import dataclass, field, asdict
from typing import List, Optional

from . import __version__
from .boundary import ClosedBoundary
from .config import (
    BoundaryConfig,
    DEFAULT_CONFIG,
    LOG_DATE_FORMAT_CONSOLE,
    LOG_DATE_FORMAT_FILE,
    LOG_FORMAT,
)
from .io.osm_parser import parse_osm_file, relation_ways
from .processing.boundary_assembler import BoundaryError


@dataclass
class BoundaryReport:
    """Report from a boundary run."""
    relation_id: str
    version: str
    success: bool
    input_ways: int = 0
    ring_ways: int = 0
    leftover_ways: int = 0
    ring_nodes: int = 0
    determinant: float = 0.0
    orientation: str = ""
    output_files: List[str] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)


@dataclass
class BoundaryRunResult:
    """
    Result of building a boundary from an OSM file.

    Attributes:
        success: Whether a closed boundary was built
        report: Statistics and metadata
        boundary: The boundary (None on failure)
    """
    success: bool
    report: BoundaryReport
    boundary: Optional[ClosedBoundary] = None


def setup_logging(verbose: bool = False, log_file: Optional[str] = None) -> None:
    """
    Configure logging to console and optionally to file.

    Args:
        verbose: If True, use DEBUG level; otherwise INFO
        log_file: Optional path to log file
    """
    level = logging.DEBUG if verbose else logging.INFO

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(
        logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT_CONSOLE)
    )
    root_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)  # Always log DEBUG to file
        file_handler.setFormatter(
            logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT_FILE)
        )
        root_logger.addHandler(file_handler)


def run_boundary(config: BoundaryConfig) -> BoundaryRunResult:
    """
    Build the boundary described by config.

    Steps:
    1. Parse the OSM file
    2. Resolve the relation's member ways
    3. Assemble the closed ring and compute its orientation
    4. Write the JSON report (if enabled)

    Args:
        config: Run configuration

    Returns:
        BoundaryRunResult; failures are recorded in report.errors
    """
    logger = logging.getLogger(__name__)

    report = BoundaryReport(
        relation_id=config.relation_id,
        version=__version__,
        success=False,
    )
    boundary: Optional[ClosedBoundary] = None

    try:
        data = parse_osm_file(config.osm_file)
        ways = relation_ways(data, config.relation_id, config.member_roles)
        report.input_ways = len(ways)

        boundary = ClosedBoundary.build(ways)

        report.success = True
        report.ring_ways = len(boundary.way_list)
        report.leftover_ways = len(boundary.leftover_ways)
        report.ring_nodes = len(boundary.nodes())
        report.determinant = boundary.determinant
        report.orientation = boundary.orientation.value

        logger.info(
            f"Relation {config.relation_id}: {report.ring_ways} ways, "
            f"orientation {report.orientation} (determinant {report.determinant:.6f})"
        )

    except BoundaryError as e:
        report.errors.append(str(e))
        logger.error(f"Failed to build boundary for relation {config.relation_id}: {e}")

    if config.write_report:
        os.makedirs(config.output_dir, exist_ok=True)
        report_path = os.path.join(config.output_dir, config.report_filename)
        report.output_files.append(report_path)
        with open(report_path, 'w', encoding='utf-8') as f:
            json.dump(asdict(report), f, indent=2)
        logger.info(f"Report saved to {report_path}")

    return BoundaryRunResult(report.success, report, boundary)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description='Closed Boundary - build a closed ring from OSM relation ways'
    )

    parser.add_argument(
        '--osm-file',
        required=True,
        help='OSM XML file containing the relation, its ways and nodes'
    )

    parser.add_argument(
        '--relation-id',
        required=True,
        help='ID of the boundary relation'
    )

    parser.add_argument(
        '--role',
        action='append',
        dest='roles',
        default=None,
        help='Member role to include (repeatable; default: outer and empty role)'
    )

    parser.add_argument(
        '--output-dir',
        default=DEFAULT_CONFIG.output_dir,
        help=f'Output directory for the report and log (default: {DEFAULT_CONFIG.output_dir})'
    )

    parser.add_argument(
        '--no-report',
        action='store_true',
        help='Do not write the JSON report'
    )

    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Enable verbose logging'
    )

    parser.add_argument(
        '--no-log-file',
        action='store_true',
        help='Disable log file output (only console)'
    )

    parser.add_argument(
        '--version',
        action='version',
        version=f'%(prog)s {__version__}'
    )

    args = parser.parse_args(argv)

    config = BoundaryConfig(
        osm_file=args.osm_file,
        relation_id=args.relation_id,
        member_roles=tuple(args.roles) if args.roles else DEFAULT_CONFIG.member_roles,
        output_dir=args.output_dir,
        write_report=not args.no_report,
        verbose=args.verbose,
    )

    if not args.no_log_file:
        os.makedirs(config.output_dir, exist_ok=True)
        config.log_file = os.path.join(config.output_dir, config.log_filename)

    setup_logging(config.verbose, config.log_file)

    try:
        result = run_boundary(config)
    except Exception as e:
        logging.exception(f"Boundary run failed: {e}")
        return 1

    report = result.report
    if result.success:
        print(f"\nRelation {report.relation_id}: closed boundary of {report.ring_ways} ways")
        print(f"Orientation: {report.orientation} (determinant {report.determinant})")
        if report.leftover_ways:
            print(f"Warning: {report.leftover_ways} ways left over, "
                  f"the relation may hold more than one ring")
        if report.output_files:
            print(f"Output files: {', '.join(report.output_files)}")
        return 0

    print(f"\nBoundary failed with errors:")
    for error in report.errors:
        print(f"  - {error}")
    if config.log_file:
        print(f"See log file for details: {config.log_file}")
    return 1


if __name__ == '__main__':
    sys.exit(main())
