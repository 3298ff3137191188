"""
Configuration constants for the closed boundary builder.

Contains defaults for OSM member selection, logging and report output,
plus the runtime configuration used by the CLI.
"""

from dataclasses import dataclass
from typing import Optional, Tuple


# =============================================================================
# OSM MEMBER SELECTION
# =============================================================================

# Relation member roles that make up the boundary ring.
# An empty role is treated as outer, as in OSM multipolygons.
DEFAULT_MEMBER_ROLES = ("outer", "")

# =============================================================================
# LOGGING
# =============================================================================

LOG_FORMAT = '%(asctime)s [%(levelname)s] %(name)s: %(message)s'
LOG_DATE_FORMAT_CONSOLE = '%H:%M:%S'
LOG_DATE_FORMAT_FILE = '%Y-%m-%d %H:%M:%S'

# =============================================================================
# REPORT SETTINGS
# =============================================================================

DEFAULT_OUTPUT_DIR = "./output"
REPORT_FILE_PATTERN = "boundary_{relation_id}_report.json"
LOG_FILE_PATTERN = "boundary_{relation_id}.log"


# =============================================================================
# RUNTIME CONFIGURATION
# =============================================================================

@dataclass
class BoundaryConfig:
    """
    Runtime configuration for building a boundary from an OSM file.

    Adjusted per-run via CLI arguments or programmatically.
    """

    # Input
    osm_file: str = ""
    relation_id: str = ""
    member_roles: Tuple[str, ...] = DEFAULT_MEMBER_ROLES

    # Output
    output_dir: str = DEFAULT_OUTPUT_DIR
    write_report: bool = True

    # Logging
    verbose: bool = False
    log_file: Optional[str] = None

    def __post_init__(self):
        """Validate configuration values."""
        self.member_roles = tuple(self.member_roles)

        if not self.member_roles:
            raise ValueError("member_roles must contain at least one role")

        if self.relation_id is not None:
            self.relation_id = str(self.relation_id)

    @property
    def report_filename(self) -> str:
        return REPORT_FILE_PATTERN.format(relation_id=self.relation_id)

    @property
    def log_filename(self) -> str:
        return LOG_FILE_PATTERN.format(relation_id=self.relation_id)


# Default configuration instance
DEFAULT_CONFIG = BoundaryConfig()
