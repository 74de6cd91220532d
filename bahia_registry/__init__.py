"""
bahia_registry - Bike-lane segment registry (Bahía de Cádiz)
============================================================

Bounded Context: Inventory of bike-lane segments (tramos), their length in
kilometres and operational status (estado), with reporting views.

Architecture:

    bahia_registry/
    ├── registry.py    # LaneRegistry (sole owner of segment state)
    ├── models.py      # SegmentRecord, RegistryReport (immutable snapshots)
    ├── errors.py      # InvalidSegmentError, SegmentNotFoundError
    ├── config.py      # RegistryConfig (YAML inventory)
    └── logging/       # Structured JSON logging for callers

Usage:

    from bahia_registry import LaneRegistry

    registry = LaneRegistry()
    registry.add_segment("Paseo Marítimo", 3.5)
    registry.update_status("Paseo Marítimo", "Cerrado por obras")
    print(registry.report())
"""

from bahia_registry.errors import RegistryError, InvalidSegmentError, SegmentNotFoundError
from bahia_registry.models import (
    DEFAULT_STATUS,
    REPORT_TITLE,
    SegmentRecord,
    RegistryReport,
)
from bahia_registry.registry import LaneRegistry
from bahia_registry.config import RegistryConfig, SegmentConfig

__all__ = [
    # Registry
    "LaneRegistry",
    # Snapshots
    "SegmentRecord",
    "RegistryReport",
    "DEFAULT_STATUS",
    "REPORT_TITLE",
    # Errors
    "RegistryError",
    "InvalidSegmentError",
    "SegmentNotFoundError",
    # Config
    "RegistryConfig",
    "SegmentConfig",
]

__version__ = "2.4.0"
