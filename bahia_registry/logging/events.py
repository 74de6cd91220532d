"""
Structured Log Event Types
==========================

Bounded Context: Observability Event Taxonomy

Event Naming Convention:
    <category>.<action>

    category: registry, segment, report, error
    action: loaded, added, status_updated, generated

Example Log Query (jq):
    jq 'select(.event == "segment.status_updated") | .metadata.name'
"""

from enum import Enum


class LogEvent(str, Enum):
    """
    Typed log event names for structured logging.

    Categories:
    - registry.*: Registry lifecycle
    - segment.*: Segment mutations
    - report.*: Report generation
    - error.*: Error conditions
    """

    # ========== Registry Events ==========
    REGISTRY_LOADED = "registry.loaded"
    """Registry seeded from an inventory file."""

    # ========== Segment Events ==========
    SEGMENT_ADDED = "segment.added"
    """Segment added or replaced."""

    SEGMENT_STATUS_UPDATED = "segment.status_updated"
    """Segment status changed."""

    # ========== Report Events ==========
    REPORT_GENERATED = "report.generated"
    """Report rendered for output."""

    # ========== Error Events ==========
    CONFIG_ERROR = "error.config"
    """Inventory file missing or invalid."""

    INVALID_SEGMENT = "error.invalid_segment"
    """Segment rejected (blank name or non-positive length)."""

    SEGMENT_NOT_FOUND = "error.segment_not_found"
    """Operation referenced an unregistered segment."""
