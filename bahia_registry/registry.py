"""
LaneRegistry - Bike-lane segment registry for the Bahía de Cádiz.

Bounded Context: Segment inventory (tramos) and reporting
Responsibilities:
  - Register segments with their length in kilometres
  - Track the operational status of each segment
  - Aggregate views: total length, read-only listing, text report

Design:
  - Single mapping name -> SegmentRecord (length and status never drift apart)
  - Validation happens before any write (operations are all-or-nothing)
  - Errors propagate to the caller; the registry does not log

Ordering:
  Segments are kept in insertion order of their first registration.
  Re-adding an existing name replaces its record in place.

Threading: Each public method holds an internal lock, so individual
operations are atomic. Read-modify-write sequences across calls still
need external synchronization.
"""

import math
import threading
import warnings
from types import MappingProxyType
from typing import Dict, Mapping, Optional

from .errors import InvalidSegmentError, SegmentNotFoundError
from .models import DEFAULT_STATUS, REPORT_TITLE, RegistryReport, SegmentRecord


class LaneRegistry:
    """
    Registry of bike-lane segments (carriles bici).

    Example:
        registry = LaneRegistry()
        registry.add_segment("Paseo Marítimo", 3.5)
        registry.add_segment("Vía Verde", 2.0)
        registry.update_status("Vía Verde", "Cerrado por obras")

        registry.total_length()          # 5.5
        registry.query_status("Vía Verde")  # "Cerrado por obras"
        print(registry.report())
    """

    def __init__(
        self,
        default_status: str = DEFAULT_STATUS,
        title: str = REPORT_TITLE,
    ):
        """
        Initialize empty registry.

        Args:
            default_status: Status assigned on every add (default "En servicio")
            title: Report header line
        """
        self.default_status = default_status
        self.title = title
        self._segments: Dict[str, SegmentRecord] = {}
        self._lock = threading.Lock()

    @classmethod
    def from_config(cls, config) -> "LaneRegistry":
        """
        Build a registry seeded from a RegistryConfig.

        Segments are added in file order; a configured status is applied
        right after the add.

        Raises:
            InvalidSegmentError: If a configured segment is invalid
        """
        registry = cls(default_status=config.default_status, title=config.title)
        for segment in config.segments:
            registry.add_segment(segment.name, segment.length_km)
            if segment.status is not None:
                registry.update_status(segment.name, segment.status)
        return registry

    def add_segment(self, name: Optional[str], length: float) -> None:
        """
        Add a segment, or replace it if the name is already registered.

        The status is (re)set to the default status.

        Args:
            name: Segment name (non-blank)
            length: Length in kilometres (> 0)

        Raises:
            InvalidSegmentError: If name is not a non-blank str, or length is
                not an int/float > 0 (bool is rejected)
        """
        if not isinstance(name, str) or not name.strip():
            raise InvalidSegmentError("El nombre del tramo no puede estar vacío")
        if not isinstance(length, (int, float)) or isinstance(length, bool):
            raise InvalidSegmentError(f"Longitud no válida: {length!r}")
        length_km = float(length)
        if not length_km > 0:
            raise InvalidSegmentError("La longitud debe ser mayor que cero")

        record = SegmentRecord(name=name, length_km=length_km, status=self.default_status)
        with self._lock:
            self._segments[name] = record

    def update_status(self, name: str, new_status: str) -> None:
        """
        Replace the status of a registered segment (stored verbatim).

        Raises:
            SegmentNotFoundError: If name is not registered
        """
        with self._lock:
            if name not in self._segments:
                raise SegmentNotFoundError(name)
            current = self._segments[name]
            self._segments[name] = SegmentRecord(
                name=current.name,
                length_km=current.length_km,
                status=new_status,
            )

    def change_status(self, name: str, status: str) -> None:
        """Deprecated alias of update_status()."""
        warnings.warn(
            "change_status() is deprecated, use update_status()",
            DeprecationWarning,
            stacklevel=2,
        )
        self.update_status(name, status)

    def query_status(self, name: str) -> str:
        """
        Get the status of a segment.

        Raises:
            SegmentNotFoundError: If name is not registered
        """
        with self._lock:
            if name not in self._segments:
                raise SegmentNotFoundError(name)
            return self._segments[name].status

    def get_segment(self, name: str) -> SegmentRecord:
        """
        Get the full record of a segment.

        Raises:
            SegmentNotFoundError: If name is not registered
        """
        with self._lock:
            if name not in self._segments:
                raise SegmentNotFoundError(name)
            return self._segments[name]

    def total_length(self) -> float:
        """Sum of all segment lengths in km (0.0 when empty)."""
        with self._lock:
            return math.fsum(record.length_km for record in self._segments.values())

    def segments(self) -> Mapping[str, float]:
        """
        Read-only name -> length mapping.

        Returns a snapshot; it does not follow later registry changes and
        cannot be used to mutate the registry.
        """
        with self._lock:
            return MappingProxyType(
                {name: record.length_km for name, record in self._segments.items()}
            )

    def snapshot(self) -> RegistryReport:
        """Immutable report snapshot (segments in registration order)."""
        with self._lock:
            records = tuple(self._segments.values())
        return RegistryReport(
            title=self.title,
            segments=records,
            total_length_km=math.fsum(record.length_km for record in records),
        )

    def report(self) -> str:
        """Render the text report (informe)."""
        return self.snapshot().render()

    def count(self) -> int:
        """Number of registered segments."""
        with self._lock:
            return len(self._segments)

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._segments
