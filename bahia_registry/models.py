"""
Segment Schema Types
====================

Bounded Context: Registry snapshots

Design Principles:
- Immutability: frozen=True, snapshots never alias registry state
- Serialization: to_dict() for JSON export
- Rendering: text formatting lives next to the data it formats

Types:
- SegmentRecord: one bike-lane segment (name, length, status)
- RegistryReport: report snapshot (title, segments, total length)
"""

from dataclasses import dataclass, field
from typing import Dict, Any, Tuple


DEFAULT_STATUS = "En servicio"
REPORT_TITLE = "INFORME DE CARRILES BICI - Bahía de Cádiz"
REPORT_SEPARATOR = "=" * 43


def format_km(value: float) -> str:
    """Render a kilometre value the way the report prints it (3.5, 2.0)."""
    return repr(float(value))


@dataclass(frozen=True)
class SegmentRecord:
    """
    Immutable bike-lane segment.

    Attributes:
        name: Unique segment name (tramo)
        length_km: Length in kilometres (> 0)
        status: Free-text operational status (estado)

    Example:
        >>> SegmentRecord("Vía Verde", 2.0, "En servicio").format_line()
        '- Vía Verde (2.0 km): En servicio'
    """
    name: str
    length_km: float
    status: str = DEFAULT_STATUS

    def format_line(self) -> str:
        """Report line for this segment."""
        return f"- {self.name} ({format_km(self.length_km)} km): {self.status}"

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to JSON-compatible dict."""
        return {
            "name": self.name,
            "length_km": self.length_km,
            "status": self.status,
        }


@dataclass(frozen=True)
class RegistryReport:
    """
    Immutable report snapshot (informe).

    render() output:

        INFORME DE CARRILES BICI - Bahía de Cádiz
        ===========================================
        - Paseo Marítimo (3.5 km): En servicio
        - Vía Verde (2.0 km): Cerrado por obras
        Longitud total: 5.5 km
    """
    title: str = REPORT_TITLE
    segments: Tuple[SegmentRecord, ...] = field(default_factory=tuple)
    total_length_km: float = 0.0

    @property
    def segment_count(self) -> int:
        return len(self.segments)

    def render(self) -> str:
        """Multi-line text report, every line newline-terminated."""
        lines = [self.title, REPORT_SEPARATOR]
        lines.extend(segment.format_line() for segment in self.segments)
        lines.append(f"Longitud total: {format_km(self.total_length_km)} km")
        return "\n".join(lines) + "\n"

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to JSON-compatible dict."""
        return {
            "title": self.title,
            "segments": [segment.to_dict() for segment in self.segments],
            "segment_count": self.segment_count,
            "total_length_km": self.total_length_km,
        }
