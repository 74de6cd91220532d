"""
Configuration schema for the lane registry.

Defines the YAML inventory used to seed a LaneRegistry: report title,
default status and the list of segments with optional initial status.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Union
import yaml

from .models import DEFAULT_STATUS, REPORT_TITLE


@dataclass(frozen=True)
class SegmentConfig:
    """Segment entry (tramo) in the inventory file."""

    name: str
    length_km: float
    status: Optional[str] = None

    def __post_init__(self):
        """Validate segment entry."""
        if not isinstance(self.name, str):
            raise ValueError(
                f"Segment name must be a string, got {self.name!r}"
            )

        if not self.name.strip():
            raise ValueError("Segment name cannot be empty")

        if self.status is not None and not isinstance(self.status, str):
            raise ValueError(
                f"Segment '{self.name}' status must be a string, got {self.status!r}"
            )

        if not isinstance(self.length_km, (int, float)) or isinstance(self.length_km, bool):
            raise ValueError(
                f"Segment '{self.name}' length_km must be a number, got {self.length_km!r}"
            )

        if not self.length_km > 0:
            raise ValueError(
                f"Segment '{self.name}' length_km must be > 0, got {self.length_km}"
            )


@dataclass(frozen=True)
class RegistryConfig:
    """
    Main configuration for a lane registry.

    Loaded from YAML and validated at startup.
    Immutable after construction (frozen dataclass).
    """

    title: str = REPORT_TITLE
    default_status: str = DEFAULT_STATUS
    segments: List[SegmentConfig] = field(default_factory=list)

    def __post_init__(self):
        """Validate registry configuration."""
        if not isinstance(self.title, str) or not self.title:
            raise ValueError(f"title must be a non-empty string, got {self.title!r}")

        if not isinstance(self.default_status, str) or not self.default_status:
            raise ValueError(
                f"default_status must be a non-empty string, got {self.default_status!r}"
            )

    @classmethod
    def from_yaml(cls, yaml_path: Union[str, Path]) -> "RegistryConfig":
        """
        Load configuration from YAML file.

        Example YAML:
            title: "INFORME DE CARRILES BICI - Bahía de Cádiz"
            default_status: "En servicio"

            segments:
              - name: "Paseo Marítimo"
                length_km: 3.5
              - name: "Vía Verde"
                length_km: 2.0
                status: "Cerrado por obras"

        Raises:
            FileNotFoundError: If the file doesn't exist
            ValueError: If YAML is invalid or an entry fails validation
        """
        path = Path(yaml_path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {yaml_path}")

        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {yaml_path}: {e}")

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ValueError(f"Config root must be a mapping in {yaml_path}")

        segments_data = data.get("segments") or []
        try:
            segments = [
                SegmentConfig(
                    name=s["name"],
                    length_km=s["length_km"],
                    status=s.get("status"),
                )
                for s in segments_data
            ]
        except (KeyError, TypeError) as e:
            raise ValueError(f"Invalid segment entry in {yaml_path}: {e}")

        return cls(
            title=data.get("title", REPORT_TITLE),
            default_status=data.get("default_status", DEFAULT_STATUS),
            segments=segments,
        )
