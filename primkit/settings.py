# primkit/settings.py
from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Tuple

from primkit.types import PrimitiveKind

RGBA = Tuple[int, int, int, int]


@dataclass(slots=True)
class SphereDefaults:
    radius: float = 0.5
    lat_bands: int = 24
    long_bands: int = 24


@dataclass(slots=True)
class CylinderDefaults:
    radius: float = 0.3
    height: float = 0.8
    segments: int = 32


@dataclass(slots=True)
class ConeDefaults:
    radius: float = 0.4
    height: float = 0.7
    segments: int = 32


@dataclass(slots=True)
class TorusDefaults:
    major_radius: float = 0.25
    minor_radius: float = 0.1
    radial_segments: int = 32
    tubular_segments: int = 24


@dataclass(slots=True)
class PrimitiveDefaults:
    """
    Shape parameters used when a caller does not supply their own.
    """

    sphere: SphereDefaults = field(default_factory=SphereDefaults)
    cylinder: CylinderDefaults = field(default_factory=CylinderDefaults)
    cone: ConeDefaults = field(default_factory=ConeDefaults)
    torus: TorusDefaults = field(default_factory=TorusDefaults)

    def params(self, kind: PrimitiveKind | str) -> Dict[str, Any]:
        """Return the defaults for `kind` as keyword arguments."""
        return asdict(getattr(self, PrimitiveKind(kind).value))


@dataclass(slots=True)
class CheckerSettings:
    size: int = 256
    tiles: int = 8
    color_a: RGBA = (255, 255, 255, 255)
    color_b: RGBA = (40, 40, 40, 255)


@dataclass(slots=True)
class PrimkitSettings:
    """
    The master configuration object.
    """

    primitives: PrimitiveDefaults = field(default_factory=PrimitiveDefaults)
    checker: CheckerSettings = field(default_factory=CheckerSettings)
