"""
Decoded plus code area.
"""

from dataclasses import dataclass, field

from .pluscode_constants import LATITUDE_MAX, LONGITUDE_MAX


@dataclass(frozen=True)
class CodeArea:
    """
    Bounding box of a decoded plus code.

    The lower corner is inclusive and the upper corner exclusive. The center
    is clamped so it never goes past the pole or the antimeridian.
    """

    latitude_lo: float
    longitude_lo: float
    latitude_hi: float
    longitude_hi: float
    code_length: int
    latitude_center: float = field(init=False)
    longitude_center: float = field(init=False)

    def __post_init__(self):
        # Frozen dataclass: derived fields have to bypass __setattr__.
        object.__setattr__(
            self,
            "latitude_center",
            min(self.latitude_lo + (self.latitude_hi - self.latitude_lo) / 2, LATITUDE_MAX),
        )
        object.__setattr__(
            self,
            "longitude_center",
            min(self.longitude_lo + (self.longitude_hi - self.longitude_lo) / 2, LONGITUDE_MAX),
        )

    @property
    def latitude_height(self) -> float:
        """Height of the area in degrees."""
        return self.latitude_hi - self.latitude_lo

    @property
    def longitude_width(self) -> float:
        """Width of the area in degrees."""
        return self.longitude_hi - self.longitude_lo

    def contains(self, latitude: float, longitude: float) -> bool:
        """Check whether a point falls inside the half-open box."""
        return (self.latitude_lo <= latitude < self.latitude_hi
                and self.longitude_lo <= longitude < self.longitude_hi)
