from __future__ import annotations

from dataclasses import dataclass

from marlin_post.address import TAPER_FORMAT, TOOL_FORMAT, XYZ_FORMAT


@dataclass(frozen=True)
class Tool:
    """Cutting tool as resolved by the CAM engine. ``taper_angle`` is in radians."""

    number: int
    diameter: float = 0.0
    corner_radius: float = 0.0
    taper_angle: float = 0.0
    type: str = "flat end mill"
    description: str = ""

    def summary(self) -> str:
        """T1 D=3.000 CR=0.000 TAPER=30.0deg - flat end mill"""
        words = [
            f"T{TOOL_FORMAT.format(self.number)}",
            f"D={XYZ_FORMAT.format(self.diameter)}",
            f"CR={XYZ_FORMAT.format(self.corner_radius)}",
        ]
        if self.taper_angle > 0:
            words.append(f"TAPER={TAPER_FORMAT.format(self.taper_angle)}deg")

        summary = " ".join(words)
        if self.type:
            summary += f" - {self.type}"
        return summary
