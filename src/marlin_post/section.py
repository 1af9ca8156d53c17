"""
A section is one contiguous machining operation: a single tool and strategy. The CAM engine
creates one per operation and this package only reads it.

Sections come in two kinds. Milling removes material mechanically with a rotating tool.
Jet cutting (laser, plasma, waterjet) removes it with a beam whose power is selected by the
cutting mode:
- Through: cut all the way through the stock
- Etch: mark the surface
- Vaporize: remove a thin layer
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from marlin_post.tool import Tool


class SectionKind(Enum):
    MILLING = "milling"
    JET = "jet"


class CuttingMode(Enum):
    THROUGH = "through"
    ETCH = "etch"
    VAPORIZE = "vaporize"


@dataclass(frozen=True)
class BoundingBox:
    xmin: float = 0.0
    xmax: float = 0.0
    ymin: float = 0.0
    ymax: float = 0.0
    zmin: float = 0.0
    zmax: float = 0.0

    def ranges(self) -> list[tuple[str, float, float]]:
        return [
            ("X", self.xmin, self.xmax),
            ("Y", self.ymin, self.ymax),
            ("Z", self.zmin, self.zmax),
        ]


@dataclass(frozen=True)
class Section:
    tool: Tool
    kind: SectionKind = SectionKind.MILLING
    # Only meaningful for jet sections. Left as given so that an unknown mode
    # is reported when the section starts
    cutting_mode: CuttingMode | str | None = None
    bounding_box: BoundingBox = field(default_factory=BoundingBox)
    comment: str = ""
    work_offset: int = 0

    @property
    def is_jet(self) -> bool:
        return self.kind == SectionKind.JET

    @property
    def tool_number(self) -> int:
        return self.tool.number
