"""
# G-code Letter and Word Address Syntax

A G-code word is formed by a single letter (letter address) followed by a number. Multiple words on the same line are called a command block
```
 G1 X10.000 Y5.000 F2500
⌊⌋  letter address
⌊  ⌋  word address
⌊                        ⌋  command block
```

Letter addresses emitted for a Marlin CNC router, laser or plasma cutter:
- F <mm/min> - Feed Rate: G0, G1, G2, G3
- G <0-92> - Preparatory Function
- I <mm> - Arc Center offset in X Axis: G2, G3
- J <mm> - Arc Center offset in Y Axis: G2, G3
- K <mm> - Arc Center offset in Z Axis (Marlin arcs are XY only, K is never requested)
- M <> - Miscellaneous Functions
- N <int> - Number of Block
- P <ms> - Tone duration: M300
- S <rpm|s|Hz> - Spindle Speed, Dwell seconds (G4), Tone frequency (M300), Stepper timeout (M84)
- T <int> - Tool Selection
- X, Y, Z <mm> - Axes: G0, G1, G2, G3, G92

Marlin always runs this program in millimeters (G21). Imperial jobs are scaled on output.
"""
from dataclasses import dataclass, replace
from enum import Enum
from math import pi

import cadquery as cq

MM_PER_INCH = 25.4


#############################################################################
class GCodeLetter(Enum):
    XAxis = "X"
    YAxis = "Y"
    ZAxis = "Z"
    ArcXAxis = "I"
    ArcYAxis = "J"
    ArcZAxis = "K"
    Feed = "F"
    Speed = "S"
    Duration = "P"
    ToolNumber = "T"
    BlockNumber = "N"

    def __repr__(self):
        return f"{self.__class__.__name__}.{self._name_}"

    def __str__(self):
        return self._value_


#############################################################################
@dataclass(frozen=True)
class WordFormat:
    """
    Canonical textual representation of a number.

    The value is multiplied by ``scale`` and printed with exactly ``decimals``
    fractional digits, then ``prefix`` is prepended. With ``trim`` trailing zeroes
    are dropped; ``force_decimal`` keeps the decimal point in that case (``10.``)
    and adds one to integer formats.
    """

    decimals: int = 3
    prefix: str = ""
    force_decimal: bool = False
    scale: float = 1.0
    trim: bool = False

    def format(self, value: float) -> str:
        text = f"{value * self.scale:.{self.decimals}f}"
        # -0.000 -> 0.000
        if float(text) == 0:
            text = f"{0:.{self.decimals}f}"

        if self.trim and "." in text:
            text = text.rstrip("0").rstrip(".")

        if self.force_decimal and "." not in text:
            text += "."

        return f"{self.prefix}{text}"

    def with_letter(self, letter: GCodeLetter) -> "WordFormat":
        return replace(self, prefix=str(letter))

    def scaled(self, factor: float) -> "WordFormat":
        return replace(self, scale=self.scale * factor)


XYZ_FORMAT = WordFormat(decimals=3)
FEED_FORMAT = WordFormat(decimals=0)
RPM_FORMAT = WordFormat(decimals=0)
SECONDS_FORMAT = WordFormat(decimals=3, force_decimal=True)
TAPER_FORMAT = WordFormat(decimals=1, scale=180 / pi)
TOOL_FORMAT = WordFormat(decimals=0)
INTEGER_FORMAT = WordFormat(decimals=0)


#################################################################################
class AddressVector:
    """Target of a motion. Omitted axes (None) keep the value of the origin."""

    __slots__ = ("x", "y", "z")

    def __init__(self, x=None, y=None, z=None):
        self.x = x
        self.y = y
        self.z = z

    def __repr__(self):
        return f"{self.__class__.__name__}(x={self.x}, y={self.y}, z={self.z})"

    @classmethod
    def from_vector(cls, v: cq.Vector):
        return cls(v.x, v.y, v.z)

    def to_vector(self, origin: cq.Vector) -> cq.Vector:
        x = origin.x if self.x is None else self.x
        y = origin.y if self.y is None else self.y
        z = origin.z if self.z is None else self.z
        return cq.Vector(x, y, z)
