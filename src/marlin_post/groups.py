"""
# G-code Modal Groups
G-code commands can be categorized as modal or non-modal. Modal commands remain in effect until they are replaced or cancelled by another command. Non-modal commands execute in their block scope. M-code and G-code are further organized into modal groups

G-code Modal Groups used by Marlin:
- Group 0 - Non-modal codes: G4, G28, G92
- Group 1 - Motion: G1, G2, G3 (G0 is never written, rapids are G1 at travel speed)
- Group 2 - Plane: G17, G18, G19
- Group 3 - Distance Mode: G90, G91
- Group 5 - Feed Rate Mode: G93, G94 (Marlin only runs G94)
- Group 6 - Units: G20, G21
- Group 12 - Coordinate System: G54, G55, G56, G57, G58, G59

Marlin does not keep G0/G1 modal between lines: a line made only of axis words is ignored.
This is why the motion group is always emitted (see `modal.py`).
"""

from enum import Enum


class GCodeGroup(Enum):
    def __repr__(self):
        return f"{self.__class__.__name__}.{self._name_}"

    def __str__(self):
        return self._value_


# Group 0
class NonModal(GCodeGroup):
    pass


class Position(NonModal):
    DWELL = "G4"
    HOME = "G28"
    SET_POSITION = "G92"


# Group 1
class MotionControl(GCodeGroup):
    pass


class Path(MotionControl):
    LINEAR = "G1"
    ARC_CW = "G2"
    ARC_CCW = "G3"


# Group 2
class WorkPlane(GCodeGroup):
    XY = "G17"
    XZ = "G18"
    YZ = "G19"


# Group 3
class DistanceMode(GCodeGroup):
    ABSOLUTE = "G90"
    INCREMENTAL = "G91"


# Group 5
class FeedRateControlMode(GCodeGroup):
    INVERSE_TIME = "G93"
    UNITS_PER_MINUTE = "G94"


# Group 6
class Unit(GCodeGroup):
    IMPERIAL = "G20"
    METRIC = "G21"


# Group 12
class WorkOffset(GCodeGroup):
    OFFSET_1 = "G54"
    OFFSET_2 = "G55"
    OFFSET_3 = "G56"
    OFFSET_4 = "G57"
    OFFSET_5 = "G58"
    OFFSET_6 = "G59"

    @classmethod
    def from_index(cls, index: int) -> "WorkOffset":
        """1 -> G54 ... 6 -> G59"""
        return list(cls)[index - 1]


"""
Marlin M-Codes
- Program Control: M0 (Unconditional stop, waits for the user)
- Motor State: M84 (Disable steppers, optionally per axis or with an S timeout)
- Fan State: M106 (Fan on), M107 (Fan off)
- Display: M117 (Set LCD message)
- Tone: M300 (Play tone, S frequency P duration)
- Planner: M400 (Finish moves)
"""


class ProgramControlMode(GCodeGroup):
    PAUSE = "M0"


class MotorState(GCodeGroup):
    OFF = "M84"


class FanState(GCodeGroup):
    ON = "M106"
    OFF = "M107"


class DisplayMessage(GCodeGroup):
    STATUS = "M117"


class Tone(GCodeGroup):
    PLAY = "M300"


class PlannerControlMode(GCodeGroup):
    FINISH_MOVES = "M400"
