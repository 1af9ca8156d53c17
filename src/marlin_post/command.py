"""
The CAM engine describes a machining job as a stream of commands. A command is handed to the
post processor one at a time in job order and never carries G-code itself; choosing and
formatting the words is the job of the post processor.

The commands are organised in a similar fashion to the G-code they end up as, into job,
motion and config commands:
- Command
    - JobCommand (abstract)
        - OpenJob
        - Parameter
        - Comment
        - OpenSection
        - CloseSection
        - CloseJob
    - MotionCommand (abstract)
        - Rapid
        - Linear
        - Circular
        - MultiAxisRapid (rejected)
        - MultiAxisLinear (rejected)
    - ConfigCommand (abstract)
        - Power
        - Dwell
        - SpindleSpeed

A job is expected in this order:
OpenJob, (Parameter | Comment)*, (OpenSection, (MotionCommand | ConfigCommand | Comment)*, CloseSection)*, CloseJob
"""
from __future__ import annotations

from abc import ABC
from dataclasses import dataclass, field

from marlin_post.address import AddressVector
from marlin_post.groups import Unit, WorkPlane
from marlin_post.section import Section
from marlin_post.tool import Tool


class Command(ABC):
    pass


# JOB
class JobCommand(Command, ABC):
    pass


@dataclass(frozen=True)
class MachineInfo:
    vendor: str = ""
    model: str = ""
    description: str = ""

    def __bool__(self):
        return bool(self.vendor or self.model or self.description)


@dataclass(frozen=True)
class OpenJob(JobCommand):
    program_name: str = ""
    program_comment: str = ""
    unit: Unit = Unit.METRIC
    machine: MachineInfo = field(default_factory=MachineInfo)
    tools: tuple[Tool, ...] = ()


@dataclass(frozen=True)
class Parameter(JobCommand):
    """Free text metadata, e.g. ``Parameter("document-path", "/parts/bracket.f3d")``"""

    name: str
    value: str


@dataclass(frozen=True)
class Comment(JobCommand):
    text: str


@dataclass(frozen=True)
class OpenSection(JobCommand):
    section: Section


@dataclass(frozen=True)
class CloseSection(JobCommand):
    pass


@dataclass(frozen=True)
class CloseJob(JobCommand):
    pass


# MOTION
class MotionCommand(Command, ABC):
    pass


@dataclass(frozen=True)
class Rapid(MotionCommand):
    end: AddressVector

    @classmethod
    def abs(cls, x=None, y=None, z=None):
        return cls(end=AddressVector(x=x, y=y, z=z))


@dataclass(frozen=True)
class Linear(MotionCommand):
    end: AddressVector
    feed: float | None = None

    @classmethod
    def abs(cls, x=None, y=None, z=None, feed: float | None = None):
        return cls(end=AddressVector(x=x, y=y, z=z), feed=feed)


@dataclass(frozen=True)
class Circular(MotionCommand):
    """
    Arc from the current position to ``end`` around ``center``. Both are absolute.
    Omitted axes of the center and end fall back to the current position.
    """

    clockwise: bool
    center: AddressVector
    end: AddressVector
    feed: float | None = None
    plane: WorkPlane = WorkPlane.XY

    @classmethod
    def abs(
        cls,
        clockwise: bool,
        cx=None,
        cy=None,
        cz=None,
        x=None,
        y=None,
        z=None,
        feed: float | None = None,
        plane: WorkPlane = WorkPlane.XY,
    ):
        return cls(
            clockwise=clockwise,
            center=AddressVector(x=cx, y=cy, z=cz),
            end=AddressVector(x=x, y=y, z=z),
            feed=feed,
            plane=plane,
        )


@dataclass(frozen=True)
class MultiAxisRapid(MotionCommand):
    """Rapid with rotary axes. Only exists to be rejected."""

    x: float | None = None
    y: float | None = None
    z: float | None = None
    a: float | None = None
    b: float | None = None
    c: float | None = None


@dataclass(frozen=True)
class MultiAxisLinear(MotionCommand):
    """Linear move with rotary axes. Only exists to be rejected."""

    x: float | None = None
    y: float | None = None
    z: float | None = None
    a: float | None = None
    b: float | None = None
    c: float | None = None
    feed: float | None = None


# CONFIG
class ConfigCommand(Command, ABC):
    pass


@dataclass(frozen=True)
class Power(ConfigCommand):
    on: bool


@dataclass(frozen=True)
class Dwell(ConfigCommand):
    seconds: float


@dataclass(frozen=True)
class SpindleSpeed(ConfigCommand):
    rpm: float
