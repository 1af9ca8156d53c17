"""
Everything that lives for exactly one job: the machine state, the modal channels and the
output. A ``JobContext`` is created when the job opens, handed to every component and
discarded when the job closes.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto

import cadquery as cq

from marlin_post.address import (
    FEED_FORMAT,
    MM_PER_INCH,
    RPM_FORMAT,
    SECONDS_FORMAT,
    XYZ_FORMAT,
    GCodeLetter,
    WordFormat,
)
from marlin_post.config import PostConfig
from marlin_post.groups import Unit
from marlin_post.modal import ModalChannel, ModalGroup, ReferenceChannel
from marlin_post.writer import BlockWriter


class Stage(Enum):
    NOT_STARTED = auto()
    HEADER = auto()
    PREAMBLE = auto()
    BODY = auto()
    TEARDOWN = auto()
    FOOTER = auto()
    DONE = auto()


@dataclass
class MachineState:
    tool_number: int | None = None
    power: bool = False
    cutter_on: str = ""
    work_offset: int = 0
    position: cq.Vector = field(default_factory=lambda: cq.Vector(0, 0, 0))
    stage: Stage = Stage.NOT_STARTED
    first_section: bool = True
    # operation-comment parameter waiting for the next section
    pending_comment: str | None = None


class ModalChannels:
    def __init__(self, xyz_format: WordFormat, feed_format: WordFormat):
        self.x = ModalChannel(xyz_format.with_letter(GCodeLetter.XAxis))
        self.y = ModalChannel(xyz_format.with_letter(GCodeLetter.YAxis))
        self.z = ModalChannel(xyz_format.with_letter(GCodeLetter.ZAxis))
        self.i = ReferenceChannel(xyz_format.with_letter(GCodeLetter.ArcXAxis))
        self.j = ReferenceChannel(xyz_format.with_letter(GCodeLetter.ArcYAxis))
        self.k = ReferenceChannel(xyz_format.with_letter(GCodeLetter.ArcZAxis))
        self.feed = ModalChannel(feed_format.with_letter(GCodeLetter.Feed))
        self.speed = ModalChannel(
            RPM_FORMAT.with_letter(GCodeLetter.Speed), force=True
        )
        self.motion = ModalGroup(force=True)
        self.plane = ModalGroup()
        self.distance = ModalGroup()
        self.feed_mode = ModalGroup()
        self.units = ModalGroup()
        self.work_offset = ModalGroup()

    def reset_position(self) -> None:
        """Forget X, Y, Z and F so that the next moves restate them"""
        for channel in (self.x, self.y, self.z, self.feed):
            channel.reset()


class JobContext:
    config: PostConfig
    unit: Unit
    machine: MachineState
    channels: ModalChannels
    writer: BlockWriter

    def __init__(
        self,
        config: PostConfig,
        unit: Unit = Unit.METRIC,
        tool_change_code: list[str] | None = None,
    ):
        self.config = config
        self.unit = unit
        self.unit_scale = MM_PER_INCH if unit == Unit.IMPERIAL else 1.0
        self.tool_change_code = tool_change_code

        self.xyz_format = XYZ_FORMAT.scaled(self.unit_scale)
        self.seconds_format = SECONDS_FORMAT.with_letter(GCodeLetter.Speed)
        self.machine = MachineState(cutter_on=config.cutter_on_through)
        self.channels = ModalChannels(
            self.xyz_format, FEED_FORMAT.scaled(self.unit_scale)
        )
        self.writer = BlockWriter(
            separator=config.word_separator,
            sequence_number_start=config.first_sequence_number,
            sequence_number_increment=config.sequence_number_increment,
        )

    def mm_to_unit(self, value: float) -> float:
        """Convert a configured millimeter value to job units"""
        return value / self.unit_scale
