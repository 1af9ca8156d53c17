"""
Program structure around the motion of each section.

    %                       program header, once per job
    ; program / machine / tool list
    G90 G21 M84 S0 ...      job header, before the first section only
    (tool change)           section preamble, every section
    ; section description
    ...motion...            section body
                            section teardown, modal position forgotten
    M107 ... M84            job footer, once per job
"""
from __future__ import annotations

import logging

import cadquery as cq

from marlin_post import motion
from marlin_post.address import INTEGER_FORMAT, AddressVector, GCodeLetter
from marlin_post.command import OpenJob, Parameter
from marlin_post.context import JobContext
from marlin_post.errors import InvalidConfiguration
from marlin_post.groups import (
    DisplayMessage,
    DistanceMode,
    FanState,
    MotorState,
    Position,
    Unit,
    WorkOffset,
)
from marlin_post.section import CuttingMode, Section
from marlin_post.tool_change import probe_tool, tool_change
from marlin_post.writer import PROGRAM_DELIMITER, single_line

logger = logging.getLogger(__name__)

HEADER_PARAMETERS = {
    "generated-by": "Generated by",
    "generated-at": "Generated at",
    "document-path": "Document",
    "job-description": "Job",
}
OPERATION_COMMENT = "operation-comment"

MAX_WORK_OFFSET = len(WorkOffset)


def program_header(context: JobContext, command: OpenJob):
    config = context.config
    writer = context.writer

    writer.write_line(PROGRAM_DELIMITER)
    if command.program_name:
        writer.write_comment(command.program_name)
    if command.program_comment:
        writer.write_comment(command.program_comment)

    machine = command.machine
    if config.write_machine and machine:
        writer.write_comment("Machine")
        if machine.vendor:
            writer.write_comment(f"vendor: {machine.vendor}")
        if machine.model:
            writer.write_comment(f"model: {machine.model}")
        if machine.description:
            writer.write_comment(f"description: {machine.description}")

    if config.write_tools and command.tools:
        writer.write_comment("Tools")
        listed = set()
        for tool in command.tools:
            if tool.number in listed:
                continue
            listed.add(tool.number)
            writer.write_comment(tool.summary())


def parameter(context: JobContext, command: Parameter):
    if command.name in HEADER_PARAMETERS:
        context.writer.write_comment(
            f"{HEADER_PARAMETERS[command.name]}: {command.value}"
        )
    elif command.name == OPERATION_COMMENT:
        context.machine.pending_comment = command.value
    else:
        logger.debug("Ignoring parameter %s", command.name)


def job_header(context: JobContext, section: Section):
    config = context.config
    channels = context.channels
    writer = context.writer

    writer.write_blank()
    writer.write_comment("Set Absolute Positioning")
    writer.write_block(channels.distance.format(DistanceMode.ABSOLUTE))
    writer.write_comment("Set Units to Millimeters")
    writer.write_block(channels.units.format(Unit.METRIC))
    writer.write_comment("Disable stepper timeout")
    writer.write_block(
        str(MotorState.OFF),
        INTEGER_FORMAT.with_letter(GCodeLetter.Speed).format(0),
    )

    if config.set_origin_on_start:
        writer.write_comment("Set current position to 0,0,0")
        writer.write_block(
            str(Position.SET_POSITION),
            channels.x.format(0),
            channels.y.format(0),
            channels.z.format(0),
        )
        context.machine.position = cq.Vector(0, 0, 0)

    writer.write_comment("Turn on the fan")
    writer.write_block(str(FanState.ON))

    if config.probe_on_start:
        probe_tool(context, section.tool)


def resolve_cutting_mode(mode) -> CuttingMode:
    if isinstance(mode, CuttingMode):
        return mode
    try:
        return CuttingMode(mode)
    except ValueError:
        raise InvalidConfiguration(f"Unsupported cutting mode: {mode!r}") from None


def describe_section(context: JobContext, section: Section) -> tuple[str, str]:
    """Comment and LCD status for a section. Jet sections lock in their cutter command."""
    if section.is_jet:
        mode = resolve_cutting_mode(section.cutting_mode)
        motion.select_cutter(context, context.config.cutter_on(mode))
        return f"Cutting - {mode.value}", f"Cutting {mode.value}"

    return f"Milling - {section.tool.summary()}", f"Milling T{section.tool_number}"


def select_work_offset(context: JobContext, work_offset: int):
    if not work_offset:
        return
    if not 1 <= work_offset <= MAX_WORK_OFFSET:
        raise InvalidConfiguration(
            f"Work offset {work_offset} out of range 1-{MAX_WORK_OFFSET}"
        )
    context.writer.write_block(
        context.channels.work_offset.format(WorkOffset.from_index(work_offset))
    )
    context.machine.work_offset = work_offset


def section_preamble(context: JobContext, section: Section):
    config = context.config
    machine = context.machine
    writer = context.writer

    if machine.first_section:
        job_header(context, section)
        machine.first_section = False
    elif config.tool_change_enabled and section.tool_number != machine.tool_number:
        tool_change(context, section.tool)
    machine.tool_number = section.tool_number

    select_work_offset(context, section.work_offset)

    comment = section.comment or machine.pending_comment
    machine.pending_comment = None
    if comment:
        writer.write_comment(comment)

    description, status = describe_section(context, section)
    writer.write_comment(description)

    for axis, lower, upper in section.bounding_box.ranges():
        writer.write_comment(
            f"{axis} range: {context.xyz_format.format(lower)} to "
            f"{context.xyz_format.format(upper)}"
        )

    writer.write_block(str(DisplayMessage.STATUS), single_line(comment or status))


def section_teardown(context: JobContext):
    context.channels.reset_position()
    context.writer.write_blank()


def job_footer(context: JobContext):
    config = context.config
    writer = context.writer

    motion.power(context, False)

    writer.write_comment("Turn off the fan")
    writer.write_block(str(FanState.OFF))
    writer.write_block(str(DisplayMessage.STATUS), "Job end")

    if config.go_home_on_finish:
        writer.write_comment("Home")
        writer.write_block(str(Position.HOME), str(GCodeLetter.ZAxis))
        writer.write_block(
            str(Position.HOME), str(GCodeLetter.XAxis), str(GCodeLetter.YAxis)
        )
    elif config.go_origin_on_finish:
        writer.write_comment("Go to origin")
        motion.rapid(context, AddressVector(x=0, y=0))
        motion.rapid(context, AddressVector(z=0))

    if config.disable_motors_on_finish:
        writer.write_comment("Disable motors")
        writer.write_block(str(MotorState.OFF))
