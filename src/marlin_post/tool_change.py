"""
Manual tool change for machines without a tool changer.

The built-in sequence waits for the planner to drain, beeps, parks the head (Z first, then XY),
releases the Z stepper so the operator can lower the new bit onto the stock and stops with
a prompt on the LCD until the operator resumes. Alternatively the whole sequence can be
supplied as an external file which is copied into the program verbatim.
"""
from __future__ import annotations

import logging

from marlin_post import motion
from marlin_post.address import INTEGER_FORMAT, AddressVector, GCodeLetter
from marlin_post.context import JobContext
from marlin_post.groups import (
    MotorState,
    PlannerControlMode,
    Position,
    ProgramControlMode,
    Tone,
)
from marlin_post.tool import Tool
from marlin_post.writer import single_line

logger = logging.getLogger(__name__)

TONE_FREQUENCY = 400
TONE_DURATION = 2000


def tool_change(context: JobContext, tool: Tool):
    # Never leave the cutter running while the operator swaps tools
    motion.power(context, False)

    if context.tool_change_code is not None:
        external_tool_change(context, tool)
    else:
        builtin_tool_change(context, tool)

    # The operator may have moved the machine by hand
    context.channels.reset_position()
    context.machine.tool_number = tool.number


def builtin_tool_change(context: JobContext, tool: Tool):
    config = context.config
    writer = context.writer
    logger.debug("Built-in tool change to T%d", tool.number)

    writer.write_comment(f"Tool change to T{tool.number}")
    writer.write_block(str(PlannerControlMode.FINISH_MOVES))
    writer.write_block(
        str(Tone.PLAY),
        INTEGER_FORMAT.with_letter(GCodeLetter.Speed).format(TONE_FREQUENCY),
        INTEGER_FORMAT.with_letter(GCodeLetter.Duration).format(TONE_DURATION),
    )

    if config.use_g28:
        writer.write_block(str(Position.HOME), str(GCodeLetter.ZAxis))
        context.channels.z.reset()
    else:
        motion.rapid(context, AddressVector(z=context.mm_to_unit(config.tool_change_z)))
    motion.rapid(
        context,
        AddressVector(
            x=context.mm_to_unit(config.tool_change_x),
            y=context.mm_to_unit(config.tool_change_y),
        ),
    )

    # Release Z so that the new bit can be lowered by hand
    writer.write_block(str(MotorState.OFF), str(GCodeLetter.ZAxis))

    prompt = f"Put tool {tool.number}"
    if tool.description:
        prompt += f" - {tool.description}"
    writer.write_block(str(ProgramControlMode.PAUSE), single_line(prompt))

    if config.tool_change_z_probe:
        probe_tool(context, tool)

    writer.write_comment("Tool change end")


def external_tool_change(context: JobContext, tool: Tool):
    logger.debug(
        "External tool change to T%d (%d lines)",
        tool.number,
        len(context.tool_change_code),
    )
    for line in context.tool_change_code:
        context.writer.write_line(line)


def probe_tool(context: JobContext, tool: Tool):
    """Z probing is not implemented yet, only marks where it would happen"""
    logger.info("Probing requested for T%d but it is not implemented", tool.number)
    context.writer.write_comment(f"Probe T{tool.number} - not implemented, set Z manually")
