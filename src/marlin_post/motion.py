"""
Motion commands to G-code blocks.

Marlin has no real rapid mode: G0 is executed exactly like G1 at the last feed rate. Rapids
are therefore written as linear moves at the configured travel speeds, Z and XY separately
because the two are tuned independently. The feed word is restated for every travel move
so a slow cutting feed never leaks into a rapid (or the other way around).

Marlin arcs (G2/G3) are only reliable in the XY plane without Z movement. Anything else is
broken into straight segments within the configured tolerance.
"""
from __future__ import annotations

import logging
import math

from marlin_post.address import AddressVector
from marlin_post.command import Circular, MultiAxisLinear, MultiAxisRapid
from marlin_post.context import JobContext
from marlin_post.errors import UnsupportedFeature
from marlin_post.groups import Path, Position, WorkPlane
from marlin_post.utils.interpolation import (
    PLANE_NORMALS,
    arc_sweep,
    chord_deviation,
    linearize_arc,
    project_to_plane,
)

logger = logging.getLogger(__name__)


def rapid(context: JobContext, end: AddressVector):
    channels = context.channels
    config = context.config
    writer = context.writer
    target = end.to_vector(context.machine.position)

    z = channels.z.format(end.z)
    if z:
        channels.feed.reset()
        writer.write_block(
            channels.motion.format(Path.LINEAR),
            z,
            channels.feed.format(context.mm_to_unit(config.travel_speed_z)),
        )

    x = channels.x.format(end.x)
    y = channels.y.format(end.y)
    if x or y:
        channels.feed.reset()
        writer.write_block(
            channels.motion.format(Path.LINEAR),
            x,
            y,
            channels.feed.format(context.mm_to_unit(config.travel_speed_xy)),
        )

    context.machine.position = target


def linear(context: JobContext, end: AddressVector, feed: float | None = None):
    channels = context.channels
    target = end.to_vector(context.machine.position)

    x = channels.x.format(end.x)
    y = channels.y.format(end.y)
    z = channels.z.format(end.z)

    # Don't move if you are already at the correct location
    if x or y or z:
        context.writer.write_block(
            channels.motion.format(Path.LINEAR),
            x,
            y,
            z,
            channels.feed.format(feed),
        )

    context.machine.position = target


def circular(context: JobContext, command: Circular):
    channels = context.channels
    start = context.machine.position
    center = command.center.to_vector(start)
    end = command.end.to_vector(start)

    helical = not math.isclose(start.z, end.z, abs_tol=1e-9)
    if command.plane != WorkPlane.XY or helical:
        return linearize(context, command)

    # Marlin executes one G code per line
    context.writer.write_block(channels.plane.format(WorkPlane.XY))
    # I and J are relative to the position before the move
    context.writer.write_block(
        channels.motion.format(Path.ARC_CW if command.clockwise else Path.ARC_CCW),
        channels.x.format(end.x),
        channels.y.format(end.y),
        channels.i.format(center.x - start.x),
        channels.j.format(center.y - start.y),
        channels.feed.format(command.feed),
    )
    context.machine.position = end


def linearize(context: JobContext, command: Circular):
    start = context.machine.position
    center = command.center.to_vector(start)
    end = command.end.to_vector(start)
    normal = PLANE_NORMALS[command.plane]
    points = linearize_arc(
        start,
        center,
        end,
        normal,
        command.clockwise,
        context.mm_to_unit(context.config.tolerance),
    )
    if logger.isEnabledFor(logging.DEBUG):
        radius = project_to_plane(start - center, normal).Length
        sweep = arc_sweep(start, center, end, normal, command.clockwise)
        logger.debug(
            "Linearized %s arc in plane %s into %d segments, deviation %.4f",
            "CW" if command.clockwise else "CCW",
            command.plane.name,
            len(points),
            chord_deviation(radius, sweep, len(points)),
        )
    for point in points:
        linear(context, AddressVector.from_vector(point), command.feed)


def multi_axis(context: JobContext, command: MultiAxisRapid | MultiAxisLinear):
    raise UnsupportedFeature(
        f"{type(command).__name__}: multi-axis motion is not supported, "
        "this machine has 3 linear axes"
    )


def power(context: JobContext, on: bool):
    machine = context.machine
    if on == machine.power:
        return

    machine.power = on
    context.writer.write_block(
        machine.cutter_on if on else context.config.cutter_off
    )


def select_cutter(context: JobContext, cutter_on: str):
    """Make cutter_on the active cutter command, switching over at once if the cutter is on"""
    machine = context.machine
    if cutter_on == machine.cutter_on:
        return

    machine.cutter_on = cutter_on
    if machine.power:
        context.writer.write_block(cutter_on)


def dwell(context: JobContext, seconds: float):
    context.writer.write_comment("Dwell")
    context.writer.write_block(
        str(Position.DWELL), context.seconds_format.format(seconds)
    )


def spindle_speed(context: JobContext, rpm: float):
    context.writer.write_block(context.channels.speed.format(rpm))
