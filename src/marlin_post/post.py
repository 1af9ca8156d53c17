from __future__ import annotations

import logging
from typing import Iterable

from marlin_post import lifecycle, motion
from marlin_post.command import (
    Circular,
    CloseJob,
    CloseSection,
    Command,
    Comment,
    Dwell,
    Linear,
    MultiAxisLinear,
    MultiAxisRapid,
    OpenJob,
    OpenSection,
    Parameter,
    Power,
    Rapid,
    SpindleSpeed,
)
from marlin_post.config import PostConfig
from marlin_post.context import JobContext, Stage
from marlin_post.errors import PostError

logger = logging.getLogger(__name__)


class PostProcessor:
    """
    Turns one job worth of commands into a Marlin program.

    Commands are handed over one at a time with ``dispatch`` (or all at once with ``process``).
    A ``JobContext`` exists from ``OpenJob`` until ``CloseJob``; afterwards only the program
    text is kept. Any ``PostError`` aborts the job and discards what was generated so far.
    """

    def __init__(self, config: PostConfig | None = None):
        self.config = config if config is not None else PostConfig()
        self.context: JobContext | None = None
        self._gcode: str | None = None

    def process(self, commands: Iterable[Command]) -> str:
        for command in commands:
            self.dispatch(command)
        return self.to_gcode()

    def dispatch(self, command: Command) -> None:
        try:
            self._dispatch(command)
        except PostError:
            logger.error("Aborting job on %r", command)
            self.context = None
            raise

    def _dispatch(self, command: Command) -> None:
        match command:
            case OpenJob():
                self._open_job(command)
            case Parameter():
                lifecycle.parameter(self._context(*Stage), command)
            case Comment(text=text):
                self._context(*Stage).writer.write_comment(text)
            case OpenSection(section=section):
                self._open_section(section)
            case CloseSection():
                self._close_section()
            case CloseJob():
                self._close_job()
            case Rapid(end=end):
                motion.rapid(self._context(Stage.BODY), end)
            case Linear(end=end, feed=feed):
                motion.linear(self._context(Stage.BODY), end, feed)
            case Circular():
                motion.circular(self._context(Stage.BODY), command)
            case MultiAxisRapid() | MultiAxisLinear():
                motion.multi_axis(self._context(Stage.BODY), command)
            case Power(on=on):
                motion.power(self._context(Stage.BODY), on)
            case Dwell(seconds=seconds):
                motion.dwell(self._context(Stage.BODY), seconds)
            case SpindleSpeed(rpm=rpm):
                motion.spindle_speed(self._context(Stage.BODY), rpm)
            case _:
                raise TypeError(f"Unsupported command {command!r}")

    def _context(self, *stages: Stage) -> JobContext:
        if self.context is None:
            raise RuntimeError("No job is open")
        if self.context.machine.stage not in stages:
            raise RuntimeError(
                f"Command not allowed in stage {self.context.machine.stage.name}"
            )
        return self.context

    def _open_job(self, command: OpenJob):
        if self.context is not None:
            raise RuntimeError("A job is already open")

        logger.info("Opening job %s", command.program_name or "<unnamed>")
        self._gcode = None
        self.context = JobContext(
            self.config,
            unit=command.unit,
            tool_change_code=self.config.load_tool_change_code(),
        )
        self.context.machine.stage = Stage.HEADER
        lifecycle.program_header(self.context, command)

    def _open_section(self, section):
        context = self._context(Stage.HEADER, Stage.TEARDOWN)
        logger.debug("Opening %s section with T%d", section.kind.value, section.tool_number)
        context.machine.stage = Stage.PREAMBLE
        lifecycle.section_preamble(context, section)
        context.machine.stage = Stage.BODY

    def _close_section(self):
        context = self._context(Stage.BODY)
        lifecycle.section_teardown(context)
        context.machine.stage = Stage.TEARDOWN

    def _close_job(self):
        context = self._context(Stage.HEADER, Stage.TEARDOWN)
        context.machine.stage = Stage.FOOTER
        lifecycle.job_footer(context)
        context.machine.stage = Stage.DONE

        self._gcode = context.writer.to_gcode()
        logger.info("Job finished, %d lines", len(context.writer.lines))
        self.context = None

    def to_gcode(self) -> str:
        if self._gcode is None:
            raise RuntimeError("No finished job, close the job first")
        return self._gcode

    def save_gcode(self, file_name):
        gcode = self.to_gcode()
        with open(file_name, "w") as f:
            f.write(gcode)


def post_process(commands: Iterable[Command], config: PostConfig | None = None) -> str:
    return PostProcessor(config).process(commands)
