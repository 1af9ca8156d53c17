"""
Post properties are resolved once before the job starts and stay fixed for the whole job.

Cutter and tool change codes are opaque strings: they are written to the program exactly as
configured, never parsed. Speeds are in mm/min and positions in mm regardless of the job units.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Mapping

from marlin_post.errors import InvalidConfiguration
from marlin_post.section import CuttingMode

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PostConfig:
    # Header
    write_machine: bool = True
    write_tools: bool = True
    use_g28: bool = False

    # Blocks
    show_sequence_numbers: bool = False
    sequence_number_start: int = 10
    sequence_number_increment: int = 1
    separate_words_with_space: bool = True

    # Jet cutting
    cutter_on_through: str = "M106 S200"
    cutter_on_etch: str = "M106 S100"
    cutter_on_vaporize: str = "M106 S255"
    cutter_off: str = "M107"

    # Motion
    travel_speed_xy: float = 2500
    travel_speed_z: float = 300
    tolerance: float = 0.01

    # Start / finish
    set_origin_on_start: bool = True
    go_origin_on_finish: bool = True
    go_home_on_finish: bool = False
    disable_motors_on_finish: bool = True

    # Tool change and probing
    tool_change_enabled: bool = True
    tool_change_x: float = 0
    tool_change_y: float = 0
    tool_change_z: float = 40
    tool_change_z_probe: bool = False
    probe_on_start: bool = False
    tool_change_file: str | None = None

    @classmethod
    def from_dict(cls, properties: Mapping[str, Any]) -> PostConfig:
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(properties) - known)
        if unknown:
            raise InvalidConfiguration(f"Unknown post properties: {', '.join(unknown)}")
        return cls(**properties)

    @property
    def word_separator(self) -> str:
        return " " if self.separate_words_with_space else ""

    @property
    def first_sequence_number(self) -> int | None:
        return self.sequence_number_start if self.show_sequence_numbers else None

    def cutter_on(self, mode: CuttingMode) -> str:
        return {
            CuttingMode.THROUGH: self.cutter_on_through,
            CuttingMode.ETCH: self.cutter_on_etch,
            CuttingMode.VAPORIZE: self.cutter_on_vaporize,
        }[mode]

    def load_tool_change_code(self) -> list[str] | None:
        """Lines of the external tool change file, or None to use the built-in sequence"""
        if not self.tool_change_file:
            return None

        path = Path(self.tool_change_file)
        try:
            lines = path.read_text().splitlines()
        except OSError as ex:
            raise InvalidConfiguration(
                f"Unable to read tool change file {path}: {ex}"
            ) from ex

        logger.debug("Loaded %d lines of tool change code from %s", len(lines), path)
        return lines
