from marlin_post.config import PostConfig
from marlin_post.errors import InvalidConfiguration, PostError, UnsupportedFeature
from marlin_post.groups import Unit, WorkPlane
from marlin_post.post import PostProcessor, post_process
from marlin_post.section import BoundingBox, CuttingMode, Section, SectionKind
from marlin_post.tool import Tool

METRIC = Unit.METRIC
IMPERIAL = Unit.IMPERIAL

__all__ = [
    "PostProcessor",
    "post_process",
    "PostConfig",
    "Tool",
    "Section",
    "SectionKind",
    "CuttingMode",
    "BoundingBox",
    "WorkPlane",
    "PostError",
    "UnsupportedFeature",
    "InvalidConfiguration",
    "METRIC",
    "IMPERIAL",
]
