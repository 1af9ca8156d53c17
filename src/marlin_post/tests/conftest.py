import pytest

from marlin_post.command import CloseJob, CloseSection, OpenJob, OpenSection
from marlin_post.config import PostConfig
from marlin_post.context import JobContext
from marlin_post.section import BoundingBox, Section
from marlin_post.tool import Tool


@pytest.fixture
def config():
    return PostConfig()


@pytest.fixture
def context(config):
    return JobContext(config)


@pytest.fixture
def tool_1():
    return Tool(1, diameter=3, description="3mm flat")


@pytest.fixture
def tool_2():
    return Tool(2, diameter=6, description="6mm flat")


@pytest.fixture
def bounding_box():
    return BoundingBox(0, 10, 0, 5, -1, 5)


@pytest.fixture
def milling_section(tool_1, bounding_box):
    return Section(tool_1, bounding_box=bounding_box)


@pytest.fixture
def make_job():
    """Wrap (section, body commands) pairs into a complete job"""

    def make_job(*sections, **kwargs):
        commands = [OpenJob(**kwargs)]
        for section, body in sections:
            commands += [OpenSection(section), *body, CloseSection()]
        commands.append(CloseJob())
        return commands

    return make_job
