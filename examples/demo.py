import cadquery as cq

from marlin_post import BoundingBox, CuttingMode, PostConfig, Section, SectionKind, Tool, post_process
from marlin_post.command import (
    Circular,
    CloseJob,
    CloseSection,
    Linear,
    OpenJob,
    OpenSection,
    Parameter,
    Power,
    Rapid,
)

plate = cq.Workplane().rect(40, 20).extrude(3)
outline = plate.faces(">Z").wires().val()
hole_radius = 4

laser = Tool(1, type="laser", description="5W diode")
bb = outline.BoundingBox()
box = BoundingBox(bb.xmin, bb.xmax, bb.ymin, bb.ymax, 0, 0)

commands = [
    OpenJob(program_name="plate", program_comment="Laser demo", tools=(laser,)),
    Parameter("generated-by", "marlin-post demo"),
    OpenSection(Section(laser, kind=SectionKind.JET, cutting_mode=CuttingMode.ETCH,
                        bounding_box=box, comment="Hole")),
    Rapid.abs(x=hole_radius, y=0),
    Power(True),
    Circular.abs(False, cx=0, cy=0, x=hole_radius, y=0, feed=600),
    Power(False),
    CloseSection(),
    OpenSection(Section(laser, kind=SectionKind.JET, cutting_mode=CuttingMode.THROUGH,
                        bounding_box=box, comment="Outline")),
]

vertices = [v.toTuple() for v in outline.Vertices()]
commands.append(Rapid.abs(*vertices[0][:2]))
commands.append(Power(True))
for x, y, _ in vertices[1:] + vertices[:1]:
    commands.append(Linear.abs(x, y, feed=300))
commands += [Power(False), CloseSection(), CloseJob()]

if __name__ == "temp" or __name__ == "__main__":
    print(post_process(commands, PostConfig(travel_speed_xy=3000)))
    if __name__ == "temp":
        show_object(plate)
