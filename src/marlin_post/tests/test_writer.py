from marlin_post.writer import BlockWriter, format_comment, single_line


def test_block_drops_empty_words():
    writer = BlockWriter()
    assert writer.write_block("G1", "", "X1.000", "")
    assert writer.lines == ["G1 X1.000"]


def test_empty_block_not_written():
    writer = BlockWriter()
    assert not writer.write_block("", "")
    assert writer.lines == []


def test_no_separator():
    writer = BlockWriter(separator="")
    writer.write_block("G1", "X1.000", "F100")
    assert writer.lines == ["G1X1.000F100"]


def test_sequence_numbers():
    writer = BlockWriter(sequence_number_start=10, sequence_number_increment=5)
    writer.write_block("G90")
    writer.write_block("")
    writer.write_comment("Units")
    writer.write_block("G21")
    writer.write_line("%")
    assert writer.lines == ["N10 G90", "; Units", "N15 G21", "%"]


def test_comment_strips_parentheses():
    assert format_comment("Pocket (rough)") == "; Pocket rough"


def test_empty_comment():
    assert format_comment("") == ";"


def test_to_gcode():
    writer = BlockWriter()
    writer.write_block("G90")
    writer.write_blank()
    assert writer.to_gcode() == "G90\n\n"


def test_comment_line_breaks():
    assert format_comment("note\nG28") == "; note G28"
    assert format_comment("first\r\nsecond\rthird") == "; first second third"


def test_single_line():
    assert single_line("Rough\nM84") == "Rough M84"
    assert single_line("Rough") == "Rough"
