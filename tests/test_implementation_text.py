from cutscene_importer.instruction_definitions.importer.helpers.implementation_text import process_implementation


def test_strips_blank_lines_and_indentation():
    assert process_implementation("\r\n\r\n  line1\r\n  line2\r\n") == "line1\nline2\n"


def test_converts_lone_carriage_returns():
    assert process_implementation("a\rb\r") == "a\nb\n"


def test_keeps_deeper_indentation():
    code = "\n    if x:\n        y()\n    z()"
    assert process_implementation(code) == "if x:\n    y()\nz()"


def test_unindented_text_is_unchanged():
    assert process_implementation("a\n  b\n") == "a\n  b\n"


def test_first_line_indentation_drives_the_result():
    # Lines indented less than the first keep their own indentation
    assert process_implementation("    a\n  b\n    c") == "a\n  b\nc"


def test_empty_text():
    assert process_implementation("") == ""
    assert process_implementation("\r\n\n") == ""
