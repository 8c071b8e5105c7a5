import pytest

from cutscene_importer.instruction_definitions.entities.compile_rule import (
    ChoiceRule,
    ListRule,
    OptionRule,
    PreInstruction,
    TupleRule,
)
from cutscene_importer.instruction_definitions.errors import NotACompileRuleError, RuleNestingTooDeepError
from cutscene_importer.instruction_definitions.importer.compile_rule_parser import parse_compile_rule
from cutscene_importer.instruction_definitions.importer.document import parse_document


def parse(xml: str, **kwargs):
    return parse_compile_rule(parse_document(xml), **kwargs)


@pytest.mark.parametrize("tag", ["displayName", "description", "previewSeparator", "addButtonText"])
def test_rule_field_elements_are_not_rules(tag):
    assert parse(f"<{tag}>text</{tag}>") is None


def test_unknown_tag_raises_naming_the_tag():
    with pytest.raises(NotACompileRuleError) as exc_info:
        parse("<boolParameter/>")
    assert exc_info.value.tag == "boolParameter"
    assert "boolParameter" in str(exc_info.value)


def test_unknown_nested_tag_raises():
    with pytest.raises(NotACompileRuleError, match="mystery"):
        parse("<tupleRule><optionRule><mystery/></optionRule></tupleRule>")


class TestOption:
    def test_fields_and_defaults(self):
        rule = parse('<optionRule id="opt"><displayName>Opt</displayName><description>Desc</description></optionRule>')
        assert rule == OptionRule(id="opt", display_name="Opt", description="Desc", target=None, start_enabled=False)

    def test_start_enabled(self):
        rule = parse("<optionRule><startEnabled>true</startEnabled></optionRule>")
        assert rule.start_enabled is True

    def test_keeps_last_nested_rule(self):
        rule = parse(
            "<optionRule>"
            '<tupleRule id="first"/>'
            '<choiceRule id="second"/>'
            "<displayName>x</displayName>"
            '<tupleRule id="third"/>'
            "</optionRule>"
        )
        assert isinstance(rule.target, TupleRule)
        assert rule.target.id == "third"


class TestChoice:
    def test_collects_all_nested_rules_in_order(self):
        rule = parse(
            '<choiceRule id="c">'
            '<optionRule id="a"/>'
            "<displayName>Pick one</displayName>"
            '<optionRule id="b"/>'
            "<startSelected>1</startSelected>"
            "</choiceRule>"
        )
        assert isinstance(rule, ChoiceRule)
        assert [t.id for t in rule.targets] == ["a", "b"]
        assert rule.display_name == "Pick one"
        assert rule.start_selected == 1

    def test_empty_choice(self):
        rule = parse("<choiceRule/>")
        assert rule.targets == ()
        assert rule.start_selected == 0


class TestTuple:
    def test_targets_and_separator(self):
        rule = parse(
            "<tupleRule>"
            "<previewSeparator>, </previewSeparator>"
            '<preInstruction id="p"><opcode>SETUP</opcode></preInstruction>'
            '<listRule id="l"/>'
            "</tupleRule>"
        )
        assert rule.preview_separator == ", "
        assert rule.targets == (PreInstruction(id="p", opcode="SETUP"), ListRule(id="l"))


class TestList:
    def test_fields_and_last_template(self):
        rule = parse(
            '<listRule id="items">'
            "<addButtonText>Add item</addButtonText>"
            "<previewSeparator>; </previewSeparator>"
            '<optionRule id="old"/>'
            '<optionRule id="template"><startEnabled>true</startEnabled></optionRule>'
            "</listRule>"
        )
        assert rule.add_button_text == "Add item"
        assert rule.preview_separator == "; "
        assert rule.target == OptionRule(id="template", start_enabled=True)

    def test_without_template(self):
        assert parse("<listRule/>").target is None


def test_pre_instruction_does_not_recurse():
    rule = parse(
        '<preInstruction id="pre"><opcode>FADE_IN</opcode><displayName>Fade</displayName><mystery/></preInstruction>'
    )
    assert rule == PreInstruction(id="pre", display_name="Fade", opcode="FADE_IN")


def test_deep_nesting_within_limit():
    xml = "<optionRule>" * 5 + "</optionRule>" * 5
    rule = parse(xml, max_depth=5)
    depth = 0
    while rule is not None:
        depth += 1
        rule = rule.target
    assert depth == 5


def test_nesting_past_limit_raises():
    xml = "<optionRule>" * 6 + "</optionRule>" * 6
    with pytest.raises(RuleNestingTooDeepError) as exc_info:
        parse(xml, max_depth=5)
    assert exc_info.value.depth == 6
