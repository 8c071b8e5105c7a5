"""Recursive-descent parser for compile rule elements.

Each rule element may nest further rule elements. Children that hold the
rule's own fields (displayName, description, previewSeparator, addButtonText,
startEnabled, startSelected) are skipped when collecting nested rules.
"""

from pathlib import Path

from cutscene_importer.instruction_definitions.config import DEFAULT_MAX_RULE_DEPTH
from cutscene_importer.instruction_definitions.entities.compile_rule import (
    ChoiceRule,
    CompileRule,
    ListRule,
    OptionRule,
    PreInstruction,
    TupleRule,
)
from cutscene_importer.instruction_definitions.errors import NotACompileRuleError, RuleNestingTooDeepError
from cutscene_importer.instruction_definitions.importer import keywords
from cutscene_importer.instruction_definitions.importer.document import Element
from cutscene_importer.instruction_definitions.importer.helpers.field_accessors import (
    get_bool_child,
    get_id,
    get_int_child,
    get_string_child,
)


def parse_compile_rule(
    element: Element,
    depth: int = 1,
    max_depth: int = DEFAULT_MAX_RULE_DEPTH,
    file_path: str | Path | None = None,
) -> CompileRule | None:
    """Parse one element as a compile rule.

    Returns None for rule field elements. Raises NotACompileRuleError for any
    other name that is not a rule, and RuleNestingTooDeepError once `depth`
    exceeds `max_depth`.
    """
    if element.name in keywords.RULE_FIELD_TAGS:
        return None

    parser = _RULE_PARSERS.get(element.name)
    if parser is None:
        raise NotACompileRuleError(element.name, file_path)
    if depth > max_depth:
        raise RuleNestingTooDeepError(depth, max_depth, file_path)
    return parser(element, depth, max_depth, file_path)


def _parse_children(element: Element, depth: int, max_depth: int, file_path: str | Path | None) -> list[CompileRule]:
    parsed = (parse_compile_rule(child, depth + 1, max_depth, file_path) for child in element.children)
    return [rule for rule in parsed if rule is not None]


def _last_child_rule(element: Element, depth: int, max_depth: int, file_path: str | Path | None) -> CompileRule | None:
    # Only the last nested rule is kept
    rules = _parse_children(element, depth, max_depth, file_path)
    return rules[-1] if rules else None


def parse_pre_instruction(
    element: Element, depth: int = 1, max_depth: int = DEFAULT_MAX_RULE_DEPTH, file_path: str | Path | None = None
) -> PreInstruction:
    return PreInstruction(
        id=get_id(element),
        display_name=get_string_child(element, keywords.DISPLAY_NAME),
        description=get_string_child(element, keywords.DESCRIPTION),
        opcode=get_string_child(element, keywords.OPCODE),
    )


def parse_option(
    element: Element, depth: int = 1, max_depth: int = DEFAULT_MAX_RULE_DEPTH, file_path: str | Path | None = None
) -> OptionRule:
    return OptionRule(
        id=get_id(element),
        display_name=get_string_child(element, keywords.DISPLAY_NAME),
        description=get_string_child(element, keywords.DESCRIPTION),
        target=_last_child_rule(element, depth, max_depth, file_path),
        start_enabled=get_bool_child(element, keywords.START_ENABLED),
    )


def parse_choice(
    element: Element, depth: int = 1, max_depth: int = DEFAULT_MAX_RULE_DEPTH, file_path: str | Path | None = None
) -> ChoiceRule:
    return ChoiceRule(
        id=get_id(element),
        display_name=get_string_child(element, keywords.DISPLAY_NAME),
        description=get_string_child(element, keywords.DESCRIPTION),
        targets=tuple(_parse_children(element, depth, max_depth, file_path)),
        start_selected=get_int_child(element, keywords.START_SELECTED),
    )


def parse_tuple(
    element: Element, depth: int = 1, max_depth: int = DEFAULT_MAX_RULE_DEPTH, file_path: str | Path | None = None
) -> TupleRule:
    return TupleRule(
        id=get_id(element),
        display_name=get_string_child(element, keywords.DISPLAY_NAME),
        description=get_string_child(element, keywords.DESCRIPTION),
        targets=tuple(_parse_children(element, depth, max_depth, file_path)),
        preview_separator=get_string_child(element, keywords.PREVIEW_SEPARATOR),
    )


def parse_list(
    element: Element, depth: int = 1, max_depth: int = DEFAULT_MAX_RULE_DEPTH, file_path: str | Path | None = None
) -> ListRule:
    return ListRule(
        id=get_id(element),
        display_name=get_string_child(element, keywords.DISPLAY_NAME),
        description=get_string_child(element, keywords.DESCRIPTION),
        target=_last_child_rule(element, depth, max_depth, file_path),
        add_button_text=get_string_child(element, keywords.ADD_BUTTON_TEXT),
        preview_separator=get_string_child(element, keywords.PREVIEW_SEPARATOR),
    )


_RULE_PARSERS = {
    keywords.OPTION_RULE: parse_option,
    keywords.CHOICE_RULE: parse_choice,
    keywords.TUPLE_RULE: parse_tuple,
    keywords.LIST_RULE: parse_list,
    keywords.PRE_INSTRUCTION: parse_pre_instruction,
}
