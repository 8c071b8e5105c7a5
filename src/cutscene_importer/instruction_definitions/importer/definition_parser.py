"""Top-level parser for instruction definition documents.

Walks the root element's children once, in document order, and fills an
InstructionDefinitionArgs that is frozen into an InstructionDefinition at the end.
"""

import logging
from collections.abc import Callable
from pathlib import Path

from cutscene_importer.instruction_definitions.config import ImporterConfig, get_config
from cutscene_importer.instruction_definitions.entities.editor_node_info import EditorNodeInfo
from cutscene_importer.instruction_definitions.entities.instruction_definition import (
    InstructionDefinition,
    InstructionDefinitionArgs,
)
from cutscene_importer.instruction_definitions.entities.parameter import (
    BoolParameter,
    ColorParameter,
    FloatParameter,
    FloatSliderParameter,
    IntParameter,
    IntSliderParameter,
    LineParameter,
    MultilineParameter,
    OutputParameter,
    Parameter,
)
from cutscene_importer.instruction_definitions.errors import ElementNotAllowedError
from cutscene_importer.instruction_definitions.importer import keywords
from cutscene_importer.instruction_definitions.importer.compile_rule_parser import parse_compile_rule
from cutscene_importer.instruction_definitions.importer.document import Element
from cutscene_importer.instruction_definitions.importer.helpers.field_accessors import (
    get_bool_child,
    get_color_child,
    get_float_child,
    get_id,
    get_int_child,
    get_string_child,
)
from cutscene_importer.instruction_definitions.importer.helpers.implementation_text import process_implementation
from cutscene_importer.instruction_definitions.importer.helpers.resource_resolver import load_texture

logger = logging.getLogger(__name__)


def _common_fields(element: Element) -> dict:
    return {
        "id": get_id(element),
        "display_name": get_string_child(element, keywords.DISPLAY_NAME),
        "description": get_string_child(element, keywords.DESCRIPTION),
    }


# ──────────────────────────────────────────────────────────────────────────────
def parse_parameter(element: Element) -> Parameter:
    """Build the parameter variant named by the element's tag."""
    builder = _PARAMETER_BUILDERS.get(element.name)
    if builder is None:
        raise ValueError(f"'{element.name}' is not a parameter element")
    return builder(element)


_PARAMETER_BUILDERS: dict[str, Callable[[Element], Parameter]] = {
    keywords.BOOL_PARAMETER: lambda e: BoolParameter(
        **_common_fields(e), default_value=get_bool_child(e, keywords.DEFAULT_VALUE)
    ),
    keywords.INT_PARAMETER: lambda e: IntParameter(
        **_common_fields(e), default_value=get_int_child(e, keywords.DEFAULT_VALUE)
    ),
    keywords.INT_SLIDER_PARAMETER: lambda e: IntSliderParameter(
        **_common_fields(e),
        default_value=get_int_child(e, keywords.DEFAULT_VALUE),
        min_value=get_int_child(e, keywords.MIN_VALUE),
        max_value=get_int_child(e, keywords.MAX_VALUE),
    ),
    keywords.FLOAT_PARAMETER: lambda e: FloatParameter(
        **_common_fields(e), default_value=get_float_child(e, keywords.DEFAULT_VALUE)
    ),
    keywords.FLOAT_SLIDER_PARAMETER: lambda e: FloatSliderParameter(
        **_common_fields(e),
        default_value=get_float_child(e, keywords.DEFAULT_VALUE),
        min_value=get_float_child(e, keywords.MIN_VALUE),
        max_value=get_float_child(e, keywords.MAX_VALUE),
    ),
    keywords.LINE_PARAMETER: lambda e: LineParameter(
        **_common_fields(e), default_value=get_string_child(e, keywords.DEFAULT_VALUE)
    ),
    keywords.MULTILINE_PARAMETER: lambda e: MultilineParameter(
        **_common_fields(e), default_value=get_string_child(e, keywords.DEFAULT_VALUE)
    ),
    keywords.COLOR_PARAMETER: lambda e: ColorParameter(
        **_common_fields(e), default_value=get_color_child(e, keywords.DEFAULT_VALUE)
    ),
    keywords.OUTPUT_PARAMETER: lambda e: OutputParameter(
        **_common_fields(e), use_argument_as_label=get_string_child(e, keywords.USE_ARGUMENT_AS_LABEL)
    ),
}


# ──────────────────────────────────────────────────────────────────────────────
def parse_editor_node_info(element: Element) -> EditorNodeInfo:
    """Read editor node styling; each missing field keeps EditorNodeInfo's default."""
    defaults = EditorNodeInfo()
    return EditorNodeInfo(
        priority=get_int_child(element, keywords.PRIORITY, defaults.priority),
        min_width=get_int_child(element, keywords.MIN_WIDTH, defaults.min_width),
        main_color=get_color_child(element, keywords.MAIN_COLOR, defaults.main_color),
        text_color=get_color_child(element, keywords.TEXT_COLOR, defaults.text_color),
    )


# ──────────────────────────────────────────────────────────────────────────────
def parse_definition(
    root: Element,
    folder_path: str | Path,
    file_path: str | Path | None = None,
    config: ImporterConfig | None = None,
) -> InstructionDefinition:
    """Parse a definition document's root element into an InstructionDefinition.

    Args:
      root: the document's root element.
      folder_path: folder containing the document; icons resolve against it.
      file_path: the document's path, used in error messages only.
      config: importer settings (defaults to the global config).

    Raises:
      ElementNotAllowedError: a root child has a name outside the vocabulary.
      NotACompileRuleError: a rule contains an element that is not a rule.
      RuleNestingTooDeepError: rules are nested deeper than config.max_rule_depth.

    """
    config = config or get_config()
    args = InstructionDefinitionArgs()

    for element in root.children:
        name = element.name

        if name == keywords.OPCODE:
            args.opcode = element.inner_text
        elif name in keywords.PARAMETER_TAGS:
            args.parameters.append(parse_parameter(element))
        elif name == keywords.IMPLEMENTATION:
            args.implementation = process_implementation(element.inner_text)
        elif name == keywords.ICON:
            args.icon = load_texture(folder_path, element.inner_text, config)
        elif name == keywords.DISPLAY_NAME:
            args.display_name = element.inner_text
        elif name == keywords.DESCRIPTION:
            args.description = element.inner_text
        elif name == keywords.CATEGORY:
            args.category = element.inner_text
        elif name == keywords.EDITOR_NODE_INFO:
            args.editor_node_info = parse_editor_node_info(element)
        elif name == keywords.HIDE_DEFAULT_OUTPUT:
            args.hide_default_output = True
        elif name in keywords.PREVIEW_TERM_TAGS:
            # Recognized, but preview terms are not read from the document
            continue
        elif name in keywords.RULE_TAGS:
            rule = parse_compile_rule(element, max_depth=config.max_rule_depth, file_path=file_path)
            if rule is not None:
                args.compile_rules.append(rule)
        else:
            raise ElementNotAllowedError(name, file_path)

    return args.build()
