# -----------------------------------------------------------------------------
# Element and attribute names of the instruction definition XML format
# -----------------------------------------------------------------------------
# flake8: noqa: E221

ID                      = "id"

# Definition metadata
OPCODE                  = "opcode"
IMPLEMENTATION          = "implementation"
ICON                    = "icon"
DISPLAY_NAME            = "displayName"
DESCRIPTION             = "description"
CATEGORY                = "category"
HIDE_DEFAULT_OUTPUT     = "hideDefaultOutput"

# Parameters
BOOL_PARAMETER          = "boolParameter"
INT_PARAMETER           = "intParameter"
INT_SLIDER_PARAMETER    = "intSliderParameter"
FLOAT_PARAMETER         = "floatParameter"
FLOAT_SLIDER_PARAMETER  = "floatSliderParameter"
LINE_PARAMETER          = "lineParameter"
MULTILINE_PARAMETER     = "multilineParameter"
COLOR_PARAMETER         = "colorParameter"
OUTPUT_PARAMETER        = "outputParameter"

DEFAULT_VALUE           = "defaultValue"
MIN_VALUE               = "minValue"
MAX_VALUE               = "maxValue"
USE_ARGUMENT_AS_LABEL   = "useArgumentAsLabel"

# Editor node info
EDITOR_NODE_INFO        = "editorNodeInfo"
PRIORITY                = "priority"
MIN_WIDTH               = "minWidth"
MAIN_COLOR              = "mainColor"
TEXT_COLOR              = "textColor"

# Preview terms
TEXT_TERM               = "textTerm"
ARGUMENT_TERM           = "argumentTerm"
COMPILE_RULE_TERM       = "compileRuleTerm"

# Compile rules
OPTION_RULE             = "optionRule"
CHOICE_RULE             = "choiceRule"
TUPLE_RULE              = "tupleRule"
LIST_RULE               = "listRule"
PRE_INSTRUCTION         = "preInstruction"

START_ENABLED           = "startEnabled"
START_SELECTED          = "startSelected"
PREVIEW_SEPARATOR       = "previewSeparator"
ADD_BUTTON_TEXT         = "addButtonText"

PARAMETER_TAGS = frozenset({
    BOOL_PARAMETER,
    INT_PARAMETER,
    INT_SLIDER_PARAMETER,
    FLOAT_PARAMETER,
    FLOAT_SLIDER_PARAMETER,
    LINE_PARAMETER,
    MULTILINE_PARAMETER,
    COLOR_PARAMETER,
    OUTPUT_PARAMETER,
})

RULE_TAGS = frozenset({OPTION_RULE, CHOICE_RULE, TUPLE_RULE, LIST_RULE})

PREVIEW_TERM_TAGS = frozenset({TEXT_TERM, ARGUMENT_TERM, COMPILE_RULE_TERM})

# Children of a rule element that belong to the rule itself, not to a nested rule
RULE_FIELD_TAGS = frozenset({DISPLAY_NAME, DESCRIPTION, PREVIEW_SEPARATOR, ADD_BUTTON_TEXT, START_ENABLED, START_SELECTED})
