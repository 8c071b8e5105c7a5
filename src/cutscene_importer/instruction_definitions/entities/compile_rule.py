from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field


class CompileRuleBase(BaseModel):
    """Fields shared by every compile rule."""

    id: str = ""
    display_name: str = ""
    description: str = ""
    model_config = ConfigDict(frozen=True, from_attributes=True)


class OptionRule(CompileRuleBase):
    """A rule that can be toggled on or off."""

    kind: Literal["option"] = "option"
    target: CompileRule | None = None
    start_enabled: bool = False


class ChoiceRule(CompileRuleBase):
    """Mutually exclusive alternatives."""

    kind: Literal["choice"] = "choice"
    targets: tuple[CompileRule, ...] = ()
    start_selected: int = 0


class TupleRule(CompileRuleBase):
    """A fixed group of rules that are always all present."""

    kind: Literal["tuple"] = "tuple"
    targets: tuple[CompileRule, ...] = ()
    preview_separator: str = ""


class ListRule(CompileRuleBase):
    """A variable-length repetition of one template rule."""

    kind: Literal["list"] = "list"
    target: CompileRule | None = None
    add_button_text: str = ""
    preview_separator: str = ""


class PreInstruction(CompileRuleBase):
    """Invokes the instruction with the given opcode before the current one."""

    kind: Literal["pre_instruction"] = "pre_instruction"
    opcode: str = ""


CompileRule = Annotated[
    OptionRule | ChoiceRule | TupleRule | ListRule | PreInstruction,
    Field(discriminator="kind"),
]


# Resolve the recursive CompileRule references
OptionRule.model_rebuild()
ChoiceRule.model_rebuild()
TupleRule.model_rebuild()
ListRule.model_rebuild()
PreInstruction.model_rebuild()
