from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

from cutscene_importer.instruction_definitions.entities.color import Color


class ParameterBase(BaseModel):
    """Fields shared by every instruction parameter."""

    id: str = ""  # Identifies the parameter within its definition
    display_name: str = ""
    description: str = ""
    model_config = ConfigDict(frozen=True, from_attributes=True)


class BoolParameter(ParameterBase):
    kind: Literal["bool"] = "bool"
    default_value: bool = False


class IntParameter(ParameterBase):
    kind: Literal["int"] = "int"
    default_value: int = 0


class IntSliderParameter(ParameterBase):
    kind: Literal["int_slider"] = "int_slider"
    default_value: int = 0
    min_value: int = 0
    max_value: int = 0


class FloatParameter(ParameterBase):
    kind: Literal["float"] = "float"
    default_value: float = 0.0


class FloatSliderParameter(ParameterBase):
    kind: Literal["float_slider"] = "float_slider"
    default_value: float = 0.0
    min_value: float = 0.0
    max_value: float = 0.0


class LineParameter(ParameterBase):
    kind: Literal["line"] = "line"
    default_value: str = ""


class MultilineParameter(ParameterBase):
    kind: Literal["multiline"] = "multiline"
    default_value: str = ""


class ColorParameter(ParameterBase):
    kind: Literal["color"] = "color"
    default_value: Color = Field(default_factory=Color)


class OutputParameter(ParameterBase):
    """An extra output port; its label may be taken from another argument."""

    kind: Literal["output"] = "output"
    use_argument_as_label: str = ""


Parameter = Annotated[
    BoolParameter
    | IntParameter
    | IntSliderParameter
    | FloatParameter
    | FloatSliderParameter
    | LineParameter
    | MultilineParameter
    | ColorParameter
    | OutputParameter,
    Field(discriminator="kind"),
]
