from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from cutscene_importer.instruction_definitions.entities.compile_rule import CompileRule
from cutscene_importer.instruction_definitions.entities.editor_node_info import EditorNodeInfo
from cutscene_importer.instruction_definitions.entities.image_resource import ImageResource
from cutscene_importer.instruction_definitions.entities.parameter import Parameter


class InstructionDefinition(BaseModel):
    """Represents one imported instruction definition file."""

    opcode: str = ""  # Unique identifier of the instruction
    parameters: tuple[Parameter, ...] = ()  # In argument order
    implementation: str = ""  # Normalized source of the instruction body
    icon: ImageResource | None = None
    display_name: str = ""
    description: str = ""
    category: str = ""
    editor_node_info: EditorNodeInfo = Field(default_factory=EditorNodeInfo)
    hide_default_output: bool = False
    preview_terms: tuple[Any, ...] = ()
    compile_rules: tuple[CompileRule, ...] = ()
    model_config = ConfigDict(frozen=True, from_attributes=True)

    def get_parameter(self, parameter_id: str) -> Parameter | None:
        """Return the first parameter with the given id, or None."""
        for parameter in self.parameters:
            if parameter.id == parameter_id:
                return parameter
        return None


@dataclass
class InstructionDefinitionArgs:
    """Mutable accumulator filled while walking a definition document."""

    opcode: str = ""
    parameters: list[Parameter] = field(default_factory=list)
    implementation: str = ""
    icon: ImageResource | None = None
    display_name: str = ""
    description: str = ""
    category: str = ""
    editor_node_info: EditorNodeInfo = field(default_factory=EditorNodeInfo)
    hide_default_output: bool = False
    preview_terms: list[Any] = field(default_factory=list)
    compile_rules: list[CompileRule] = field(default_factory=list)

    def build(self) -> InstructionDefinition:
        return InstructionDefinition(
            opcode=self.opcode,
            parameters=tuple(self.parameters),
            implementation=self.implementation,
            icon=self.icon,
            display_name=self.display_name,
            description=self.description,
            category=self.category,
            editor_node_info=self.editor_node_info,
            hide_default_output=self.hide_default_output,
            preview_terms=tuple(self.preview_terms),
            compile_rules=tuple(self.compile_rules),
        )
