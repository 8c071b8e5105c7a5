"""Import XML instruction definition files into typed, immutable definitions."""

from cutscene_importer.instruction_definitions.entities.instruction_definition import InstructionDefinition
from cutscene_importer.instruction_definitions.importer.importer import import_definition

__all__ = ["InstructionDefinition", "import_definition"]
