"""Registry of imported instruction definitions, keyed by opcode."""

import logging
from collections.abc import Iterator
from pathlib import Path

from cutscene_importer.instruction_definitions.config import ImporterConfig, get_config
from cutscene_importer.instruction_definitions.entities.instruction_definition import InstructionDefinition
from cutscene_importer.instruction_definitions.errors import DuplicateOpcodeError
from cutscene_importer.instruction_definitions.importer.importer import import_definition

logger = logging.getLogger(__name__)


class InstructionDefinitionRepository:
    """Owns a set of instruction definitions and keeps their opcodes unique."""

    def __init__(self, config: ImporterConfig | None = None):
        self.config = config or get_config()
        self._definitions: dict[str, InstructionDefinition] = {}

    def register(self, definition: InstructionDefinition, file_path: str | Path | None = None) -> None:
        if definition.opcode in self._definitions:
            raise DuplicateOpcodeError(definition.opcode, file_path)
        self._definitions[definition.opcode] = definition

    def load_file(self, file_path: str | Path) -> InstructionDefinition:
        definition = import_definition(file_path, config=self.config)
        self.register(definition, file_path)
        return definition

    def load_folder(self, folder_path: str | Path, pattern: str | None = None) -> list[InstructionDefinition]:
        """Import every definition file in a folder, in sorted file name order.

        Args:
            folder_path: Folder to scan (not recursive)
            pattern: Glob pattern for definition files, config.definition_glob by default

        Returns:
            The definitions loaded from this folder

        Nothing is registered unless every file imports and no opcode clashes.
        """
        pattern = pattern or self.config.definition_glob
        files = sorted(p for p in Path(folder_path).glob(pattern) if p.is_file())
        imported = [(file_path, import_definition(file_path, config=self.config)) for file_path in files]

        seen = set(self._definitions)
        for file_path, definition in imported:
            if definition.opcode in seen:
                raise DuplicateOpcodeError(definition.opcode, file_path)
            seen.add(definition.opcode)

        loaded = [definition for _, definition in imported]
        for definition in loaded:
            self._definitions[definition.opcode] = definition
        logger.info("Loaded %d instruction definitions from %s", len(loaded), folder_path)
        return loaded

    def get(self, opcode: str) -> InstructionDefinition | None:
        return self._definitions.get(opcode)

    def opcodes(self) -> list[str]:
        return list(self._definitions)

    def __contains__(self, opcode: object) -> bool:
        return opcode in self._definitions

    def __iter__(self) -> Iterator[InstructionDefinition]:
        return iter(self._definitions.values())

    def __len__(self) -> int:
        return len(self._definitions)
