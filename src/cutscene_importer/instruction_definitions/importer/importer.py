# cutscene_importer/instruction_definitions/importer/importer.py

import logging
from pathlib import Path
from typing import Any

from cutscene_importer.instruction_definitions.config import ImporterConfig, get_config
from cutscene_importer.instruction_definitions.entities.instruction_definition import InstructionDefinition
from cutscene_importer.instruction_definitions.errors import InstructionImportError
from cutscene_importer.instruction_definitions.importer.definition_parser import parse_definition
from cutscene_importer.instruction_definitions.importer.document import load_document
from cutscene_importer.instruction_definitions.importer.helpers.resource_resolver import globalize_path

logger = logging.getLogger(__name__)


def import_definition(
    file_path: str | Path,
    import_options: dict[str, Any] | None = None,
    config: ImporterConfig | None = None,
) -> InstructionDefinition:
    """Entrypoint: load an instruction definition from an XML file.

    `file_path` may be a filesystem path or a res:// / user:// path. Icons
    referenced by the document are resolved against the file's folder.
    `import_options` is accepted for host importer compatibility and ignored.

    Raises:
      InstructionImportError: the file cannot be read or is not a valid definition.

    """
    config = config or get_config()
    global_path = globalize_path(file_path, config)
    folder_path = global_path.parent

    logger.debug("Importing instruction definition from %s", global_path)
    try:
        document = load_document(global_path)
        definition = parse_definition(document, folder_path, file_path=global_path, config=config)
    except InstructionImportError as e:
        logger.error("Failed to import instruction definition: %s", e)
        raise

    logger.info(
        "Imported instruction '%s' from %s (%d parameters, %d compile rules)",
        definition.opcode,
        global_path,
        len(definition.parameters),
        len(definition.compile_rules),
    )
    return definition
