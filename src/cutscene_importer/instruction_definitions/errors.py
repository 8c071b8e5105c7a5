"""Exceptions raised when an instruction definition cannot be imported.

Only structural problems are errors. Missing or malformed optional fields fall
back to their defaults and never raise.
"""

from pathlib import Path


class InstructionImportError(Exception):
    """Base exception for all instruction definition import failures.

    Attributes:
        message: Human-readable error message
        file_path: Definition file being imported, if known
    """

    def __init__(self, message: str, file_path: str | Path | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.file_path = str(file_path) if file_path is not None else None

    def __str__(self) -> str:
        if self.file_path:
            return f"{self.message} (in instruction definition file '{self.file_path}')"
        return self.message


class DocumentReadError(InstructionImportError):
    """The definition file is missing, unreadable or not well-formed XML."""


class ElementNotAllowedError(InstructionImportError):
    """A top-level element name is not part of the definition vocabulary."""

    def __init__(self, tag: str, file_path: str | Path | None = None) -> None:
        super().__init__(f"Encountered XML element with name '{tag}'. This name is not allowed.", file_path)
        self.tag = tag


class NotACompileRuleError(InstructionImportError):
    """An element was parsed as a compile rule but its name is not a rule."""

    def __init__(self, tag: str, file_path: str | Path | None = None) -> None:
        super().__init__(
            f"Tried to parse XML element '{tag}' as a compile rule, but the name does not represent a compile rule.",
            file_path,
        )
        self.tag = tag


class RuleNestingTooDeepError(InstructionImportError):
    """Compile rules are nested deeper than the configured maximum."""

    def __init__(self, depth: int, max_depth: int, file_path: str | Path | None = None) -> None:
        super().__init__(f"Compile rules nested {depth} levels deep; the maximum is {max_depth}.", file_path)
        self.depth = depth
        self.max_depth = max_depth


class DuplicateOpcodeError(InstructionImportError):
    """Two instruction definitions share one opcode."""

    def __init__(self, opcode: str, file_path: str | Path | None = None) -> None:
        super().__init__(f"An instruction definition with opcode '{opcode}' is already registered.", file_path)
        self.opcode = opcode
