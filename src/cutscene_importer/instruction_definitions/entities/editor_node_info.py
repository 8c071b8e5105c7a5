from pydantic import BaseModel, ConfigDict, Field

from cutscene_importer.instruction_definitions.entities.color import Color


class EditorNodeInfo(BaseModel):
    """Styling of an instruction's node in the node-based cutscene editor."""

    priority: int = 0  # Sort priority among nodes of the same category
    min_width: int = 128  # Minimum node width in pixels
    main_color: Color = Field(default_factory=lambda: Color(r=0.5, g=0.5, b=0.5, a=1.0))
    text_color: Color = Field(default_factory=lambda: Color(r=1.0, g=1.0, b=1.0, a=1.0))
    model_config = ConfigDict(frozen=True, from_attributes=True)
