from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ImageResource(BaseModel):
    """A decoded image usable as an instruction icon."""

    resource_path: str  # Filesystem path, or the res:// / user:// path it was referenced by
    width: int
    height: int
    image: Any = Field(default=None, repr=False, exclude=True)  # PIL.Image.Image in RGBA mode
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)
