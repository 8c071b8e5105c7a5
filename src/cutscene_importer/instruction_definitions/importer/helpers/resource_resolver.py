"""Resolution of icon references in definition files to loaded images."""

import os
import struct
from pathlib import Path

from PIL import Image

from cutscene_importer.instruction_definitions.config import ImporterConfig, get_config
from cutscene_importer.instruction_definitions.entities.image_resource import ImageResource

RES_ROOT = "res://"
USER_ROOT = "user://"


def is_virtual_path(path: str) -> bool:
    return path.startswith((RES_ROOT, USER_ROOT))


def globalize_path(path: str | Path, config: ImporterConfig | None = None) -> Path:
    """Map res:// and user:// paths onto the filesystem and make the result absolute."""
    path = str(path)
    if path.startswith(RES_ROOT):
        config = config or get_config()
        return Path(config.project_root, path[len(RES_ROOT):]).resolve()
    if path.startswith(USER_ROOT):
        config = config or get_config()
        return Path(config.user_dir, path[len(USER_ROOT):]).resolve()
    return Path(os.path.abspath(path))


def load_texture(folder_path: str | Path, local_path: str, config: ImporterConfig | None = None) -> ImageResource | None:
    """Load the image at `local_path`, relative to `folder_path` unless it is a virtual path.

    Returns None when the file is missing or cannot be decoded.
    """
    local_path = local_path.strip()
    if not local_path:
        return None

    if is_virtual_path(local_path):
        global_path = globalize_path(local_path, config)
        resource_path = local_path
    else:
        global_path = Path(folder_path, local_path)
        resource_path = str(global_path)

    try:
        with Image.open(global_path) as image:
            rgba = image.convert("RGBA")
    except (OSError, ValueError, SyntaxError, EOFError, struct.error, Image.DecompressionBombError):
        return None

    return ImageResource(resource_path=resource_path, width=rgba.width, height=rgba.height, image=rgba)
