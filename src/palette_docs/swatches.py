import contextlib
import io
import logging
from pathlib import Path
from typing import Mapping

import numpy as np
from PIL import Image

from .colors import hex_to_rgb
from .errors import ColorFormatError, DirectoryError, SwatchWriteError
from .roles import Role, present_roles

logger = logging.getLogger(__name__)

SWATCH_SIZE = 23
SWATCH_RADIUS = 11
OUTPUT_DIR = Path("assets/palette/circles")


# ------------------------------------------------------------
# Rasterization
# ------------------------------------------------------------


def disk_mask(size: int = SWATCH_SIZE, radius: int = SWATCH_RADIUS) -> np.ndarray:
    """
    Boolean mask of pixels with dx^2 + dy^2 <= radius^2 around the centre.
    """
    c = size // 2
    yy, xx = np.ogrid[:size, :size]
    return (xx - c) ** 2 + (yy - c) ** 2 <= radius * radius


def swatch_image(rgb: tuple[int, int, int]) -> Image.Image:
    """
    Opaque filled circle of `rgb` on a fully transparent 23x23 canvas.
    """
    pixels = np.zeros((SWATCH_SIZE, SWATCH_SIZE, 4), dtype=np.uint8)
    pixels[disk_mask()] = (*rgb, 255)
    return Image.fromarray(pixels)


def swatch_filename(palette_name: str, role: Role) -> str:
    return f"{palette_name}-{role.slug}.png"


def swatch_path(palette_name: str, role: Role, out_dir: Path = OUTPUT_DIR) -> Path:
    return Path(out_dir) / swatch_filename(palette_name, role)


# ------------------------------------------------------------
# Output
# ------------------------------------------------------------


def write_swatch(img: Image.Image, path: Path):
    """
    Encode to PNG in memory, then write. A failed write leaves no file behind.
    """
    buf = io.BytesIO()
    try:
        img.save(buf, format="PNG")
    except (OSError, ValueError) as e:
        raise SwatchWriteError(f"failed to encode PNG for {path}: {e}") from e

    try:
        path.write_bytes(buf.getvalue())
    except OSError as e:
        with contextlib.suppress(OSError):
            path.unlink(missing_ok=True)
        raise SwatchWriteError(f"failed to write {path}: {e}") from e


def render_swatches(
    palette_name: str,
    colors: Mapping[str, str],
    out_dir: Path = OUTPUT_DIR,
) -> list[Path]:
    """
    Write one circle swatch per present role. Bad colors and failed writes
    are logged and skipped; returns the paths written, in role order.
    """
    out_dir = Path(out_dir)
    try:
        out_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise DirectoryError(f"failed to create output directory {out_dir}: {e}") from e

    written = []

    for role, hex_color in present_roles(colors):
        try:
            rgb = hex_to_rgb(hex_color)
        except ColorFormatError as e:
            logger.warning("%s/%s: %s, skipping", palette_name, role.label, e)
            continue

        path = swatch_path(palette_name, role, out_dir)
        try:
            write_swatch(swatch_image(rgb), path)
        except SwatchWriteError as e:
            logger.warning("%s", e)
            continue

        written.append(path)

    return written
