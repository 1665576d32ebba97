from __future__ import annotations

from functools import lru_cache
import logging
from pathlib import Path

import numpy as np
from PIL import Image, ImageDraw, ImageFont

from chartlayout.config import DEFAULT_FONT_FAMILY, DEFAULT_LABELS_SIZE_PX
from chartlayout.raster.canvas import RGBA

LOGGER = logging.getLogger(__name__)

FONT_FALLBACK_PATTERNS = (
    "comicmono",
    "comic mono",
    "menlo",
    "monaco",
    "courier new",
    "dejavusansmono",
    "dejavu sans mono",
    "dejavusans",
    "liberationsans",
)
FONT_DIRS = (
    Path.home() / "Library" / "Fonts",
    Path("/Library/Fonts"),
    Path("/System/Library/Fonts"),
    Path("/System/Library/Fonts/Supplemental"),
    Path("/usr/share/fonts"),
    Path("/usr/local/share/fonts"),
)

Font = ImageFont.FreeTypeFont | ImageFont.ImageFont


def text_size(
    text: str,
    *,
    font_family: str = DEFAULT_FONT_FAMILY,
    font_size_px: float = DEFAULT_LABELS_SIZE_PX,
) -> tuple[int, int]:
    """Return the ink width and the line height of `text`."""
    font = load_font(font_family, font_size_px)
    height = line_height(font_family=font_family, font_size_px=font_size_px)
    if not text:
        return (0, height)
    left, _, right, _ = font.getbbox(text)
    return (max(0, int(right - left)), height)


def line_height(*, font_family: str = DEFAULT_FONT_FAMILY, font_size_px: float = DEFAULT_LABELS_SIZE_PX) -> int:
    font = load_font(font_family, font_size_px)
    if isinstance(font, ImageFont.FreeTypeFont):
        ascent, descent = font.getmetrics()
        return max(1, int(ascent + descent))
    _, top, _, bottom = font.getbbox("Ag")
    return max(1, int(bottom - top))


def draw_text(
    dst: np.ndarray,
    cx: float,
    baseline: float,
    text: str,
    color: RGBA,
    *,
    font_family: str = DEFAULT_FONT_FAMILY,
    font_size_px: float = DEFAULT_LABELS_SIZE_PX,
) -> None:
    """Draw `text` horizontally centred on `cx` with its bottom edge on `baseline`."""
    if not text:
        return
    font = load_font(font_family, font_size_px)
    mask = _render_mask(text, font)
    h, w = mask.shape
    x = int(round(cx - w / 2.0))
    y = int(round(baseline - h))
    _blend_mask(dst, x, y, mask, color)


def _blend_mask(dst: np.ndarray, x: int, y: int, mask: np.ndarray, color: RGBA) -> None:
    h, w = mask.shape
    x0 = max(0, x)
    y0 = max(0, y)
    x1 = min(dst.shape[1], x + w)
    y1 = min(dst.shape[0], y + h)
    if x1 <= x0 or y1 <= y0:
        return

    cov = mask[y0 - y : y1 - y, x0 - x : x1 - x].astype(np.float32) / 255.0
    src_alpha = (color[3] / 255.0) * cov
    if not np.any(src_alpha > 0):
        return

    patch = dst[y0:y1, x0:x1]
    dst_rgb = patch[:, :, :3].astype(np.float32)
    dst_alpha = patch[:, :, 3].astype(np.float32) / 255.0
    src_rgb = np.asarray(color[:3], dtype=np.float32).reshape(1, 1, 3)
    out_alpha = src_alpha + dst_alpha * (1.0 - src_alpha)
    out_rgb_num = src_rgb * src_alpha[:, :, None] + dst_rgb * dst_alpha[:, :, None] * (1.0 - src_alpha[:, :, None])
    safe_alpha = np.where(out_alpha > 1e-6, out_alpha, 1.0)

    patch[:, :, :3] = np.clip(out_rgb_num / safe_alpha[:, :, None], 0, 255).astype(np.uint8)
    patch[:, :, 3] = np.clip(out_alpha * 255.0, 0, 255).astype(np.uint8)


@lru_cache(maxsize=256)
def _render_mask(text: str, font: Font) -> np.ndarray:
    left, top, right, bottom = font.getbbox(text)
    width = max(1, int(right - left))
    height = max(1, int(bottom - top))
    image = Image.new("L", (width, height), 0)
    ImageDraw.Draw(image).text((-left, -top), text, fill=255, font=font)
    return np.asarray(image, dtype=np.uint8)


@lru_cache(maxsize=64)
def load_font(font_family: str, font_size_px: float) -> Font:
    size = max(1, int(round(font_size_px)))
    font_path = _resolve_font_path(font_family)
    if font_path is None:
        LOGGER.warning("no truetype font found for %r; using Pillow default font", font_family)
        return ImageFont.load_default()
    try:
        return ImageFont.truetype(str(font_path), size=size)
    except OSError as exc:
        LOGGER.warning("could not open font %s (%s); using Pillow default font", font_path, exc)
        return ImageFont.load_default()


@lru_cache(maxsize=16)
def _resolve_font_path(font_family: str) -> Path | None:
    wanted = font_family.strip().lower() or DEFAULT_FONT_FAMILY.lower()
    patterns = (wanted,) + FONT_FALLBACK_PATTERNS

    candidates: list[Path] = []
    for base in FONT_DIRS:
        if not base.exists():
            continue
        for ext in ("*.ttf", "*.otf", "*.ttc"):
            candidates.extend(base.rglob(ext))

    for pattern in patterns:
        p = pattern.replace(" ", "")
        for path in candidates:
            if p in path.name.lower().replace(" ", ""):
                return path
    return None
