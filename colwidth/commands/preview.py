"""Render the columns as coloured bands and save <out_dir>/columns.png.

Each column's effective width (a percentage) is scaled to the preview
width. Bands alternate through a small palette with a 1px dark separator
between columns. Anything past 100% is cut off; a red strip along the
bottom marks overflow.

Image size comes from COLWIDTH_PREVIEW_WIDTH / COLWIDTH_PREVIEW_HEIGHT
(default 800x120).

Example:
    colwidth preview columns.json ./tmp
    COLWIDTH_PREVIEW_WIDTH=1280 colwidth preview columns.json ./tmp --available 100
"""

import os

import numpy as np
from PIL import Image

from colwidth.core.env import Settings
from colwidth.core.types import Column, Command, Report
from colwidth.core.widths import redistribute, width_map

command = Command(
    name='preview',
    help='Render the columns as coloured bands to <out_dir>/columns.png.',
)

# Tailwind blue/emerald/amber/violet/rose 300
PALETTE = np.array(
    [
        (147, 197, 253),
        (110, 231, 183),
        (252, 211, 77),
        (196, 181, 253),
        (253, 164, 175),
    ],
    dtype=np.uint8,
)
SEPARATOR = (30, 41, 59)
OVERFLOW = (220, 38, 38)


def band_edges(widths: list[float | None], image_width: int) -> np.ndarray:
    """Pixel x positions where each band ends, clipped to the image."""
    pct = np.array([w if w is not None and w > 0 else 0.0 for w in widths], dtype=float)
    edges = np.rint(np.cumsum(pct) / 100.0 * image_width).astype(int)
    return np.clip(edges, 0, image_width)


def render(widths: list[float | None], size: tuple[int, int]) -> Image.Image:
    width, height = size
    arr = np.full((height, width, 3), 255, dtype=np.uint8)

    start = 0
    for i, end in enumerate(band_edges(widths, width)):
        if end > start:
            arr[:, start:end] = PALETTE[i % len(PALETTE)]
            arr[:, end - 1] = SEPARATOR
        start = max(start, end)

    total = sum(w for w in widths if w is not None)
    if total > 100:
        arr[-max(1, height // 20) :, :] = OVERFLOW

    return Image.fromarray(arr)


@command.run
def run(columns: list[Column], report: Report, args) -> None:
    settings = getattr(args, 'settings', None) or Settings.from_environ()
    total_count = getattr(args, 'total_count', None)
    available = getattr(args, 'available', None)
    if available is not None:
        widths = redistribute(columns, available, total_count)
    else:
        widths = width_map(columns, total_count)

    image = render(list(widths.values()), (settings.preview_width, settings.preview_height))
    os.makedirs(args.out_dir, exist_ok=True)
    path = os.path.join(args.out_dir, 'columns.png')
    image.save(path)
    report.add('preview', {'file': path, 'width': image.width, 'height': image.height})
