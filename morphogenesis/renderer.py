"""
morphogenesis/renderer.py - Draw bodies as coloured rectangles
"""
from typing import List, Optional, Tuple

from PIL import Image, ImageDraw

from .body import Body
from .cell import Cell, direction

BACKGROUND = (16, 16, 24)
MARGIN = 0.9


def _corners(cell: Cell, to_pixels) -> List[Tuple[float, float]]:
    ux, uy = direction(cell.angle)            # along the cell's height
    vx, vy = -uy, ux                          # along its width
    hw, hh = cell.width / 2, cell.height / 2
    points = []
    for sw, sh in ((-1, -1), (1, -1), (1, 1), (-1, 1)):
        points.append(to_pixels(cell.x + sw * hw * vx + sh * hh * ux,
                                cell.y + sw * hw * vy + sh * hh * uy))
    return points


def render_body(body: Body, size: int = 512,
                filename: Optional[str] = None) -> Image.Image:
    """Render every cell of ``body`` centred on a square canvas"""
    image = Image.new('RGB', (size, size), BACKGROUND)
    draw = ImageDraw.Draw(image)

    min_x, min_y, max_x, max_y = body.bounds()
    cx, cy = (min_x + max_x) / 2, (min_y + max_y) / 2
    factor = body.scale * size * MARGIN

    def to_pixels(x, y):
        return (x - cx) * factor + size / 2, (y - cy) * factor + size / 2

    for cell in body.cells:
        draw.polygon(_corners(cell, to_pixels), fill=cell.color(), outline=(255, 255, 255))

    if filename:
        image.save(filename)
    return image


def render_frames(body: Body, frames: int, delta: float = 0.1,
                  size: int = 512) -> List[Image.Image]:
    """Animate ``body`` by ``delta`` between frames and render each one"""
    images = []
    for _ in range(frames):
        images.append(render_body(body, size))
        body.animate(delta)
    return images
