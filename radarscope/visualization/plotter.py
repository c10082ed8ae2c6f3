# radarscope/visualization/plotter.py
"""
matplotlib rendering surface for the radar scope.
"""
import logging
from typing import Iterable, List, Optional

import matplotlib.pyplot as plt
from matplotlib.axes import Axes
from matplotlib.patches import Circle, Polygon

from .primitives import LineSegment, PolygonShape, CircleShape, TextLabel

logger = logging.getLogger(__name__)

SCOPE_BACKGROUND = "#000000"

class RadarPlotter:
    """Draws primitives onto a matplotlib Axes laid out in canvas pixels."""

    def __init__(self, width: float, height: float, ax: Optional[Axes] = None):
        self.width = width
        self.height = height
        if ax is None:
            self.fig, self.ax = plt.subplots(figsize=(8, 8))
        else:
            self.fig, self.ax = ax.figure, ax
        self.fig.patch.set_facecolor(SCOPE_BACKGROUND)
        self._prepare_axes()

    def _prepare_axes(self):
        self.ax.set_facecolor(SCOPE_BACKGROUND)
        self.ax.set_xlim(0, self.width)
        # Screen rows grow downward
        self.ax.set_ylim(self.height, 0)
        self.ax.set_aspect('equal', adjustable='box')
        self.ax.set_axis_off()

    def resize(self, width: float, height: float):
        self.width, self.height = width, height
        self._prepare_axes()

    def draw(self, primitives: Iterable) -> List:
        """Clears the scope and draws every primitive; returns the created artists."""
        self.ax.clear()
        self._prepare_axes()
        artists = []
        for primitive in primitives:
            artist = self._draw_one(primitive)
            if artist is not None:
                artists.append(artist)
        return artists

    def _draw_one(self, primitive):
        style = getattr(primitive, "style", None)
        if isinstance(primitive, LineSegment):
            line, = self.ax.plot(
                [primitive.start[0], primitive.end[0]], [primitive.start[1], primitive.end[1]],
                color=style.color, linewidth=style.line_width, alpha=style.alpha, zorder=style.zorder
            )
            return line
        if isinstance(primitive, PolygonShape):
            patch = Polygon(
                primitive.points, closed=True, fill=style.fill, facecolor=style.color if style.fill else 'none',
                edgecolor=style.color, linewidth=style.line_width, alpha=style.alpha, zorder=style.zorder
            )
            return self.ax.add_patch(patch)
        if isinstance(primitive, CircleShape):
            patch = Circle(
                primitive.center, primitive.radius, fill=style.fill, color=style.color,
                linewidth=style.line_width, alpha=style.alpha, zorder=style.zorder
            )
            return self.ax.add_patch(patch)
        if isinstance(primitive, TextLabel):
            return self.ax.text(
                primitive.position[0], primitive.position[1], primitive.text,
                color=style.color, alpha=style.alpha, fontsize=primitive.font_size * 0.75,
                family=primitive.font_family, ha='left', va='center', zorder=style.zorder
            )
        logger.warning(f"Unsupported primitive skipped: {type(primitive).__name__}")
        return None

    def save(self, path: str, dpi: int = 100):
        self.fig.savefig(path, dpi=dpi, facecolor=self.fig.get_facecolor())
        logging.info(f"Radar scope saved to {path}")
