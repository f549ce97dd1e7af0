"""Window that shows the frame buffer, scaled up, using pygame."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Optional

import pygame

from .gpu import RES_HEIGHT, RES_WIDTH


@dataclass(frozen=True)
class Color:
    """An RGB colour."""

    r: int
    g: int
    b: int

    def as_tuple(self) -> tuple[int, int, int]:
        """Return the colour as an (r, g, b) tuple."""
        return (self.r, self.g, self.b)


@dataclass
class Display:
    """Renders a frame buffer onto a window or any pygame surface.

    A surface may be supplied for off-screen rendering; otherwise ``init``
    opens a window and renders into it.
    """

    name: str = "Chip-8"
    scale: int = 12
    clear_color: Color = field(default_factory=lambda: Color(0x00, 0x00, 0x00))
    fill_color: Color = field(default_factory=lambda: Color(0xFF, 0xFF, 0xFF))
    surface: Optional[pygame.Surface] = None
    _windowed: bool = field(default=False, init=False, repr=False)

    @property
    def width(self) -> int:
        """Width of the rendered picture in pixels."""
        return RES_WIDTH * self.scale

    @property
    def height(self) -> int:
        """Height of the rendered picture in pixels."""
        return RES_HEIGHT * self.scale

    def init(self) -> None:
        """Open the window; raise RuntimeError if that fails."""
        try:
            self.surface = pygame.display.set_mode((self.width, self.height))
            pygame.display.set_caption(self.name)
        except pygame.error as exc:
            raise RuntimeError(f"Error creating window: {exc}") from exc
        self._windowed = True

    def _target(self) -> pygame.Surface:
        if self.surface is None:
            raise RuntimeError("display has not been initialised")
        return self.surface

    def _present(self) -> None:
        if self._windowed:
            pygame.display.flip()

    def clear(self) -> None:
        """Fill the picture with the background colour and show it."""
        self._target().fill(self.clear_color.as_tuple())
        self._present()

    def draw(self, buffer: Sequence[int]) -> None:
        """Render a frame buffer of RES_WIDTH x RES_HEIGHT pixels and show it."""
        if len(buffer) != RES_WIDTH * RES_HEIGHT:
            raise ValueError(
                f"frame buffer has {len(buffer)} pixels, "
                f"expected {RES_WIDTH * RES_HEIGHT}"
            )
        target = self._target()
        target.fill(self.clear_color.as_tuple())
        fill = self.fill_color.as_tuple()
        for index, pixel in enumerate(buffer):
            if pixel == 0x1:
                row, col = divmod(index, RES_WIDTH)
                rect = pygame.Rect(
                    col * self.scale, row * self.scale, self.scale, self.scale
                )
                target.fill(fill, rect)
        self._present()