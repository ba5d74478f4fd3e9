"""Collects 2D interface draw calls for one frame and turns them into quads."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Callable, List, Optional, Tuple

from vopix.uigeometry import Quad, morph_line, morph_rectangle
from vopix.vector import ZERO, Vector3

STRING_CACHE_SIZE = 100

Renderer = Callable[[str, Any], Tuple[Any, int, int]]


class ElementType(Enum):
    COLORED_RECTANGLE = auto()
    TEXTURED_RECTANGLE = auto()
    TEXT = auto()
    LINE = auto()


@dataclass
class UIElement:
    """One queued interface element, in game-scaled screen coordinates."""

    type: ElementType = ElementType.COLORED_RECTANGLE
    min_x: int = 0
    min_y: int = 0
    max_x: int = 0
    max_y: int = 0
    color: Vector3 = ZERO
    texture: Any = 0
    text_w: int = 0
    text_h: int = 0
    line_thickness: float = 0.0


class CacheFullError(RuntimeError):
    """Raised when text cannot be cached because every slot was used recently."""


@dataclass
class _CachedText:
    font: Any
    text: str
    texture: Any
    width: int
    height: int
    uses: int


class TextCache:
    """Caches rendered text textures per font and string.

    ``render(text, font)`` returns ``(texture, width, height)``. A fresh
    entry counts as used for two frames; when the cache is full, the first
    entry not used in recent frames is replaced.
    """

    def __init__(self, render: Renderer, capacity: int = STRING_CACHE_SIZE) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._render = render
        self.capacity = capacity
        self._entries: List[_CachedText] = []

    def __len__(self) -> int:
        return len(self._entries)

    def get(self, font: Any, text: str) -> Tuple[Any, int, int]:
        """Texture, width and height for ``text`` in ``font``, rendering if needed."""
        least_used: Optional[int] = None
        for index, entry in enumerate(self._entries):
            if least_used is None and entry.uses == 0:
                least_used = index
            if entry.font == font and entry.text == text:
                entry.uses += 1
                return entry.texture, entry.width, entry.height

        if len(self._entries) >= self.capacity and least_used is None:
            raise CacheFullError("Can't render text, string cache is full")

        texture, width, height = self._render(text, font)
        entry = _CachedText(font, text, texture, width, height, uses=2)
        if len(self._entries) >= self.capacity:
            self._entries[least_used] = entry
        else:
            self._entries.append(entry)
        return texture, width, height

    def end_frame(self) -> None:
        """Age every entry by one frame."""
        for entry in self._entries:
            if entry.uses:
                entry.uses -= 1


class UIBatch:
    """Queues rectangles, text and lines; ``flush`` yields their quads."""

    def __init__(
        self, game_scale: float = 1.0, text_cache: Optional[TextCache] = None
    ) -> None:
        if game_scale == 0:
            raise ValueError("game_scale must not be zero")
        self.game_scale = game_scale
        self.text_cache = text_cache
        self.enabled = True
        self._elements: List[UIElement] = []

    @property
    def elements(self) -> Tuple[UIElement, ...]:
        """Elements queued for the current frame."""
        return tuple(self._elements)

    def _scaled(self, value: float) -> int:
        return int(value / self.game_scale)

    def _queue(
        self,
        kind: ElementType,
        low: Vector3,
        high: Vector3,
        r: float,
        g: float,
        b: float,
        **extra: Any,
    ) -> None:
        if not self.enabled:
            return
        self._elements.append(
            UIElement(
                type=kind,
                min_x=self._scaled(low.x),
                min_y=self._scaled(low.y),
                max_x=self._scaled(high.x),
                max_y=self._scaled(high.y),
                color=Vector3(r, g, b),
                **extra,
            )
        )

    def draw_rectangle(
        self, low: Vector3, high: Vector3, r: float, g: float, b: float
    ) -> None:
        self._queue(ElementType.COLORED_RECTANGLE, low, high, r, g, b)

    def draw_textured_rectangle(
        self, low: Vector3, high: Vector3, texture: Any, r: float, g: float, b: float
    ) -> None:
        self._queue(
            ElementType.TEXTURED_RECTANGLE, low, high, r, g, b, texture=texture
        )

    def draw_text(self, text: str, color: Vector3, x: float, y: float, font: Any) -> None:
        """Queue ``text`` at ``(x, y)``; empty text or a missing font draws nothing."""
        if not self.enabled or not font or not text:
            return
        if self.text_cache is None:
            raise RuntimeError("drawing text needs a text cache")
        texture, width, height = self.text_cache.get(font, text)
        self._elements.append(
            UIElement(
                type=ElementType.TEXT,
                min_x=self._scaled(x),
                min_y=self._scaled(y),
                color=Vector3(color.x, color.y, color.z),
                texture=texture,
                text_w=width,
                text_h=height,
            )
        )

    def draw_point(
        self, position: Vector3, size: float, texture: Any, r: float, g: float, b: float
    ) -> None:
        """Queue a square of half-side ``size``, textured when ``texture`` is set."""
        low = Vector3(position.x - size, position.y - size, 0.0)
        high = Vector3(position.x + size, position.y + size, 0.0)
        if texture:
            self.draw_textured_rectangle(low, high, texture, r, g, b)
        else:
            self.draw_rectangle(low, high, r, g, b)

    def draw_line(
        self,
        start: Vector3,
        end: Vector3,
        thickness: float,
        r: float,
        g: float,
        b: float,
    ) -> None:
        self._queue(
            ElementType.LINE, start, end, r, g, b, line_thickness=thickness
        )

    def _quad(self, element: UIElement) -> Quad:
        if element.type is ElementType.TEXT:
            return morph_rectangle(
                element.min_x,
                element.min_y,
                element.min_x + element.text_w / self.game_scale,
                element.min_y + element.text_h / self.game_scale,
            )
        if element.type is ElementType.LINE:
            return morph_line(
                element.min_x,
                element.min_y,
                element.max_x,
                element.max_y,
                element.line_thickness / (2 * self.game_scale),
            )
        return morph_rectangle(
            element.min_x, element.min_y, element.max_x, element.max_y
        )

    def flush(self) -> List[Tuple[UIElement, Quad]]:
        """Return each queued element with its quad, then start a new frame."""
        commands = [(element, self._quad(element)) for element in self._elements]
        if self.text_cache is not None:
            self.text_cache.end_frame()
        self._elements.clear()
        return commands