"""Layered character canvas and batched drawing onto it."""

from __future__ import annotations

import itertools
from dataclasses import dataclass
from typing import Callable, Iterable

from .components import BLACK, WHITE, ColorPair
from .geometry import Point
from .map import DISPLAY_HEIGHT, DISPLAY_WIDTH, SCREEN_HEIGHT, SCREEN_WIDTH

LAYER_SIZES = (
    (DISPLAY_WIDTH, DISPLAY_HEIGHT),
    (DISPLAY_WIDTH, DISPLAY_HEIGHT),
    (SCREEN_WIDTH * 2, SCREEN_HEIGHT * 2),
    (DISPLAY_WIDTH, DISPLAY_HEIGHT),
    (DISPLAY_WIDTH, DISPLAY_HEIGHT),
)

BAR_FULL = "▓"
BAR_EMPTY = "░"

_DEFAULT_COLOR = ColorPair(WHITE, BLACK)

_Op = Callable[["Canvas", int], None]


@dataclass(frozen=True)
class Cell:
    glyph: str
    color: ColorPair


class Canvas:
    """Stacked character layers; submitted batches are drawn in z order."""

    def __init__(self, layers: Iterable[tuple[int, int]] = LAYER_SIZES) -> None:
        self.sizes = tuple(layers)
        self._cells: list[dict[tuple[int, int], Cell]] = [{} for _ in self.sizes]
        self._pending: list[tuple[int, int, int, list[_Op]]] = []
        self._sequence = itertools.count()

    def _put(self, layer: int, x: int, y: int, glyph: str, color: ColorPair) -> None:
        width, height = self.sizes[layer]
        if 0 <= x < width and 0 <= y < height:
            self._cells[layer][(x, y)] = Cell(glyph, color)

    def _write(self, layer: int, x: int, y: int, text: str, color: ColorPair) -> None:
        for offset, char in enumerate(text):
            self._put(layer, x + offset, y, char, color)

    def _write_centered(self, layer: int, y: int, text: str, color: ColorPair) -> None:
        width = self.sizes[layer][0]
        self._write(layer, width // 2 - len(text) // 2, y, text, color)

    def _submit(self, z_order: int, layer: int, ops: list[_Op]) -> None:
        self._pending.append((z_order, next(self._sequence), layer, ops))

    def _render(self) -> None:
        pending = sorted(self._pending, key=lambda item: (item[0], item[1]))
        self._pending.clear()
        for _, _, layer, ops in pending:
            for op in ops:
                op(self, layer)

    def cell(self, layer: int, point: Point) -> Cell | None:
        self._render()
        return self._cells[layer].get((point.x, point.y))

    def text_at(self, layer: int, y: int) -> str:
        """The glyphs of one row, blanks as spaces, trailing blanks removed."""
        self._render()
        width = self.sizes[layer][0]
        row = self._cells[layer]
        return "".join(
            row[(x, y)].glyph if (x, y) in row else " " for x in range(width)
        ).rstrip()

    def clear(self) -> None:
        self._pending.clear()
        for layer in self._cells:
            layer.clear()


class DrawBatch:
    """Drawing operations collected for one layer and submitted together."""

    def __init__(self, target: int = 0) -> None:
        self.target = target
        self._ops: list[_Op] = []

    def set(self, point: Point, color: ColorPair, glyph: str) -> None:
        self._ops.append(lambda c, layer: c._put(layer, point.x, point.y, glyph, color))

    def print(self, point: Point, text: str) -> None:
        self.print_color(point, text, _DEFAULT_COLOR)

    def print_color(self, point: Point, text: str, color: ColorPair) -> None:
        self._ops.append(lambda c, layer: c._write(layer, point.x, point.y, text, color))

    def print_centered(self, y: int, text: str) -> None:
        self.print_color_centered(y, text, _DEFAULT_COLOR)

    def print_color_centered(self, y: int, text: str, color: ColorPair) -> None:
        self._ops.append(lambda c, layer: c._write_centered(layer, y, text, color))

    def bar_horizontal(
        self, point: Point, width: int, current: int, maximum: int, color: ColorPair
    ) -> None:
        if maximum:
            fill = int(current / maximum * width)
        else:
            fill = width if current > 0 else (0 if current == 0 else -1)
        glyphs = "".join(BAR_FULL if x <= fill else BAR_EMPTY for x in range(width))
        self.print_color(point, glyphs, color)

    def submit(self, canvas: Canvas, z_order: int) -> None:
        """Hand the collected operations to ``canvas`` and empty the batch."""
        canvas._submit(z_order, self.target, self._ops)
        self._ops = []