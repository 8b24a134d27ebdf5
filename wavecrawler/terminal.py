"""Playing the game in a text terminal."""

from __future__ import annotations

import argparse
import curses
import random

from .draw import Canvas
from .game import Game
from .geometry import Point
from .player_input import Key

FRAMES_PER_SECOND = 30
TEXT_LAYER = 2
_TILE_LAYERS = (4, 3, 1, 0)

_KEYS = {
    curses.KEY_LEFT: Key.LEFT,
    curses.KEY_RIGHT: Key.RIGHT,
    curses.KEY_UP: Key.UP,
    curses.KEY_DOWN: Key.DOWN,
    ord(" "): Key.SPACE,
    ord("d"): Key.D,
    ord("D"): Key.D,
    ord("f"): Key.F,
    ord("F"): Key.F,
    27: Key.ESCAPE,
}

_QUIT = (ord("q"), ord("Q"))


def translate_key(code: int) -> Key | None:
    """The game key for a terminal key code, or None if the game ignores it."""
    return _KEYS.get(code)


def _frame_lines(canvas: Canvas) -> list[str]:
    """The tile layers stacked into rows, followed by the non-empty text rows."""
    width, height = canvas.sizes[0]
    lines = []
    for y in range(height):
        row = []
        for x in range(width):
            cell = next(
                (c for c in (canvas.cell(layer, Point(x, y)) for layer in _TILE_LAYERS) if c),
                None,
            )
            row.append(cell.glyph if cell is not None else " ")
        lines.append("".join(row))
    text = [canvas.text_at(TEXT_LAYER, y) for y in range(canvas.sizes[TEXT_LAYER][1])]
    while text and not text[-1]:
        text.pop()
    return lines + text


def _draw(screen, canvas: Canvas) -> None:
    screen.erase()
    rows, cols = screen.getmaxyx()
    for y, line in enumerate(_frame_lines(canvas)[:rows]):
        try:
            screen.addnstr(y, 0, line, cols - 1)
        except curses.error:
            pass
    screen.refresh()


def _run(screen, game: Game) -> None:
    try:
        curses.curs_set(0)
    except curses.error:
        pass
    screen.keypad(True)
    screen.timeout(1000 // FRAMES_PER_SECOND)
    curses.mousemask(curses.ALL_MOUSE_EVENTS | curses.REPORT_MOUSE_POSITION)
    mouse = Point(0, 0)
    while True:
        code = screen.getch()
        if code in _QUIT:
            return
        key = None
        left = right = False
        if code == curses.KEY_MOUSE:
            try:
                _, x, y, _, state = curses.getmouse()
            except curses.error:
                pass
            else:
                mouse = Point(x, y)
                left = bool(state & (curses.BUTTON1_PRESSED | curses.BUTTON1_CLICKED))
                right = bool(state & (curses.BUTTON3_PRESSED | curses.BUTTON3_CLICKED))
        else:
            key = translate_key(code)
        _draw(screen, game.tick(key, mouse, left, right))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="wavecrawler", description="Survive three waves of monsters in a dungeon."
    )
    parser.add_argument("--seed", type=int, help="seed for the dungeon and the waves")
    args = parser.parse_args(argv)
    game = Game(random.Random(args.seed))
    curses.wrapper(_run, game)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())