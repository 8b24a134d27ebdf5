"""The viewport that follows the player."""

from __future__ import annotations

from .geometry import Point
from .map import DISPLAY_HEIGHT, DISPLAY_WIDTH


class Camera:
    """World-space bounds of the visible window, centred on the player."""

    def __init__(self, player_position: Point) -> None:
        self.on_player_move(player_position)

    def on_player_move(self, player_position: Point) -> None:
        self.left_x = player_position.x - DISPLAY_WIDTH // 2
        self.right_x = player_position.x + DISPLAY_WIDTH // 2
        self.top_y = player_position.y - DISPLAY_HEIGHT // 2
        self.bottom_y = player_position.y + DISPLAY_HEIGHT // 2

    def __repr__(self) -> str:
        return (
            f"Camera(left_x={self.left_x}, right_x={self.right_x}, "
            f"top_y={self.top_y}, bottom_y={self.bottom_y})"
        )