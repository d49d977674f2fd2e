"""Visualization layer: matplotlib rendering of boards and solutions."""

from tile_escape.viz.render import board_image, render_solution, token_trails

__all__ = [
    "board_image",
    "render_solution",
    "token_trails",
]
