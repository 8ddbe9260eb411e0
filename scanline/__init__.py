"""Script-driven 2D software rasterizer: DDA lines, scanline triangles, alpha-over compositing."""

from scanline.canvas import Canvas, CanvasBoundsError
from scanline.color import TRANSPARENT, WHITE, Color, parse_hex_color
from scanline.compositing import over
from scanline.geometry import Point, Vector, Vertex
from scanline.interpolate import interpolate_color, step_size
from scanline.line import draw_line
from scanline.script import ScriptError, ScriptRunner, VertexTable, run_lines, run_script
from scanline.triangle import draw_triangle

__all__ = [
    "Canvas",
    "CanvasBoundsError",
    "Color",
    "Point",
    "ScriptError",
    "ScriptRunner",
    "TRANSPARENT",
    "Vector",
    "Vertex",
    "VertexTable",
    "WHITE",
    "draw_line",
    "draw_triangle",
    "interpolate_color",
    "over",
    "parse_hex_color",
    "run_lines",
    "run_script",
    "step_size",
]
