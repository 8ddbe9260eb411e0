"""Command-file interpreter: builds canvases and vertices and issues draw calls.

Commands, one per line (blank lines and ``#`` comments are ignored)::

    png W H name             new W x H canvas written as ``name``
    pngs W H prefix count    ``count`` canvases named prefix000.png, prefix001.png, ...
    frame n                  draw into canvas n (0-based)
    xyrgb x y r g b          opaque vertex
    xyrgba x y r g b a       vertex with alpha
    xyc x y #rrggbb[aa]      vertex from a hex color
    line i j                 line with interpolated, composited colors
    linec i j #rrggbb[aa]    line in one fixed color
    trig i j k               filled triangle

Vertex indices start at 1 (0 is a white sentinel); negative indices count
back from the end of the table.
"""

from __future__ import annotations

import logging
import math

from scanline.canvas import Canvas, CanvasBoundsError
from scanline.color import Color, parse_hex_color
from scanline.geometry import SENTINEL_VERTEX, Vertex
from scanline.line import draw_line
from scanline.triangle import draw_triangle

_logger = logging.getLogger(__name__)


class ScriptError(ValueError):
    """A command line could not be parsed or executed."""

    def __init__(self, message, lineno=None):
        self.lineno = lineno
        if lineno is not None:
            message = f"line {lineno}: {message}"
        super().__init__(message)


class VertexTable:
    def __init__(self):
        self._vertices = [SENTINEL_VERTEX]

    def __len__(self):
        return len(self._vertices)

    def append(self, vertex: Vertex) -> int:
        self._vertices.append(vertex)
        return len(self._vertices) - 1

    def resolve(self, index: int) -> Vertex:
        """Look up a vertex; ``-1`` is the most recently added one."""
        if index < 0:
            index = len(self._vertices) - abs(index)
        if not 0 <= index < len(self._vertices):
            raise ScriptError(f"vertex index {index} out of range (table has {len(self._vertices)})")
        return self._vertices[index]


def _int(token, what):
    try:
        return int(token)
    except ValueError:
        raise ScriptError(f"{what} must be an integer, got {token!r}") from None


def _float(token, what):
    try:
        value = float(token)
    except ValueError:
        raise ScriptError(f"{what} must be a number, got {token!r}") from None
    if not math.isfinite(value):
        raise ScriptError(f"{what} must be finite, got {token!r}")
    return value


def _color(*tokens):
    channels = [_int(t, "color channel") for t in tokens]
    try:
        return Color.checked(*channels)
    except ValueError as e:
        raise ScriptError(str(e)) from None


def _hex(token):
    try:
        return parse_hex_color(token)
    except ValueError as e:
        raise ScriptError(str(e)) from None


def _dimension(token, what):
    value = _int(token, what)
    if value <= 0:
        raise ScriptError(f"{what} must be positive, got {value}")
    return value


class ScriptRunner:
    """Executes commands against a list of canvases and a vertex table."""

    # keyword -> (handler name, number of arguments)
    COMMANDS = {
        "png": ("_png", 3),
        "pngs": ("_pngs", 4),
        "frame": ("_frame", 1),
        "xyrgb": ("_xyrgb", 5),
        "xyrgba": ("_xyrgba", 6),
        "xyc": ("_xyc", 3),
        "line": ("_line", 2),
        "linec": ("_linec", 3),
        "trig": ("_trig", 3),
    }

    def __init__(self):
        self.canvases: list[Canvas] = []
        self.vertices = VertexTable()
        self.current_frame = 0

    def run(self, lines) -> list[Canvas]:
        for lineno, line in enumerate(lines, start=1):
            self.execute(line, lineno)
        return self.canvases

    def execute(self, line: str, lineno=None) -> None:
        tokens = line.split()
        if not tokens or tokens[0].startswith("#"):
            return
        keyword, args = tokens[0], tokens[1:]
        if keyword not in self.COMMANDS:
            _logger.warning("line %s: unknown command %r skipped", lineno, keyword)
            return
        handler, arity = self.COMMANDS[keyword]
        if len(args) < arity:
            raise ScriptError(f"{keyword} expects {arity} arguments, got {len(args)}", lineno)
        try:
            getattr(self, handler)(*args[:arity])
        except ScriptError as e:
            if e.lineno is None:
                raise ScriptError(str(e), lineno) from None
            raise
        except CanvasBoundsError as e:
            raise CanvasBoundsError(f"line {lineno}: {e}") from e

    def target(self) -> Canvas:
        if not self.canvases:
            raise ScriptError("no canvas defined before drawing")
        if not 0 <= self.current_frame < len(self.canvases):
            raise ScriptError(f"frame {self.current_frame} does not exist ({len(self.canvases)} canvases)")
        return self.canvases[self.current_frame]

    def _png(self, width, height, name):
        canvas = Canvas(_dimension(width, "width"), _dimension(height, "height"), name)
        self.canvases.append(canvas)
        _logger.info("canvas %d: %s %dx%d", len(self.canvases) - 1, name, canvas.width, canvas.height)

    def _pngs(self, width, height, prefix, count):
        w, h = _dimension(width, "width"), _dimension(height, "height")
        for c in range(_int(count, "count")):
            self.canvases.append(Canvas(w, h, f"{prefix}{c:03}.png"))
        _logger.info("%s canvases %s###.png: %dx%d", count, prefix, w, h)

    def _frame(self, index):
        self.current_frame = _int(index, "frame")

    def _add_vertex(self, x, y, color):
        vertex = Vertex.at(_float(x, "x"), _float(y, "y"), color)
        index = self.vertices.append(vertex)
        _logger.debug("vertex %d: %s", index, vertex)

    def _xyrgb(self, x, y, r, g, b):
        self._add_vertex(x, y, _color(r, g, b))

    def _xyrgba(self, x, y, r, g, b, a):
        self._add_vertex(x, y, _color(r, g, b, a))

    def _xyc(self, x, y, hex_color):
        self._add_vertex(x, y, _hex(hex_color))

    def _resolve(self, token):
        return self.vertices.resolve(_int(token, "vertex index"))

    def _line(self, i1, i2):
        draw_line(self.target(), self._resolve(i1), self._resolve(i2))

    def _linec(self, i1, i2, hex_color):
        draw_line(self.target(), self._resolve(i1), self._resolve(i2), _hex(hex_color))

    def _trig(self, i1, i2, i3):
        draw_triangle(self.target(), self._resolve(i1), self._resolve(i2), self._resolve(i3))


def run_lines(lines) -> list[Canvas]:
    return ScriptRunner().run(lines)


def run_script(path) -> list[Canvas]:
    with open(path, "r", encoding="utf-8") as file:
        try:
            return run_lines(file)
        except UnicodeDecodeError as e:
            raise ScriptError(f"{path} is not valid UTF-8 ({e.reason})") from None
