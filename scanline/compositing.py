"""Alpha-over compositing of a painted color onto existing canvas content."""

from __future__ import annotations

from scanline.color import TRANSPARENT, Color


def over(source: Color, destination: Color) -> Color:
    """Composite ``source`` over ``destination`` ("A over B").

    ``alpha_out = a + b * (1 - a)`` and each channel is the alpha-weighted
    mix of both colors; results are truncated to 8 bits. When both alphas
    are zero the result is transparent black.
    """
    # destination alpha that shows through the source, in 8-bit units
    behind = destination.a * (255 - source.a) / 255
    alpha_out = source.a + behind
    if alpha_out == 0:
        return TRANSPARENT

    r = int((source.a * source.r + behind * destination.r) / alpha_out)
    g = int((source.a * source.g + behind * destination.g) / alpha_out)
    b = int((source.a * source.b + behind * destination.b) / alpha_out)
    return Color(r, g, b, int(alpha_out))
