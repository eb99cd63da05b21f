"""TikZ rendering surface for Poincaré disk drawings."""

from __future__ import annotations

import math
from typing import List, Optional, Tuple

from .utils import format_float, latex_escape_keep_math

Point = Tuple[float, float]

FULL_TURN_EPS = 1e-12

standalone_tpl = r"""\documentclass[border=2pt]{standalone}
\usepackage{tikz}
\tikzset{
  disk/.style={line cap=round, line join=round},
}
\begin{document}
%s%s
\end{document}
"""


def _coord(point: Point) -> str:
    # screen y grows downward, TikZ y grows upward
    return f"({format_float(point[0])},{format_float(-point[1])})"


class TikzSurface:
    """Collects primitive calls as TikZ ``\\draw`` commands.

    Coordinates are screen units; ``unit`` is the TikZ length of one screen
    unit.
    """

    def __init__(self, unit: str = "0.02cm") -> None:
        self.unit = unit
        self.commands: List[str] = []
        self._color = "black"
        self._width = 1.0

    def clear(self) -> None:
        self.commands.clear()

    def set_stroke_style(self, color: str, width: float) -> None:
        self._color = color
        self._width = width

    def _style(self) -> str:
        return f"disk, draw={self._color}, line width={format_float(self._width)}pt"

    def stroke_line(self, p1: Point, p2: Point) -> None:
        self.commands.append(f"\\draw[{self._style()}] {_coord(p1)} -- {_coord(p2)};")

    def stroke_arc(self, center: Point, radius: float, start_angle: float, end_angle: float) -> None:
        sweep = (end_angle - start_angle) % (2.0 * math.pi)
        if end_angle - start_angle >= 2.0 * math.pi - FULL_TURN_EPS:
            self.commands.append(
                f"\\draw[{self._style()}] {_coord(center)} circle[radius={format_float(radius)}];"
            )
            return
        start = (center[0] + radius * math.cos(start_angle), center[1] + radius * math.sin(start_angle))
        # increasing screen angles run clockwise once y is flipped
        tikz_start = -math.degrees(start_angle)
        tikz_end = -math.degrees(start_angle + sweep)
        self.commands.append(
            f"\\draw[{self._style()}] {_coord(start)} arc[start angle={format_float(tikz_start)}, "
            f"end angle={format_float(tikz_end)}, radius={format_float(radius)}];"
        )

    def tikz_code(self) -> str:
        body = "\n".join(f"  {command}" for command in self.commands)
        return (
            f"\\begin{{tikzpicture}}[x={self.unit}, y={self.unit}]\n"
            f"{body}\n"
            "\\end{tikzpicture}"
        )


def generate_tikz_code(surface: TikzSurface) -> str:
    return surface.tikz_code()


def generate_tikz_document(surface: TikzSurface, *, title: Optional[str] = None) -> str:
    """Render a standalone LaTeX document around the surface's picture."""

    header = ""
    if title:
        header = "\\noindent\\textbf{" + latex_escape_keep_math(title.strip()) + "}\\par\\vspace{4pt}\n"
    return standalone_tpl % (header, generate_tikz_code(surface))
