import math
import re
from typing import List

_MATH_DELIM_RE = re.compile(r'(?<!\\)(\$\$|\$)')  # matches unescaped $ or $$

_TEXT_ESCAPES = {
    '\\': r'\textbackslash{}',
    '&': r'\&',
    '%': r'\%',
    '#': r'\#',
    '_': r'\_',
    '{': r'\{',
    '}': r'\}',
    '~': r'\textasciitilde{}',
    '^': r'\textasciicircum{}',
}


def format_float(value: float) -> str:
    if math.isnan(value) or math.isinf(value):
        raise ValueError("Cannot format non-finite float for TikZ output")
    formatted = f"{value:.4f}".rstrip("0").rstrip(".")
    if formatted in ("", "-0"):
        return "0"
    return formatted


def latex_escape_keep_math(s: str) -> str:
    """Escape LaTeX text while leaving ``$...$`` and ``$$...$$`` spans untouched."""
    parts: List[str] = []
    pos = 0
    in_math = False
    current_delim = None

    for m in _MATH_DELIM_RE.finditer(s):
        delim = m.group(1)
        start, end = m.span()
        chunk = s[pos:start]
        parts.append(chunk if in_math else ''.join(_TEXT_ESCAPES.get(c, c) for c in chunk))
        parts.append(delim)
        if not in_math:
            in_math = True
            current_delim = delim
        elif delim == current_delim:
            in_math = False
            current_delim = None
        pos = end

    tail = s[pos:]
    parts.append(tail if in_math else ''.join(_TEXT_ESCAPES.get(c, c) for c in tail))
    return ''.join(parts)
