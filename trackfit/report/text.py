"""Width-aware word wrapping for canvas text."""

from reportlab.pdfbase.pdfmetrics import stringWidth


def wrap_text(
    text: str,
    max_width: float,
    font_size: float,
    font_name: str = "Helvetica",
) -> list[str]:
    """Greedy word wrap of *text* to *max_width* points.

    Breaks only at whitespace; explicit newlines always start a new line.
    A single word wider than *max_width* is kept whole on its own line
    (it overflows rather than being split or truncated). Always returns
    at least one line; empty input gives ``[""]``.
    """
    lines: list[str] = []
    for paragraph in str(text).split("\n"):
        words = paragraph.split()
        if not words:
            lines.append("")
            continue
        current = ""
        for word in words:
            candidate = f"{current} {word}" if current else word
            if not current or stringWidth(candidate, font_name, font_size) <= max_width:
                current = candidate
            else:
                lines.append(current)
                current = word
        lines.append(current)
    return lines or [""]
