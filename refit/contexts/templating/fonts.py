"""
Font family mapping for measurement and PDF painting.

Templates name real font families (Calibri, Georgia, ...). PDF output and line
wrapping use reportlab's standard fonts, which need no embedding and have fixed
metrics, so wrapping is identical on every machine.
"""

from dataclasses import dataclass

SERIF_HINTS = ("times", "georgia", "garamond", "cambria", "book antiqua", "palatino", "serif")
MONO_HINTS = ("courier", "mono", "consolas")


@dataclass(frozen=True)
class StandardFont:
    """Regular/bold pair of reportlab base-14 font names."""

    regular: str
    bold: str

    def face(self, bold: bool = False) -> str:
        return self.bold if bold else self.regular


HELVETICA = StandardFont("Helvetica", "Helvetica-Bold")
TIMES = StandardFont("Times-Roman", "Times-Bold")
COURIER = StandardFont("Courier", "Courier-Bold")


def standard_font(family: str) -> StandardFont:
    """
    Map a font family name to a standard PDF font.

    Examples:
        >>> standard_font("Georgia").regular
        'Times-Roman'
        >>> standard_font("Calibri").bold
        'Helvetica-Bold'
    """
    name = (family or "").lower()
    if "sans" not in name and any(hint in name for hint in SERIF_HINTS):
        return TIMES
    if any(hint in name for hint in MONO_HINTS):
        return COURIER
    return HELVETICA
