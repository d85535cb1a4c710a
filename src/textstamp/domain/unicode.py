"""Display-width measurement and grapheme segmentation.

Width follows Unicode East Asian Width with combining marks counted as
zero (``wcwidth``). Segmentation follows UAX #29 extended grapheme
clusters (``regex``'s ``\\X``), so ``"a\\u0305"`` is one cluster.
"""

from __future__ import annotations

import regex
from wcwidth import wcswidth, wcwidth

_GRAPHEME = regex.compile(r"\X")


def display_width(text: str) -> int:
    """Return the number of monospace columns *text* occupies.

    Non-printable characters (control codes such as ``\\t`` or ``\\r``)
    occupy no columns, so a line's width is never negative.
    """
    width = wcswidth(text)
    if width < 0:
        width = wcswidth("".join(ch for ch in text if wcwidth(ch) >= 0))
    return width


def cluster_width(cluster: str) -> int:
    """Return the raw width of one grapheme cluster, -1 if it is non-printable."""
    return wcswidth(cluster)


def graphemes(text: str) -> list[str]:
    """Split *text* into extended grapheme clusters."""
    return _GRAPHEME.findall(text)
