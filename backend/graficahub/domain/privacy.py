# graficahub/domain/privacy.py
from __future__ import annotations

_LETTERS = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"


def anonymous_vendor_code(position: int) -> str:
    """
    Buyer-facing vendor code before a proposal is accepted.
    0 -> "Gráfica #A01", 25 -> "Gráfica #Z01", 26 -> "Gráfica #A02".
    """
    if position < 0:
        raise ValueError(f"position must be >= 0, got {position}")
    letter = _LETTERS[position % len(_LETTERS)]
    number = position // len(_LETTERS) + 1
    return f"Gráfica #{letter}{number:02d}"
