# core/escapes.py
"""
    Terminal control sequences.

    Everything that knows about escape characters lives here. The functions
    only build strings; printing them is up to the caller.
"""
from typing import Literal

ESC = "\033"

Op = Literal["CUU", "CUD", "CUF", "CUB", "SGR", "DECAWM"]

# Terminals that print the private autowrap sequence literally.
NO_AUTOWRAP_TERMS = {"dumb", "minix", "cons25"}

_CURSOR = {
    "CUU": "A",
    "CUD": "B",
    "CUF": "C",
    "CUB": "D",
}


def esc(op: Op, value, color: bool = True, term: str = "") -> str:
    """
    Build the control sequence for `op`.

      - CUU/CUD/CUF/CUB move the cursor `value` cells and are always emitted.
      - SGR sets graphics rendition `value`; empty when `color` is off.
      - DECAWM toggles autowrap, `value` being "h" (on) or "l" (off); empty
        on terminals listed in NO_AUTOWRAP_TERMS.
    """
    if op in _CURSOR:
        return f"{ESC}[{value}{_CURSOR[op]}"

    if op == "SGR":
        return f"{ESC}[{value}m" if color else ""

    if op == "DECAWM":
        return "" if term in NO_AUTOWRAP_TERMS else f"{ESC}[?7{value}"

    raise ValueError(f"unknown escape operation: {op}")


def sgr(ctx, value) -> str:
    return esc("SGR", value, color=ctx.color)


def autowrap(ctx, enabled: bool) -> str:
    return esc("DECAWM", "h" if enabled else "l", term=ctx.term)
