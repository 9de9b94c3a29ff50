"""Light box-drawing characters and the table of how they join."""

from __future__ import annotations

from typing import Optional

HORIZONTAL_ELLIPSIS = "\u2026"

LIGHT_HORIZONTAL = "\u2500"
LIGHT_VERTICAL = "\u2502"
LIGHT_DOWN_AND_RIGHT = "\u250c"
LIGHT_DOWN_AND_LEFT = "\u2510"
LIGHT_UP_AND_RIGHT = "\u2514"
LIGHT_UP_AND_LEFT = "\u2518"
LIGHT_VERTICAL_AND_RIGHT = "\u251c"
LIGHT_VERTICAL_AND_LEFT = "\u2524"
LIGHT_DOWN_AND_HORIZONTAL = "\u252c"
LIGHT_UP_AND_HORIZONTAL = "\u2534"
LIGHT_VERTICAL_AND_HORIZONTAL = "\u253c"

_H = LIGHT_HORIZONTAL
_V = LIGHT_VERTICAL
_DR = LIGHT_DOWN_AND_RIGHT
_DL = LIGHT_DOWN_AND_LEFT
_UR = LIGHT_UP_AND_RIGHT
_UL = LIGHT_UP_AND_LEFT
_VR = LIGHT_VERTICAL_AND_RIGHT
_VL = LIGHT_VERTICAL_AND_LEFT
_DH = LIGHT_DOWN_AND_HORIZONTAL
_UH = LIGHT_UP_AND_HORIZONTAL
_VH = LIGHT_VERTICAL_AND_HORIZONTAL

_JOINTS_LIST = [
    (_H, _V, _VH), (_H, _DR, _DH), (_H, _DL, _DH), (_H, _UR, _UH), (_H, _UL, _UH),
    (_H, _VR, _VH), (_H, _VL, _VH), (_H, _DH, _DH), (_H, _UH, _UH), (_H, _VH, _VH),
    (_V, _DR, _VR), (_V, _DL, _VL), (_V, _UR, _VR), (_V, _UL, _VL), (_V, _VR, _VR),
    (_V, _VL, _VL), (_V, _DH, _VH), (_V, _UH, _VH), (_V, _VH, _VH),
    (_DR, _DL, _DH), (_DR, _UR, _VR), (_DR, _UL, _VH), (_DR, _VR, _VR),
    (_DR, _VL, _VH), (_DR, _DH, _DH), (_DR, _UH, _VH), (_DR, _VH, _VH),
    (_DL, _UR, _VH), (_DL, _UL, _VL), (_DL, _VR, _VH), (_DL, _VL, _VL),
    (_DL, _DH, _DH), (_DL, _UH, _VH), (_DL, _VH, _VH),
    (_UR, _UL, _UH), (_UR, _VR, _VR), (_UR, _VL, _VH), (_UR, _DH, _VH),
    (_UR, _UH, _UH), (_UR, _VH, _VH),
    (_UL, _VR, _VH), (_UL, _VL, _VL), (_UL, _DH, _VH), (_UL, _UH, _UH), (_UL, _VH, _VH),
    (_VR, _VL, _VH), (_VR, _DH, _VH), (_VR, _UH, _VH), (_VR, _VH, _VH),
    (_VL, _DH, _VH), (_VL, _UH, _VH), (_VL, _VH, _VH),
    (_DH, _UH, _VH), (_DH, _VH, _VH),
    (_UH, _VH, _VH),
]

JOINTS: dict[tuple[str, str], str] = {
    (min(a, b), max(a, b)): result for a, b, result in _JOINTS_LIST
}


def lookup_joint(first: str, second: str) -> Optional[str]:
    """Return the character joining two line characters, in either order.

    Returns ``None`` when the pair has no known joint.
    """
    return JOINTS.get((min(first, second), max(first, second)))