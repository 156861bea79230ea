"""Menus of filter families, types, audio sources and processing options."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, Iterable, List, Optional, Tuple

VOLUME_RANGE_DB: Tuple[float, float] = (-40.0, 12.0)
TEMPO_SLIDER_RANGE: Tuple[float, float] = (-2.0, 2.0)
SMOOTHING_TRANSITION_SAMPLES = 1024
DEFAULT_STATE_TYPE_ID = 1
DEFAULT_SMOOTHING_ID = 1
DEFAULT_FAMILY_ID = 1
DEFAULT_AUDIO_ID = 1


class Family(IntEnum):
    """Filter families, numbered as their menu items."""

    RBJ = 1
    BUTTERWORTH = 2
    CHEBYSHEV_I = 3
    CHEBYSHEV_II = 4
    ELLIPTIC = 5
    BESSEL = 6
    LEGENDRE = 7
    CUSTOM = 8


@dataclass(frozen=True)
class MenuItem:
    """One entry of a drop-down menu."""

    name: str
    item_id: int
    enabled: bool = True


_FAMILY_NAMES: Dict[Family, str] = {
    Family.RBJ: "RBJ Biquad",
    Family.BUTTERWORTH: "Butterworth",
    Family.CHEBYSHEV_I: "Chebyshev I",
    Family.CHEBYSHEV_II: "Chebyshev II",
    Family.ELLIPTIC: "Elliptic",
    Family.BESSEL: "Bessel",
    Family.LEGENDRE: "Legendre",
    Family.CUSTOM: "Custom",
}

# Equivalent types share an item id across families, so a selection can
# carry over when the family changes.
_RBJ_TYPES = (
    ("Low Pass", 1),
    ("High Pass", 2),
    ("Band Pass 1", 3),
    ("Band Pass 2", 4),
    ("Band Stop", 5),
    ("Low Shelf", 6),
    ("High Shelf", 7),
    ("Band Shelf", 8),
    ("All Pass", 9),
)

_SHELVING_TYPES = (
    ("Low Pass", 1),
    ("High Pass", 2),
    ("Band Pass", 4),
    ("Band Stop", 5),
    ("Low Shelf", 6),
    ("High Shelf", 7),
    ("Band Shelf", 8),
)

_BASIC_TYPES = (
    ("Low Pass", 1),
    ("High Pass", 2),
    ("Band Pass", 4),
    ("Band Stop", 5),
)

_CUSTOM_TYPES = (
    ("Two-Pole", 1),
    ("One-Pole", 2),
)

_TYPES: Dict[Family, Tuple[Tuple[str, int], ...]] = {
    Family.RBJ: _RBJ_TYPES,
    Family.BUTTERWORTH: _SHELVING_TYPES,
    Family.CHEBYSHEV_I: _SHELVING_TYPES,
    Family.CHEBYSHEV_II: _SHELVING_TYPES,
    Family.ELLIPTIC: _BASIC_TYPES,
    Family.BESSEL: _BASIC_TYPES,
    Family.LEGENDRE: _BASIC_TYPES,
    Family.CUSTOM: _CUSTOM_TYPES,
}

_ORDERS: Dict[Family, Optional[int]] = {
    Family.RBJ: None,
    Family.BUTTERWORTH: 50,
    Family.CHEBYSHEV_I: 50,
    Family.CHEBYSHEV_II: 50,
    Family.ELLIPTIC: 50,
    Family.BESSEL: 25,
    Family.LEGENDRE: 25,
    Family.CUSTOM: None,
}


def family_menu() -> List[MenuItem]:
    """Every filter family, in menu order."""
    return [MenuItem(_FAMILY_NAMES[family], int(family)) for family in Family]


def type_menu(family_id: int) -> List[MenuItem]:
    """Filter types offered for a family; an unknown family offers none."""
    try:
        family = Family(family_id)
    except ValueError:
        return []
    return [MenuItem(name, item_id) for name, item_id in _TYPES[family]]


def audio_menu() -> List[MenuItem]:
    """Audio sources that can be played through the filter."""
    return [
        MenuItem("Amen Break", 1),
        MenuItem("Sine Wave (440Hz)", 2),
        MenuItem("White Noise", 3),
        MenuItem("Pink Noise", 4),
    ]


def state_type_menu() -> List[MenuItem]:
    """Filter state realisations; the last two are not available."""
    return [
        MenuItem("Direct Form I", 1),
        MenuItem("Direct Form II", 2),
        MenuItem("Transposed Direct Form I", 3),
        MenuItem("Transposed Direct Form II", 4),
        MenuItem("Lattice Form", 5, enabled=False),
        MenuItem("State Variable", 6, enabled=False),
    ]


def smoothing_menu() -> List[MenuItem]:
    """Ways of smoothing parameter changes; the interpolating ones are not available."""
    return [
        MenuItem("Parameter Smoothing", 1),
        MenuItem("Pole/Zero Interpolation", 2, enabled=False),
        MenuItem("Coefficient Interpolation", 3, enabled=False),
        MenuItem("No Smoothing", 4),
    ]


def design_order(family_id: int) -> Optional[int]:
    """Largest order a family's designs support, or None when it has no order."""
    return _ORDERS[Family(family_id)]


def choose_type_id(menu: Iterable[MenuItem], last_type_id: int) -> int:
    """Type to select after a family change: the previous one if the new menu has it, else 1."""
    if last_type_id != 0 and any(item.item_id == last_type_id for item in menu):
        return last_type_id
    return 1


def tempo_for_slider(value: float) -> float:
    """Playback tempo factor for a tempo slider position."""
    return 1.2 ** value