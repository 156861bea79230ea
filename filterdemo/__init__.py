"""Response chart models, window size constraints and menu catalogues for exploring digital audio filters."""

__version__ = "1.1.0"

__all__ = [
    "catalog",
    "constrainer",
    "gainchart",
    "geometry",
    "groupdelaychart",
    "phasechart",
    "polezerochart",
    "stepresponsechart",
]