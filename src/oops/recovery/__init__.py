"""Command correction: fuzzy matching and pending corrections."""

from .fuzzy import FuzzyMatcher, find_correction, rank_names, threshold_for
from .pending import PendingCorrectionStore

__all__ = [
    "FuzzyMatcher",
    "PendingCorrectionStore",
    "find_correction",
    "rank_names",
    "threshold_for",
]
