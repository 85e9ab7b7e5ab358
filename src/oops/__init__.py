"""Oops - typo correction for console commands."""

__version__ = "0.1.0"

# Top-level exports load their modules on first use, so importing the
# package for __version__ stays cheap.
def __getattr__(name: str):
    """Resolve top-level exports on demand."""
    if name == "CorrectionController":
        from oops.core import CorrectionController
        return CorrectionController
    elif name == "FuzzyMatcher":
        from oops.recovery.fuzzy import FuzzyMatcher
        return FuzzyMatcher
    elif name == "PendingCorrectionStore":
        from oops.recovery.pending import PendingCorrectionStore
        return PendingCorrectionStore
    elif name == "AliasOverlay":
        from oops.registry.overlay import AliasOverlay
        return AliasOverlay
    elif name == "OopsConfig":
        from oops.config import OopsConfig
        return OopsConfig
    elif name == "ConsoleHost":
        from oops.console.host import ConsoleHost
        return ConsoleHost
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")


__all__ = [
    "CorrectionController",
    "FuzzyMatcher",
    "PendingCorrectionStore",
    "AliasOverlay",
    "OopsConfig",
    "ConsoleHost",
]
