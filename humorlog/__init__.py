"""An interactive mood journal: daily moods, reasons and scores, kept in memory."""

__version__ = "0.1.0"
__all__ = ["__version__"]