"""Class roster, gradebook and student queue for the console."""

__version__ = "0.1.0"
__all__ = ["queue", "roster", "grades"]