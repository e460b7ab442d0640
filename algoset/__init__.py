"""Classic algorithms over sequences, strings, matrices and numbers."""

__version__ = "0.1.0"
__all__ = ["counting", "matrices", "numbers", "searching", "strings", "sums"]