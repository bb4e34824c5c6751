"""Classic array, sorting, searching, hashing and backtracking algorithms."""

__version__ = "0.1.0"
__all__ = ["arrays", "sorting", "searching", "hashing", "backtracking"]