"""Array, matrix, interval and k-sum algorithms on plain Python lists."""

__version__ = "0.1.0"
__all__ = ["arrays", "matrix", "sums", "intervals"]