"""Small algorithms: wall painting cost, course scheduling and frequency sorting."""

__version__ = "0.1.0"
__all__ = ["painting", "courses", "frequency"]