"""check_fstat: count open files reported by fstat and alert on thresholds."""

__version__ = "1.0.0"
