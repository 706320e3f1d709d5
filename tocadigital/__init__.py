"""Song and podcast catalogue: loading from semicolon-separated files and report generation."""

__version__ = "0.1.0"