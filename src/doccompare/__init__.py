"""doccompare - structured comparison of stored document versions."""

__version__ = "0.1.0"
