"""Invoice and proposal document-value computation service."""

__version__ = "1.0.0"
