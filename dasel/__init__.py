"""Read and write structured data documents, and split selector strings."""

__version__ = "1.0.0"