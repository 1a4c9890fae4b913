"""pdfblock: PDF.js viewer block with host environment checks."""

__version__ = "1.3.2"
