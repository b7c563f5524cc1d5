"""covkit - code-coverage summaries, merging and format conversion."""

__version__ = "0.1.0"
