"""Export Dropbox Paper documents to Markdown files on disk."""

__version__ = "0.1.0"
