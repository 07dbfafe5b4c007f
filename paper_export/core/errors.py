"""Exception types raised by the exporter."""

from __future__ import annotations


class PaperExportError(Exception):
    """Base class for paper-export errors.

    Raised out of :func:`~paper_export.core.pipeline.run_export` only for
    fatal conditions; :class:`ApiError` from an export call is handled per
    document.
    """


class ConfigError(PaperExportError):
    pass


class ListingError(PaperExportError):
    pass


class OutputError(PaperExportError):
    pass


class ApiError(PaperExportError):
    """HTTP or network failure talking to Dropbox.

    ``status`` is ``None`` when the request never got a response (DNS,
    connection refused, timeout).
    """

    def __init__(self, message: str, status: int | None = None, url: str | None = None):
        super().__init__(message)
        self.status = status
        self.url = url
