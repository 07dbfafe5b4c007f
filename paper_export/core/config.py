"""Configuration helpers for paper-export."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from .errors import ConfigError

# Dropbox splits its API across two hosts: RPC calls return JSON, content
# calls return the file body and take their arguments in a header.
API_BASE = "https://api.dropboxapi.com/2"
CONTENT_BASE = "https://content.dropboxapi.com/2"

TOKEN_ENV = "DROPBOX_ACCESS_TOKEN"
SOURCE_ROOT_ENV = "PAPER_EXPORT_SOURCE_ROOT"
OUT_DIR_ENV = "PAPER_EXPORT_OUT_DIR"

DEFAULT_SOURCE_ROOT = "/Migrated Paper Docs"
DEFAULT_OUT_DIR = "output_paper_markdown"
SOURCE_EXT = ".paper"
OUTPUT_EXT = ".md"
EXPORT_FORMAT = "markdown"


@dataclass(frozen=True)
class ExportConfig:
    source_root: str = DEFAULT_SOURCE_ROOT
    out_dir: Path = Path(DEFAULT_OUT_DIR)
    source_ext: str = SOURCE_EXT
    output_ext: str = OUTPUT_EXT
    export_format: str = EXPORT_FORMAT
    recursive: bool = True
    debug: bool = False


def load_config(debug: bool = False) -> ExportConfig:
    """Build the run configuration from defaults and environment."""
    source_root = os.getenv(SOURCE_ROOT_ENV) or DEFAULT_SOURCE_ROOT
    out_dir = os.getenv(OUT_DIR_ENV) or DEFAULT_OUT_DIR
    return ExportConfig(
        source_root=source_root.rstrip("/") or "/",
        out_dir=Path(out_dir),
        debug=debug,
    )


def get_token() -> str:
    """Return the Dropbox access token or raise :class:`ConfigError`."""
    token = (os.getenv(TOKEN_ENV) or "").strip()
    if not token:
        raise ConfigError(f"{TOKEN_ENV} is not set")
    return token
