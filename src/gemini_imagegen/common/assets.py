"""Static asset helpers for the web page."""
from __future__ import annotations
from pathlib import Path

from gemini_imagegen.common.config import PACKAGE_STATIC_DIR

def load_asset(name: str, static_dir: str | Path | None = None) -> str:
    """
    Read a static asset as text.

    Args:
        name: File name inside the static directory, e.g. ``index.html``.
        static_dir: Directory to read from; defaults to the packaged assets.
    """
    base = Path(static_dir) if static_dir else PACKAGE_STATIC_DIR
    return (base / name).read_text(encoding="utf-8")
