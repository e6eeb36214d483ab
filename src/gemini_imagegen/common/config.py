"""Runtime settings, read once at process start."""
from __future__ import annotations
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from gemini_imagegen.core.adapter import DEFAULT_BASE_URL, DEFAULT_MODEL_ID, DEFAULT_TIMEOUT

PACKAGE_STATIC_DIR = Path(__file__).resolve().parent.parent / "static"


def load_cfg(path: str | Path) -> dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


@dataclass(frozen=True)
class Settings:
    """Configuration handed to the adapter, the web app and the CLI."""
    api_key: str | None = None
    model_id: str = DEFAULT_MODEL_ID
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    host: str = "0.0.0.0"
    port: int = 3000
    static_dir: Path = PACKAGE_STATIC_DIR

    @classmethod
    def from_env(cls, cfg_path: str | Path | None = None) -> "Settings":
        """
        Build settings from the environment, on top of an optional YAML file.

        Environment variables win over the file. The API key is only ever
        taken from ``GOOGLE_API_KEY``.

        Args:
            cfg_path: Optional YAML file with non-secret defaults.
        """
        cfg = load_cfg(cfg_path) if cfg_path else {}

        def pick(env: str, key: str, default: Any) -> Any:
            # Empty env vars and null YAML keys fall through to the default.
            value = os.getenv(env) or cfg.get(key)
            return default if value is None else value

        return cls(
            api_key=os.getenv("GOOGLE_API_KEY") or None,
            model_id=pick("GEMINI_MODEL_ID", "model_id", DEFAULT_MODEL_ID),
            base_url=pick("GEMINI_BASE_URL", "base_url", DEFAULT_BASE_URL),
            timeout=float(pick("REQUEST_TIMEOUT", "timeout", DEFAULT_TIMEOUT)),
            host=pick("HOST", "host", "0.0.0.0"),
            port=int(pick("PORT", "port", 3000)),
            static_dir=Path(pick("STATIC_DIR", "static_dir", PACKAGE_STATIC_DIR)),
        )
