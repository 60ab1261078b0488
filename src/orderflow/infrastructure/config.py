"""Runtime settings, read from environment variables."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

# When installed in editable mode the project root is the repo root.
_PROJECT_ROOT = Path(__file__).resolve().parents[3]


@dataclass(frozen=True)
class Settings:
    data_dir: Path
    product_service_url: str | None = None
    product_service_timeout: float = 5.0
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        env = os.environ if environ is None else environ

        raw_timeout = env.get("PRODUCT_SERVICE_TIMEOUT", "5.0")
        try:
            timeout = float(raw_timeout)
        except ValueError:
            raise ValueError(
                f"PRODUCT_SERVICE_TIMEOUT must be a number of seconds, got {raw_timeout!r}"
            ) from None

        url = env.get("PRODUCT_SERVICE_URL", "").strip().rstrip("/")

        return cls(
            data_dir=Path(env.get("ORDERFLOW_DATA_DIR", str(_PROJECT_ROOT / "data"))),
            product_service_url=url or None,
            product_service_timeout=timeout,
            log_level=env.get("ORDERFLOW_LOG_LEVEL", "WARNING").upper(),
        )
