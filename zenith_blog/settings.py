import os
from pathlib import Path
from typing import List, NamedTuple

import dotenv

dotenv.load_dotenv()

DEFAULT_CORS_ORIGINS = [
    "http://localhost:3000",
    "http://localhost:8080",
    "http://127.0.0.1:3000",
    "http://127.0.0.1:8080",
]


class Settings(NamedTuple):
    db_url: str
    host: str
    port: int
    cors_origins: List[str]
    api_base_url: str
    prefs_path: Path


def _split_origins(raw: str | None) -> List[str]:
    if not raw:
        return list(DEFAULT_CORS_ORIGINS)
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


def load_settings() -> Settings:
    """
    Reads configuration from the environment (and .env, if present).

    Example .env:
    DB_URL=sqlite+aiosqlite:///./zenith.db
    ZENITH_PORT=3000
    ZENITH_CORS_ORIGINS=http://localhost:4200,http://localhost:3000
    """
    host = os.environ.get("ZENITH_HOST", "127.0.0.1")
    port = int(os.environ.get("ZENITH_PORT", "3000"))
    return Settings(
        db_url=os.environ.get("DB_URL", "sqlite+aiosqlite:///./zenith.db"),
        host=host,
        port=port,
        cors_origins=_split_origins(os.environ.get("ZENITH_CORS_ORIGINS")),
        api_base_url=os.environ.get(
            "ZENITH_API_BASE_URL", f"http://{host}:{port}"
        ).rstrip("/"),
        prefs_path=Path(
            os.environ.get(
                "ZENITH_PREFS_PATH", str(Path.home() / ".zenith" / "prefs.json")
            )
        ),
    )
