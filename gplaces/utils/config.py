import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from gplaces.infrastructure.providers.places.service import BASE_URL

API_KEY_ENV = "GOOGLE_MAPS_API_KEY"


def load_env():
    # load .env from the ROOT of the repo
    env_path = Path(__file__).resolve().parents[2] / ".env"
    load_dotenv(env_path)
    return os.getenv


@dataclass(frozen=True)
class Settings:
    api_key: str
    base_url: str = BASE_URL
    timeout_sec: float = 20

    # a next_page_token needs ~2s before upstream accepts it
    page_delay_sec: float = 2.0
    # upstream serves at most 3 pages (60 results) per search
    max_pages: int = 3

    log_level: str = "INFO"


def load_settings() -> Settings:
    key = os.getenv(API_KEY_ENV, "").strip()
    if not key:
        raise ValueError(
            f"Missing {API_KEY_ENV}.\n"
            "Add it to a .env file at the repo root or export it, e.g.\n"
            f"  export {API_KEY_ENV}='YOUR_KEY'"
        )

    return Settings(
        api_key=key,
        base_url=os.getenv("GPLACES_BASE_URL") or BASE_URL,
        timeout_sec=float(os.getenv("GPLACES_TIMEOUT_SEC") or 20),
        page_delay_sec=float(os.getenv("GPLACES_PAGE_DELAY_SEC") or 2.0),
        max_pages=int(os.getenv("GPLACES_MAX_PAGES") or 3),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
    )
