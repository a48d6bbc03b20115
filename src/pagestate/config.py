import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

load_dotenv()


def _as_bool(val: Optional[str], default: bool = False) -> bool:
    if val is None:
        return default
    return str(val).lower() in {"1", "true", "yes", "y", "on"}


@dataclass
class Settings:
    store_url: str = "sqlite:///pagestate.db"
    storage_key: str = "resume-data"
    editable_selector: str = '[contenteditable="true"]'
    debug: bool = False

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            store_url=os.environ.get("PAGESTATE_STORE_URL") or "sqlite:///pagestate.db",
            storage_key=os.environ.get("PAGESTATE_STORAGE_KEY") or "resume-data",
            editable_selector=os.environ.get("PAGESTATE_EDITABLE_SELECTOR")
            or '[contenteditable="true"]',
            debug=_as_bool(os.environ.get("PAGESTATE_DEBUG"), False),
        )
