"""Runtime settings, read from the environment (and a ``.env`` file).

| Variable              | Default                       |
|-----------------------|-------------------------------|
| ``AVGEEK_DATA_DIR``   | ``~/.avgeek``                 |
| ``AVGEEK_AIRCRAFT_DB``| bundled ``aircraft_db.json``  |
| ``AVGEEK_AIRPORTS_DB``| bundled ``airports_db.json``  |
| ``AVGEEK_KV_BACKEND`` | ``file`` (or ``firestore``)   |
| ``AVGEEK_DEVICE_ID``  | ``local``                     |
| ``CORS_ORIGINS``      | ``http://localhost:5173``     |
"""

from __future__ import annotations

import os
from enum import Enum
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field

from avgeek.persistence.catalog import AIRCRAFT_DB, AIRPORTS_DB, bundled_dataset

SETTINGS_FILE = "settings.json"


class KVBackend(str, Enum):
    FILE = "file"
    FIRESTORE = "firestore"


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    data_dir: Path = Field(default_factory=lambda: Path.home() / ".avgeek")
    aircraft_db: Path = Field(default_factory=lambda: bundled_dataset(AIRCRAFT_DB))
    airports_db: Path = Field(default_factory=lambda: bundled_dataset(AIRPORTS_DB))
    kv_backend: KVBackend = KVBackend.FILE
    device_id: str = "local"
    cors_origins: list[str] = Field(default_factory=lambda: ["http://localhost:5173"])

    @property
    def settings_path(self) -> Path:
        return self.data_dir / SETTINGS_FILE

    @classmethod
    def from_env(cls, load_env_file: bool = True) -> "Settings":
        if load_env_file:
            load_dotenv()
        values: dict = {}
        if data_dir := os.environ.get("AVGEEK_DATA_DIR"):
            values["data_dir"] = Path(data_dir).expanduser()
        if aircraft_db := os.environ.get("AVGEEK_AIRCRAFT_DB"):
            values["aircraft_db"] = Path(aircraft_db).expanduser()
        if airports_db := os.environ.get("AVGEEK_AIRPORTS_DB"):
            values["airports_db"] = Path(airports_db).expanduser()
        if backend := os.environ.get("AVGEEK_KV_BACKEND"):
            values["kv_backend"] = backend.strip().lower()
        if device_id := os.environ.get("AVGEEK_DEVICE_ID"):
            values["device_id"] = device_id
        if origins := os.environ.get("CORS_ORIGINS"):
            values["cors_origins"] = [o.strip() for o in origins.split(",") if o.strip()]
        return cls(**values)
