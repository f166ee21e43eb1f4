"""Stored connection settings of the image-generation server."""

from __future__ import annotations

import json
from pathlib import Path


class ServerConfig:
    """Base URL, token and polling interval, kept in a JSON file."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        self.base_url = ""
        self.token = ""
        self.interval = 0

    def _as_dict(self) -> dict[str, object]:
        return {"base_url": self.base_url, "token": self.token, "interval": self.interval}

    def update(self, base_url: str, token: str, interval: int) -> None:
        """Change non-empty fields and the interval, then save."""
        if base_url:
            self.base_url = base_url
        if token:
            self.token = token
        self.interval = int(interval)
        self.path.write_text(
            json.dumps(self._as_dict(), ensure_ascii=False, separators=(",", ":")) + "\n",
            encoding="utf-8",
        )

    def load(self) -> None:
        """Read the file unless every field is already set."""
        if self.base_url and self.token and self.interval != 0:
            return
        if not self.path.exists():
            raise FileNotFoundError("no server config")
        with self.path.open(encoding="utf-8") as fh:
            data = json.load(fh)
        self.base_url = str(data.get("base_url", self.base_url))
        self.token = str(data.get("token", self.token))
        self.interval = int(data.get("interval", self.interval))