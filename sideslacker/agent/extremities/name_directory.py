"""Read-only lookup from a spoken name to a chat handle."""

from __future__ import annotations

import json
from pathlib import Path
from types import MappingProxyType
from typing import Mapping

from sideslacker.agent.observability.log_manager import get_component_logger
from sideslacker.config.settings import get_name_directory_path

logger = get_component_logger("extremities.name_directory")

DEFAULT_HANDLES: Mapping[str, str] = MappingProxyType(
    {
        "Geoff": "@geoff",
        "Jay": "@jay",
        "Josh": "@josh",
        "Kathy": "@kathyhoang",
        "Keenan": "@keenan",
        "Kevin": "@kevin",
        "Colin": "@khaullen",
        "Kyleigh": "@kyleigh",
        "Eric": "@liueric",
        "Nate": "@nate",
        "Nina": "@nina",
        "Paul V": "@paul",
        "Paul L": "@paull",
        "Will": "@will",
    }
)


class NameDirectory:
    def __init__(self, handles: Mapping[str, str] | None = None) -> None:
        source = DEFAULT_HANDLES if handles is None else handles
        self._handles = MappingProxyType(
            {_normalize(name): str(handle) for name, handle in source.items()}
        )

    def lookup(self, name: str) -> str | None:
        return self._handles.get(_normalize(name))

    def mention(self, name: str) -> str:
        return self.lookup(name) or name

    def __len__(self) -> int:
        return len(self._handles)


def load_name_directory(path: Path | None = None) -> NameDirectory:
    path = path or get_name_directory_path()
    if path is None:
        return NameDirectory()
    payload = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(payload, dict):
        raise ValueError(f"name directory must be a JSON object: {path}")
    logger.info("event=name_directory.loaded path=%s entries=%s", path, len(payload))
    return NameDirectory({str(k): str(v) for k, v in payload.items()})


def _normalize(name: str) -> str:
    return " ".join(str(name or "").split()).casefold()
