from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass
class GlobalConfig:
    """
    Parsed global.json.

    - ui_title: browser tab / navbar title
    - records_path: seed record file (JSON or CSV), already resolved
    """
    ui_title: str
    records_path: Path
