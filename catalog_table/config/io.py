from __future__ import annotations

import json
import logging

from pathlib import Path
from typing import Tuple

import pandas as pd

from catalog_table.config.model import GlobalConfig
from catalog_table.core.exceptions import ConfigError
from catalog_table.core.record import Record
from catalog_table.validation.record_validation import validate_seed_frame

logger = logging.getLogger(__name__)

DEFAULT_UI_TITLE = "Catalog"


def load_global_config(root: Path) -> GlobalConfig:
    """
    Load configuration from a config directory.

    Expected structure:

        root/
            global.json
            records.json   (or any file named by 'records_file')

    global.json keys:

    - ui_title: title for UI, defaults to 'Catalog'
    - records_file: seed record file. If relative, it is resolved relative to 'root'.

    :param root: Directory containing 'global.json'.
    :return: A GlobalConfig instance.
    :raises FileNotFoundError: if global.json does not exist.
    :raises ConfigError: if 'records_file' is missing.
    """
    root = Path(root)
    logger.info(
        "Loading global config",
        extra={"config_root": str(root)},
    )

    global_path = root / "global.json"
    if not global_path.is_file():
        raise FileNotFoundError(f"File not found at {global_path}")

    with global_path.open() as f:
        raw_global = json.load(f)

    records_file = raw_global.get("records_file")
    if not records_file:
        raise ConfigError(f"'records_file' is not set in {global_path}")

    records_path = Path(records_file)
    if not records_path.is_absolute():
        records_path = (root / records_path).resolve()

    return GlobalConfig(
        ui_title=raw_global.get("ui_title", DEFAULT_UI_TITLE),
        records_path=records_path,
    )


def read_seed_frame(path: Path) -> pd.DataFrame:
    """
    Read a seed file into a DataFrame without any type or date coercion,
    so that dates stay exactly as written.
    """
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"Seed file not found at {path}")

    suffix = path.suffix.lower()
    if suffix == ".json":
        return pd.read_json(path, orient="records", dtype=False, convert_dates=False)
    if suffix == ".csv":
        return pd.read_csv(
            path,
            dtype={"name": str, "category": str, "date": str},
            keep_default_na=False,
            na_values=[""],
        )
    raise ConfigError(f"Unsupported seed file type '{suffix}' for {path}, expected .json or .csv")


def records_from_frame(df: pd.DataFrame) -> Tuple[Record, ...]:
    """
    Validate a seed frame and turn each row into a Record.

    Rows without an id column get positional ids 1..n.
    """
    validate_seed_frame(df)

    df = df.reset_index(drop=True)
    if "id" not in df.columns:
        df = df.assign(id=range(1, len(df) + 1))

    return tuple(Record.from_dict(_native(row)) for row in df.to_dict("records"))


def load_seed_records(path: Path) -> Tuple[Record, ...]:
    df = read_seed_frame(path)
    records = records_from_frame(df)

    logger.info("Seed records loaded",
                extra={"records_path": str(path),
                       "n_records": len(records)})
    return records


def load_app_data(root: Path) -> Tuple[GlobalConfig, Tuple[Record, ...]]:
    """
    Main entrypoint used by the UI: global config plus the seed records it names.
    """
    global_config = load_global_config(root)
    return global_config, load_seed_records(global_config.records_path)


def _native(row: dict) -> dict:
    # numpy scalars -> plain Python so ids round-trip through dcc.Store JSON
    return {k: (v.item() if hasattr(v, "item") else v) for k, v in row.items()}
