from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, List

import yaml


DEFAULT_CONFIG_PATH = Path("config.yaml")


def load_config(path: str | os.PathLike | None = None) -> Dict[str, Any]:
    cfg_path = Path(path) if path else DEFAULT_CONFIG_PATH
    with open(cfg_path, "r") as f:
        return yaml.safe_load(f) or {}


def data_dir(cfg: Dict[str, Any]) -> Path:
    return Path(cfg.get("paths", {}).get("data", "."))


def outputs_dir(cfg: Dict[str, Any]) -> Path:
    return Path(cfg.get("paths", {}).get("outputs", "outputs"))


def summary_years(cfg: Dict[str, Any]) -> List[int]:
    return list(cfg.get("summary", {}).get("years", []))


__all__ = ["load_config", "data_dir", "outputs_dir", "summary_years", "DEFAULT_CONFIG_PATH"]
