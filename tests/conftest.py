import json
import sys
from pathlib import Path

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import pandas as pd
import pytest
import yaml

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from fars_analysis.utils.io import make_filename

FIXTURE_YEARS = (2013, 2014, 2015)


def _year_frame(year: int) -> pd.DataFrame:
    rows = []
    for month in range(1, 13):
        for i in range(month + (year - 2013)):
            rows.append(
                {
                    "STATE": 1 if i % 2 == 0 else 6,
                    "ST_CASE": len(rows) + 10001,
                    "MONTH": month,
                    "LATITUDE": 32.0 + (i % 4) * 0.5,
                    "LONGITUD": -86.0 - (i % 5) * 0.5,
                    "FATALS": 1 + i % 3,
                }
            )
    # unknown positions, coded the way FARS does
    rows.append({"STATE": 1, "ST_CASE": 19001, "MONTH": 1, "LATITUDE": 33.25, "LONGITUD": 999.9999, "FATALS": 1})
    rows.append({"STATE": 1, "ST_CASE": 19002, "MONTH": 2, "LATITUDE": 99.9999, "LONGITUD": -87.25, "FATALS": 2})
    rows.append({"STATE": 56, "ST_CASE": 19003, "MONTH": 5, "LATITUDE": 99.9999, "LONGITUD": 999.9999, "FATALS": 1})
    return pd.DataFrame(rows)


def write_fars_file(directory: Path, year: int, df: pd.DataFrame) -> Path:
    path = directory / make_filename(year)
    df.to_csv(path, index=False, compression="bz2")
    return path


@pytest.fixture(scope="session")
def fars_frames():
    return {year: _year_frame(year) for year in FIXTURE_YEARS}


@pytest.fixture(scope="session")
def fars_dir(tmp_path_factory, fars_frames) -> Path:
    directory = tmp_path_factory.mktemp("fars")
    for year, df in fars_frames.items():
        write_fars_file(directory, year, df)
    return directory


@pytest.fixture
def config_path(tmp_path, fars_dir) -> Path:
    cfg = {
        "paths": {"data": str(fars_dir), "outputs": str(tmp_path / "outputs")},
        "summary": {"years": list(FIXTURE_YEARS)},
        "map": {"boundaries": None, "marker_size": 2},
    }
    path = tmp_path / "config.yaml"
    path.write_text(yaml.safe_dump(cfg))
    return path


@pytest.fixture(scope="session")
def outline_file(tmp_path_factory) -> Path:
    outline = {
        "type": "FeatureCollection",
        "features": [
            {
                "type": "Feature",
                "properties": {"name": "box"},
                "geometry": {
                    "type": "Polygon",
                    "coordinates": [[[-89, 31], [-85, 31], [-85, 35], [-89, 35], [-89, 31]]],
                },
            }
        ],
    }
    path = tmp_path_factory.mktemp("outlines") / "land.geojson"
    path.write_text(json.dumps(outline))
    return path


@pytest.fixture(autouse=True)
def geodatasets_requests(monkeypatch, outline_file):
    """Serve the local outline file for every geodatasets lookup, keeping tests offline."""
    import geodatasets

    requested = []

    def _get_path(name):
        requested.append(name)
        return str(outline_file)

    monkeypatch.setattr(geodatasets, "get_path", _get_path)
    return requested


@pytest.fixture(autouse=True)
def _close_figures():
    yield
    plt.close("all")


@pytest.fixture
def load_script():
    import importlib.util

    def _load(name: str):
        script_path = ROOT / "scripts" / name
        spec = importlib.util.spec_from_file_location(script_path.stem.lstrip("0123456789_"), script_path)
        module = importlib.util.module_from_spec(spec)
        assert spec.loader is not None
        spec.loader.exec_module(module)
        return module

    return _load
