import pendulum
import pytest

from boojo import configuration
from boojo.repository.configuration import CONFIGURATION_REPO
from boojo.template.statistics import get_run_statistics_template
from boojo.view import state as view_state


@pytest.fixture
def stats():
    return get_run_statistics_template("daily")


@pytest.fixture
def today():
    return pendulum.date(2026, 10, 19)


@pytest.fixture
def data_dir(tmp_path, monkeypatch):
    """Point configuration and data paths at a temporary directory."""
    config_dir = tmp_path / "config"
    data_dir = tmp_path / "data"
    config_dir.mkdir()
    data_dir.mkdir()
    monkeypatch.setattr(configuration, "CONFIG_PATH", config_dir)
    monkeypatch.setattr(configuration, "APP_CONFIG_PATH", config_dir / "config.yaml")
    monkeypatch.setattr(configuration, "DATA_PATH", data_dir)
    monkeypatch.setattr(CONFIGURATION_REPO, "_config", None)
    monkeypatch.setattr(CONFIGURATION_REPO, "is_dirty", False)
    view_state.set_show_header(False)
    yield data_dir
    view_state.set_show_header(True)
