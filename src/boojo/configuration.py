# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Optional, TypedDict

from yaml import load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]
import platformdirs

APP_NAME = "boojo"
APP_VERSION = "0.1.0"

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"

# Set dynamically by load_data_path_configuration()
DATA_PATH: Path = platformdirs.user_data_path(APP_NAME)

LOG_CATEGORIES = ("daily", "monthly", "future")
DEFAULT_LOG_CATEGORY = "daily"


class Configuration(TypedDict):
    data_path: Optional[str]
    default_log: str
    show_header: bool


def get_default_configuration() -> Configuration:
    return {
        "data_path": None,
        "default_log": DEFAULT_LOG_CATEGORY,
        "show_header": True,
    }


def load_data_path_configuration() -> None:
    """
    Load the configuration and set DATA_PATH from its data_path setting.

    Must run before any log file is resolved.
    """
    global DATA_PATH

    if not APP_CONFIG_PATH.is_file():
        return

    config = load(APP_CONFIG_PATH.read_text(), Loader=Loader)
    if not isinstance(config, dict):
        return

    data_path_setting = config.get("data_path")
    if data_path_setting is not None:
        DATA_PATH = Path(data_path_setting).expanduser()
