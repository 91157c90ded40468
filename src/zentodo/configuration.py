# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Optional, TypedDict

from yaml import load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]
import platformdirs

APP_NAME = "zentodo"

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"
LOG_PATH = platformdirs.user_log_path(APP_NAME)

# Namespaced key the local task list is stored under
LOCAL_TASKS_KEY = "zen_todo_tasks"

# These will be set dynamically by load_data_path_configuration()
DATA_PATH: Path = platformdirs.user_data_path(APP_NAME)
DATA_TASKS_PATH: Path = DATA_PATH / "tasks.yaml"
DATA_CLOUD_PATH: Path = DATA_PATH / "cloud.yaml"
DATA_IDENTITY_PATH: Path = DATA_PATH / "identity.yaml"


class Configuration(TypedDict):
    mode: str
    default_category: str
    default_priority: str
    seed_sample_tasks: bool
    cloud_user: Optional[str]
    data_path: Optional[str]
    log_level: str


def get_default_configuration() -> Configuration:
    return {
        "mode": "local",
        "default_category": "工作",
        "default_priority": "medium",
        "seed_sample_tasks": True,
        "cloud_user": None,
        "data_path": None,
        "log_level": "WARNING",
    }


def set_data_path(data_path: Path) -> None:
    global DATA_PATH, DATA_TASKS_PATH, DATA_CLOUD_PATH, DATA_IDENTITY_PATH

    DATA_PATH = data_path
    DATA_TASKS_PATH = DATA_PATH / "tasks.yaml"
    DATA_CLOUD_PATH = DATA_PATH / "cloud.yaml"
    DATA_IDENTITY_PATH = DATA_PATH / "identity.yaml"


def load_data_path_configuration() -> None:
    """
    Load the configuration and set the DATA_PATH variables dynamically.

    This must be called after the config file exists and before any
    repositories touch the data directory.
    """
    if not APP_CONFIG_PATH.is_file():
        # Config doesn't exist yet, use defaults
        return

    config: Optional[Configuration] = load(
        APP_CONFIG_PATH.read_text(encoding="utf-8"), Loader=Loader
    )
    if config is None:
        return

    data_path_setting = config.get("data_path")
    if data_path_setting is not None:
        set_data_path(Path(data_path_setting))
