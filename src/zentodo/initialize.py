# SPDX-License-Identifier: MIT

from yaml import dump

try:
    from yaml import CDumper as Dumper
except ImportError:
    from yaml import Dumper  # type: ignore[assignment]

from zentodo import configuration
from zentodo.logging_setup import setup_logging
from zentodo.repository.configuration import CONFIGURATION_REPO


def initialize() -> None:
    configuration.CONFIG_PATH.mkdir(parents=True, exist_ok=True)
    configuration.load_data_path_configuration()
    configuration.DATA_PATH.mkdir(parents=True, exist_ok=True)

    __ensure_config_files()


def initialize_logging() -> None:
    config = CONFIGURATION_REPO.get_config()
    setup_logging(configuration.LOG_PATH, console_level=config["log_level"].upper())


def __ensure_config_files() -> None:
    if not configuration.APP_CONFIG_PATH.is_file():
        configuration.APP_CONFIG_PATH.touch()
        config = configuration.get_default_configuration()
        configuration.APP_CONFIG_PATH.write_text(
            dump(config, Dumper=Dumper, allow_unicode=True), encoding="utf-8"
        )
