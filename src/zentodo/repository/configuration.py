# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Optional

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from zentodo import configuration


class ConfigurationRepository:
    def __init__(self) -> None:
        self._config: Optional[configuration.Configuration] = None
        self.is_dirty = False

    @property
    def config(self) -> configuration.Configuration:
        if self._config is None:
            self.__load_data()
        if self._config is None:
            raise ValueError()
        return self._config

    def __load_data(self) -> None:
        self._config = load(
            configuration.APP_CONFIG_PATH.read_text(encoding="utf-8"), Loader=Loader
        )

        if self._config is None:
            raise ValueError()

        # Migration: back-fill settings added after the config file was written
        defaults = configuration.get_default_configuration()
        for key, value in defaults.items():
            if key not in self._config:
                self._config[key] = value  # type: ignore[literal-required]
                self.is_dirty = True

    def __save_data(self, config: configuration.Configuration) -> None:
        configuration.APP_CONFIG_PATH.write_text(
            dump(config, Dumper=Dumper, allow_unicode=True), encoding="utf-8"
        )

    def flush(self) -> None:
        if self._config is not None and self.is_dirty:
            self.__save_data(self._config)
            self.is_dirty = False

    def reset(self) -> None:
        self._config = None
        self.is_dirty = False

    def get_config(self) -> configuration.Configuration:
        return deepcopy(self.config)

    def update_config(
        self,
        mode: Optional[str] = None,
        default_category: Optional[str] = None,
        default_priority: Optional[str] = None,
        seed_sample_tasks: Optional[bool] = None,
        cloud_user: Optional[str] = None,
        remove_cloud_user: bool = False,
        data_path: Optional[str] = None,
        remove_data_path: bool = False,
        log_level: Optional[str] = None,
    ) -> None:
        self.is_dirty = True

        if mode is not None:
            self.config["mode"] = mode
        if default_category is not None:
            self.config["default_category"] = default_category
        if default_priority is not None:
            self.config["default_priority"] = default_priority
        if seed_sample_tasks is not None:
            self.config["seed_sample_tasks"] = seed_sample_tasks
        if cloud_user is not None:
            self.config["cloud_user"] = cloud_user
        if remove_cloud_user:
            self.config["cloud_user"] = None
        if data_path is not None:
            self.config["data_path"] = data_path
        if remove_data_path:
            self.config["data_path"] = None
        if log_level is not None:
            self.config["log_level"] = log_level


CONFIGURATION_REPO = ConfigurationRepository()
