import os
from typing import IO

import yaml

from wordcrawl.exceptions import ConfigurationError


class ConfigFileStore:
    """Filesystem/YAML IO for crawl configuration files.

    Responsibility: read and parse JSON or YAML documents (YAML is a
    superset of JSON, so one loader handles both). It does NOT validate
    the crawl settings themselves.
    """

    def load_dict(self, config_path: str) -> dict:
        """Return the parsed mapping stored at `config_path`."""
        full_path = os.path.abspath(config_path)
        if not os.path.isfile(full_path):
            raise ConfigurationError("config file not found", source=config_path)
        try:
            with open(full_path, "r", encoding="utf-8") as f:
                return self.read_dict(f, source=config_path)
        except OSError as e:
            raise ConfigurationError(f"could not read config file: {e}", source=config_path) from e

    def read_dict(self, stream: IO[str], source: str = "<stream>") -> dict:
        try:
            data = yaml.safe_load(stream)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"malformed config: {e}", source=source) from e
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigurationError("config must be a mapping", source=source)
        return data
