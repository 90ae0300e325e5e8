import os

import yaml

from wordcrawl.exceptions import SettingsFileError


class SettingsFileStore:
    """Filesystem/YAML IO for crawler settings files.

    Responsibility: locate, read, and parse YAML files on disk.
    Interpreting the parsed values is left to CrawlerSettingsParser.
    """

    def __init__(self, *, base_dir: str | None = None):
        self.base_dir = base_dir or os.getcwd()

    def _resolve_path(self, path: str) -> str:
        return path if os.path.isabs(path) else os.path.join(self.base_dir, path)

    def load_yaml_dict(self, path: str) -> dict:
        """Return the parsed YAML mapping at `path`; an empty file yields {}."""
        full_path = self._resolve_path(path)
        if not os.path.isfile(full_path):
            raise SettingsFileError(path)
        try:
            with open(full_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise SettingsFileError(path, f"could not be read: {e}") from e
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise SettingsFileError(path, "must contain a mapping at the top level")
        return data
