"""
Простой загрузчик/сохранитель настроек парсера в формате JSON.
Если файл не найден или повреждён – используются настройки по‑умолчанию.
Уровень логирования из файла применяется к логгеру пакета сразу при загрузке.
"""

import copy
import json
from pathlib import Path
from objmesh.utils.logger import logger, set_level

DEFAULT_CONFIG = {
    "parser": {
        "deduplicate": False,
        "missing_attribute": "zero",   # zero | nan
        "index_flush": "line",         # line | end
    },
    "log_level": "INFO",
}

class Config:
    """Объект конфигурации; каждый экземпляр независим."""

    def __init__(self, path: str = None):
        self.path = Path(path) if path is not None else None
        self._load()

    def _load(self):
        self.data = copy.deepcopy(DEFAULT_CONFIG)
        if self.path is None:
            return
        if not self.path.is_file():
            logger.info("[Config] No config file – using defaults.")
            return
        try:
            with self.path.open("r", encoding="utf-8") as f:
                loaded = json.load(f)
            self._check_shape(loaded)
        except (OSError, ValueError) as exc:
            logger.error(f"[Config] Failed to read config: {exc}")
            return
        self._merge(loaded)
        logger.info("[Config] Loaded configuration.")
        try:
            set_level(self["log_level"])
        except (TypeError, ValueError) as exc:
            logger.error(f"[Config] Bad log_level: {exc}")

    @staticmethod
    def _check_shape(loaded):
        if not isinstance(loaded, dict):
            raise ValueError(f"top level must be an object, got {type(loaded).__name__}")
        for key, default in DEFAULT_CONFIG.items():
            if isinstance(default, dict) and key in loaded and not isinstance(loaded[key], dict):
                raise ValueError(f"section '{key}' must be an object")

    def _merge(self, loaded: dict):
        for key, value in loaded.items():
            if isinstance(value, dict) and isinstance(self.data.get(key), dict):
                self.data[key].update(value)
            else:
                self.data[key] = value

    def save(self, path: str = None):
        if path is not None:
            self.path = Path(path)
        if self.path is None:
            raise ValueError("Config.save(): no path given")
        with self.path.open("w", encoding="utf-8") as f:
            json.dump(self.data, f, indent=4)
        logger.info("[Config] Configuration saved.")

    def parser_options(self) -> dict:
        """Ключевые аргументы для ObjParser."""
        return dict(self["parser"])

    def __getitem__(self, key):
        return self.data.get(key, DEFAULT_CONFIG.get(key))

    def __setitem__(self, key, value):
        self.data[key] = value

    def get(self, key, default=None):
        return self.data.get(key, default)
