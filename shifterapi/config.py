"""配置管理：从 YAML 加载默认配置，并可用用户配置文件覆盖"""
import yaml
from pathlib import Path

from .exceptions import ConfigError

DEFAULT_CONFIG_PATH = Path(__file__).parent / 'default_config.yaml'

# 默认配置文件缺失时的兜底值
BUILTIN_DEFAULTS = {
    'api_url': 'https://scrape.shifter.io/v1',
    'timeout': None,
    'log_level': 'WARNING',
}


class Config:
    def __init__(self, path: str = None):
        self.path = Path(path) if path else None
        self._data = {}
        self.load()

    def load(self):
        self._data = dict(BUILTIN_DEFAULTS)
        try:
            with open(DEFAULT_CONFIG_PATH, 'r', encoding='utf-8') as f:
                self._data.update(yaml.safe_load(f) or {})
        except FileNotFoundError:
            pass

        if self.path is None:
            return

        # 显式给出的配置文件必须可读
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"无法加载配置文件 {self.path}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigError(f"配置文件 {self.path} 顶层必须是映射")
        self._data.update(data)

    def get(self, key, default=None):
        return self._data.get(key, default)

    def as_dict(self):
        return dict(self._data)
