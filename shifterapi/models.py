# -*- coding: utf-8 -*-
"""
数据模型模块：请求参数构建器
"""

from enum import Enum
from typing import Dict, Union

from .exceptions import MissingParameterError


class Param(str, Enum):
    """API 已知的查询参数名"""
    URL = 'url'
    RENDER_JS = 'render_js'
    PROXY_TYPE = 'proxy_type'
    COUNTRY = 'country'
    KEEP_HEADERS = 'keep_headers'
    SESSION = 'session'
    TIMEOUT = 'timeout'
    DEVICE = 'device'
    WAIT_UNTIL = 'wait_until'
    WAIT_FOR = 'wait_for'
    WAIT_FOR_CSS = 'wait_for_css'
    SCREENSHOT = 'screenshot'
    EXTRACT_RULES = 'extract_rules'
    DISABLE_STEALTH = 'disable_stealth'
    AUTO_PARSER = 'auto_parser'
    JS_INSTRUCTIONS = 'js_instructions'


def _accessors(param: Param):
    """为单个参数生成 setter/getter"""

    def setter(self, value: str):
        self.set(param, value)

    def getter(self) -> str:
        return self.get(param)

    setter.__name__ = param.value
    setter.__doc__ = f"设置 {param.value} 参数"
    getter.__name__ = f'get_{param.value}'
    getter.__doc__ = f"获取 {param.value} 参数，未设置时抛出 MissingParameterError"
    return setter, getter


class QueryBuilder:
    """一次请求的参数、请求头和请求体

    每个已知参数都有一对方法，例如 ``url(value)`` / ``get_url()``。
    读取未设置的参数会抛出 MissingParameterError，而不是返回空值。
    """

    def __init__(self):
        self._params: Dict[str, str] = {}
        self._headers: Dict[str, str] = {}
        self._body: Dict[str, str] = {}

    def set(self, param: Union[Param, str], value: str):
        """设置已知参数，覆盖旧值"""
        self._params[Param(param).value] = value

    def get(self, param: Union[Param, str]) -> str:
        """读取已知参数"""
        return self.get_param(Param(param).value)

    def param(self, name: str, value: str):
        """设置任意参数（用于 API 新增的参数）"""
        self._params[name] = value

    def get_param(self, name: str) -> str:
        """读取任意参数"""
        try:
            return self._params[name]
        except KeyError:
            raise MissingParameterError(name) from None

    def get_params(self) -> Dict[str, str]:
        """返回参数字典的副本"""
        return dict(self._params)

    def headers(self, headers: Dict[str, str]):
        """整体替换请求头"""
        self._headers = dict(headers)

    def get_headers(self) -> Dict[str, str]:
        return dict(self._headers)

    def body(self, body: Dict[str, str]):
        """整体替换请求体"""
        self._body = dict(body)

    def get_body(self) -> Dict[str, str]:
        return dict(self._body)

    def __repr__(self):
        return f"QueryBuilder(params={self._params!r}, headers={self._headers!r}, body={self._body!r})"


for _param in Param:
    _setter, _getter = _accessors(_param)
    setattr(QueryBuilder, _setter.__name__, _setter)
    setattr(QueryBuilder, _getter.__name__, _getter)
del _param, _setter, _getter
