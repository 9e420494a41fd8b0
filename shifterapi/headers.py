# -*- coding: utf-8 -*-
"""
请求头转换模块

把 str -> str 的请求头字典转换为 aiohttp 使用的 CIMultiDict，
在发送请求之前拒绝无法写到线路上的名称和值。
"""

import string
from typing import Dict

from multidict import CIMultiDict

from .exceptions import InvalidHeadersError

# RFC 7230 token 字符
_TOKEN_CHARS = frozenset(string.ascii_letters + string.digits + "!#$%&'*+-.^_`|~")


def _check_name(name: str):
    """检查请求头名称是否为合法 token"""
    if not isinstance(name, str) or not name:
        raise InvalidHeadersError(str(name), "empty or non-string name")
    for ch in name:
        if ch not in _TOKEN_CHARS:
            raise InvalidHeadersError(name, f"illegal character {ch!r} in name")


def _check_value(name: str, value: str):
    """检查请求头值：拒绝除制表符以外的控制字符和 DEL，其余字符（含非 ASCII）按 UTF-8 发送"""
    if not isinstance(value, str):
        raise InvalidHeadersError(name, "non-string value")
    for ch in value:
        code = ord(ch)
        if code == 0x09:
            continue
        if code < 0x20 or code == 0x7f:
            raise InvalidHeadersError(name, f"control character {ch!r} in value")


def to_header_map(headers: Dict[str, str]) -> CIMultiDict:
    """将请求头字典转换为 CIMultiDict

    任何非法名称或值都会抛出 InvalidHeadersError。
    """
    header_map = CIMultiDict()
    for name, value in (headers or {}).items():
        _check_name(name)
        _check_value(name, value)
        header_map[name] = value
    return header_map
