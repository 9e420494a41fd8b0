# -*- coding: utf-8 -*-
"""
异常模块
"""


class ShifterAPIError(Exception):
    """shifterapi 所有异常的基类"""


class MissingParameterError(ShifterAPIError, KeyError):
    """读取了从未设置过的参数"""

    def __init__(self, key: str):
        self.key = key
        super().__init__(key)

    def __str__(self):
        return f"参数未设置: {self.key}"


class InvalidHeadersError(ShifterAPIError, ValueError):
    """请求头无法编码到线路上（非法名称或包含控制字符的值）"""

    def __init__(self, name: str, reason: str = "invalid header"):
        self.name = name
        self.reason = reason
        super().__init__(f"Invalid headers: {name!r} ({reason})")


class ConfigError(ShifterAPIError):
    """配置文件无法读取或格式错误"""
