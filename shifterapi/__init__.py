# -*- coding: utf-8 -*-
"""
shifterapi包 - Shifter Web Scraping API 异步客户端

Shifter Web Scraping 通过轮换代理抓取网页以避免封禁。

使用方法：
```python
from shifterapi import QueryBuilder, WebScrapingAPI

query_builder = QueryBuilder()
query_builder.url('http://httpbin.org/headers')
query_builder.render_js('1')
query_builder.headers({'Wsa-test': 'abcd'})

async with WebScrapingAPI('YOUR_API_KEY') as wsa:
    response = await wsa.get(query_builder)
    html = await response.text()
```

API 新增参数时可以用 raw_get / raw_post / raw_put 直接传入字典：
```python
response = await wsa.raw_get({'url': 'http://httpbin.org/headers'}, {'Wsa-test': 'abcd'})
```
"""

from .models import Param, QueryBuilder
from .client import WebScrapingAPI
from .config import Config
from .headers import to_header_map
from .exceptions import ShifterAPIError, MissingParameterError, InvalidHeadersError, ConfigError
from .logger import get_logger

# 版本信息
__version__ = '0.1.0'

# 导出列表
__all__ = [
    # 构建器
    'Param',
    'QueryBuilder',
    # 客户端
    'WebScrapingAPI',
    # 配置与工具
    'Config',
    'to_header_map',
    'get_logger',
    # 异常
    'ShifterAPIError',
    'MissingParameterError',
    'InvalidHeadersError',
    'ConfigError',
]
