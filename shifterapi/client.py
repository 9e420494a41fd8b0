# -*- coding: utf-8 -*-
"""
客户端模块：把 QueryBuilder 或原始字典转换为对 Shifter API 的一次请求
"""

from typing import Dict, Optional
from urllib.parse import quote

import aiohttp

from .config import Config
from .headers import to_header_map
from .logger import get_logger
from .models import Param, QueryBuilder


class WebScrapingAPI:
    """Shifter Web Scraping API 客户端

    一个实例持有 API key 和一个可复用的 aiohttp 会话，可被任意多个并发请求共享。
    每个方法只发送一次请求，原样返回 aiohttp.ClientResponse，
    解码（如 ``await response.text()``）由调用方负责。
    """

    def __init__(self, api_key: str, session: Optional[aiohttp.ClientSession] = None,
                 config: Optional[Config] = None):
        self._key = api_key
        self.config = config or Config()
        self.api_url = self.config.get('api_url')
        self.logger = get_logger(__name__, self.config.get('log_level', 'WARNING'), secret=api_key)

        # 调用方传入的会话由调用方负责关闭
        self.session = session
        self._owns_session = session is None

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    def _get_session(self) -> aiohttp.ClientSession:
        """获取会话，首次使用时创建"""
        if self.session is None:
            kwargs = {}
            timeout = self.config.get('timeout')
            if timeout:
                kwargs['timeout'] = aiohttp.ClientTimeout(total=timeout)
            self.session = aiohttp.ClientSession(**kwargs)
        return self.session

    async def close(self):
        """关闭客户端自己创建的会话"""
        if self._owns_session and self.session is not None:
            await self.session.close()
            self.session = None

    def params_to_api_url(self, params: Dict[str, str]) -> str:
        """把参数拼接为 API 地址

        只有 url 参数会被百分号编码，其它参数原样拼接（与上游 API 保持兼容）。

        注意：aiohttp 发送前会经 yarl 规范化地址，查询串里的 %3A、%2F、%3F
        会被还原为 :、/、?，空格等非法字符仍保持转义。服务端解码后得到的 url 值不变，
        但线路上的字节与这里返回的字符串并不完全相同。
        """
        query_string = ''
        for key, value in params.items():
            if key == Param.URL.value:
                value = quote(value, safe='')
            query_string += f'&{key}={value}'
        return f'{self.api_url}?api_key={self._key}{query_string}'

    async def _request(self, method: str, params: Dict[str, str], headers: Dict[str, str],
                       body: Optional[Dict[str, str]] = None) -> aiohttp.ClientResponse:
        # 请求头不合法时在发送前失败
        header_map = to_header_map(headers)
        api_url = self.params_to_api_url(params)
        self.logger.debug("%s %s", method, api_url)

        kwargs = {'headers': header_map}
        if body is not None:
            kwargs['json'] = body
        return await self._get_session().request(method, api_url, **kwargs)

    async def get(self, query_builder: QueryBuilder) -> aiohttp.ClientResponse:
        """基于 QueryBuilder 的 GET 请求"""
        return await self._request('GET', query_builder.get_params(), query_builder.get_headers())

    async def post(self, query_builder: QueryBuilder) -> aiohttp.ClientResponse:
        """基于 QueryBuilder 的 POST 请求，请求体以 JSON 发送"""
        return await self._request('POST', query_builder.get_params(), query_builder.get_headers(),
                                   query_builder.get_body())

    async def put(self, query_builder: QueryBuilder) -> aiohttp.ClientResponse:
        """基于 QueryBuilder 的 PUT 请求，请求体以 JSON 发送"""
        return await self._request('PUT', query_builder.get_params(), query_builder.get_headers(),
                                   query_builder.get_body())

    async def raw_get(self, params: Dict[str, str], headers: Dict[str, str]) -> aiohttp.ClientResponse:
        """基于原始字典的 GET 请求，可使用 QueryBuilder 尚未支持的新参数"""
        return await self._request('GET', params, headers)

    async def raw_post(self, params: Dict[str, str], headers: Dict[str, str],
                       body: Dict[str, str]) -> aiohttp.ClientResponse:
        return await self._request('POST', params, headers, body)

    async def raw_put(self, params: Dict[str, str], headers: Dict[str, str],
                      body: Dict[str, str]) -> aiohttp.ClientResponse:
        return await self._request('PUT', params, headers, body)
