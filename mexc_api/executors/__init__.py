from mexc_api.executors.aiohttp import AiohttpHttpExecutor
from mexc_api.executors.defaults import DEFAULT_HTTP_EXECUTOR
from mexc_api.executors.httpx import HttpxHttpExecutor
from mexc_api.executors.interface import HttpExecutor, HttpResponse

__all__ = [
    "HttpExecutor",
    "HttpResponse",
    "HttpxHttpExecutor",
    "AiohttpHttpExecutor",
    "DEFAULT_HTTP_EXECUTOR",
]
