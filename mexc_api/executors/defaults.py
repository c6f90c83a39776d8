"""Default executor configuration.

This module defines the default HTTP executor implementation used by the
MEXC SDK when no custom executor is provided.
"""

from typing import Type

from mexc_api.executors.httpx import HttpxHttpExecutor
from mexc_api.executors.interface import HttpExecutor

DEFAULT_HTTP_EXECUTOR: Type[HttpExecutor] = HttpxHttpExecutor
