from functools import lru_cache

from config import get_settings
from openai_client import CompletionGateway


@lru_cache
def get_gateway() -> CompletionGateway:
    return CompletionGateway(get_settings())
