# faultscope/utils/__init__.py
from .location import caller_location
from .paths import config_search_paths, get_faultscope_home

__all__ = [
    "caller_location",
    "config_search_paths",
    "get_faultscope_home",
]
