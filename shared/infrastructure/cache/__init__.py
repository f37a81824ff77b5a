from .json_cache import FOREVER, JsonCache

__all__ = ['FOREVER', 'JsonCache']
