# Value objects
from .line_key import ANY, LineKey

__all__ = ['ANY', 'LineKey']
