from .cart_store import CartStore, DEFAULT_STORAGE_KEY

__all__ = ['CartStore', 'DEFAULT_STORAGE_KEY']
