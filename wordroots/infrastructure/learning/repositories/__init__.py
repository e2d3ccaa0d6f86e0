from .content_store import JsonContentStore

__all__ = ["JsonContentStore"]
