from .normalize import coerce_series

__all__ = ["coerce_series"]
