from .registry import private_key_router, router

__all__ = ["router", "private_key_router"]
