__all__ = [
    "create_access_token",
    "decode_access_token",
    "get_current_user",
    "bearer_scheme",
]


def __getattr__(name):
    if name in __all__:
        from . import security as _security
        return getattr(_security, name)
    raise AttributeError(f"module 'skillbarter.utils' has no attribute '{name}'")
