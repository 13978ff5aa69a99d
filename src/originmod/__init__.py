"""OriginMod - persistent feature toggles for the OriginMod game modification"""

__version__ = "1.0.0"
__description__ = "Persistent feature toggles for the OriginMod game modification"

__all__ = ["init_config", "get_config", "__version__"]


def __getattr__(name: str):
    """Lazy import so ``originmod.core`` can be used without building the
    process-wide store (which reads settings from the environment).
    """
    if name in ("init_config", "get_config"):
        from . import config_store

        return getattr(config_store, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
