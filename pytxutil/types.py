import os
from functools import partial

import typeguard

__all__ = ["typechecked", "validate_pairs_by_default"]


def _env_flag(name: str) -> bool:
    return os.getenv(name, "False").lower() in ("true", "1")


def typechecked(func=None, *args, **kwargs):
    if _env_flag("PYTXUTIL_NO_TYPE_CHECK"):
        if func is None:
            return partial(typechecked, *args, **kwargs)
        return func
    return typeguard.typechecked(func, *args, **kwargs)


def validate_pairs_by_default() -> bool:
    """Whether wholesale replacement of pairs validates order and uniqueness
    when the caller does not say."""
    return _env_flag("PYTXUTIL_VALIDATE_PAIRS")
