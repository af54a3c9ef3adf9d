# skillbarter/api/__init__.py
# This file makes the api directory a Python package.

from . import match
from . import profile
from . import reward
from . import skill
from . import swap

__all__ = [
    "match",
    "profile",
    "skill",
    "swap",
    "reward",
]
