"""
Code generation backends.

Contains language-specific code generators.
"""

from __future__ import annotations

from .base import CodeBackend
from .dart_backend import DartBackend

__all__ = [
    "CodeBackend",
    "DartBackend",
]
