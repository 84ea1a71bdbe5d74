"""
Inference backends for detect_kit.

Backends are kept in a separate module so pre/post-processing can be imported
and tested without an inference runtime installed.
"""

from __future__ import annotations

__all__ = []
