"""Adapters for external systems.

This module contains implementations of the region protocols. The in-memory
region stands in for the homepage DOM in tests and the preview entry point.
"""

from src.adapters.memory_region import (
    MemoryButton,
    MemoryDot,
    MemorySlideContainer,
    create_memory_region,
)

__all__ = [
    "MemoryButton",
    "MemoryDot",
    "MemorySlideContainer",
    "create_memory_region",
]
