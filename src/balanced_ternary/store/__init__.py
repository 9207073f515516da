"""
Store — компактное хранение значений balanced ternary.
"""

from balanced_ternary.store.chunks import (
    CHUNK_DIGITS,
    CHUNK_MAX,
    CHUNK_MIN,
    DataTernary,
    TritsChunk,
)
from balanced_ternary.store.ter40 import TER40_MAX, TER40_MIN, TER40_WIDTH, Ter40

__all__ = [
    # Chunks
    "CHUNK_DIGITS",
    "CHUNK_MAX",
    "CHUNK_MIN",
    "DataTernary",
    "TritsChunk",
    # Ter40
    "TER40_MAX",
    "TER40_MIN",
    "TER40_WIDTH",
    "Ter40",
]
