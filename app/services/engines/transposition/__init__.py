"""Transposition cipher engines."""

from app.services.engines.transposition.rail_fence import (
    RailFenceEngine,
    decrypt,
    encrypt,
    rail_lengths,
    rail_sequence,
    render_fence,
)

__all__ = [
    "RailFenceEngine",
    "decrypt",
    "encrypt",
    "rail_lengths",
    "rail_sequence",
    "render_fence",
]
