"""Chesshue: heat-history visualization of finished chess games."""

from chesshue.visual.accumulator import accumulate
from chesshue.visual.compositor import composite_square
from chesshue.visual.highlight import resolve_highlights

__all__ = ["accumulate", "composite_square", "resolve_highlights"]
