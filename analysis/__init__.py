"""Pure analytics package for creatorStudio.

This package contains deterministic, testable computations that operate on
in-memory inputs and return DTOs. It must not import Django or perform any
I/O.
"""

from .engine import build_dashboard

__all__ = ["build_dashboard"]
