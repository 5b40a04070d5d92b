"""
Mock implementations for testing funcsetup components.

This package provides fakes of the runner environment to enable isolated,
deterministic testing.
"""

from .context import FakeContext

__all__ = ["FakeContext"]
