"""commitcheck - pre-commit validation orchestrator.

Runs a fixed, ordered sequence of checks (working-tree cleanliness, format,
lint, type check, test, build) and stops at the first failure.
"""

from __future__ import annotations

__version__ = "0.1.0"

__all__ = ["__version__"]
