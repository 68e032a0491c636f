from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest


@pytest.fixture
def mock_process() -> MagicMock:
    """Create a mock subprocess that exits with status 0."""
    process = MagicMock()
    process.returncode = 0
    process.pid = 12345
    process.communicate = AsyncMock(return_value=(b"captured", b""))
    process.wait = AsyncMock(return_value=0)
    return process
