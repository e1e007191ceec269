"""
Pytest configuration to ensure the application package (src/) is importable.

This adjusts sys.path so `from src.api.main import app` works when tests run
from the repository root without an installed package.
"""
import sys
from pathlib import Path

import pytest

# Compute the backend root that contains the 'src' directory
BACKEND_ROOT = Path(__file__).resolve().parents[1]

# Prepend backend root to sys.path if not already present
backend_root_str = str(BACKEND_ROOT)
if backend_root_str not in sys.path:
    sys.path.insert(0, backend_root_str)


@pytest.fixture
def client():
    """In-process HTTP client bound to the FastAPI app."""
    from fastapi.testclient import TestClient

    from src.api.main import app

    with TestClient(app) as c:
        yield c
