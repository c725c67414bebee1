import sys
from pathlib import Path

import pytest

# Ensure project root on path for imports when executing from tests dir
ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from fastapi.testclient import TestClient

import metatable.main as main
from metatable.services.sanitizer import Sanitizer

@pytest.fixture
def client():
    """TestClient con el startup real (construye el sanitizer en app.state)."""
    with TestClient(main.app) as c:
        yield c

@pytest.fixture(scope="session")
def sanitizer() -> Sanitizer:
    return Sanitizer.ugc()
