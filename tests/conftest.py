import os
import tempfile
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from server import app


@pytest.fixture
def tmp_path():
    with tempfile.TemporaryDirectory() as tmp_dir:
        tmp_path = Path(tmp_dir)
        curdir = Path.cwd()
        try:
            os.chdir(tmp_path)
            yield tmp_path
        finally:
            os.chdir(curdir)


@pytest.fixture
def client():
    with TestClient(app) as client:
        yield client
