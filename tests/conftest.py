import sys
from pathlib import Path

import pytest

# Ensure `import codelists` works when running `pytest` without needing PYTHONPATH hacks.
PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(PROJECT_ROOT))


@pytest.fixture
def metadata():
    from tests._builders import make_metadata

    return make_metadata()
