"""
Root pytest configuration for backend tests.

Provides:
- Shared fixtures (petstore contract, checker)
"""

import sys
from pathlib import Path

# Add backend directory to Python path so `import oaschecker` works
# without installing the package
backend_dir = Path(__file__).parent.parent
if str(backend_dir) not in sys.path:
    sys.path.insert(0, str(backend_dir))

import pytest
import yaml


FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture(scope="session")
def petstore_path():
    """Path to the bundled petstore contract."""
    return FIXTURES_DIR / "petstore.yaml"


@pytest.fixture
def petstore_document(petstore_path):
    """Parsed petstore contract as a fresh dict."""
    with open(petstore_path, encoding="utf-8") as fh:
        return yaml.safe_load(fh)


@pytest.fixture(scope="session")
def checker(petstore_path):
    """Checker for the petstore contract (read-only, shared by all tests)."""
    from oaschecker import Checker

    return Checker.from_file(petstore_path)
