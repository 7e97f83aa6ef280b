"""Root pytest configuration for registry-errors tests."""
import pytest

from registry_errors.errors import Errors
from registry_errors.models import DetailUnknownLayer, FSLayer


# Keep settings deterministic regardless of the caller's environment
@pytest.fixture(autouse=True)
def test_env(monkeypatch):
    """Automatically clear registry-errors environment variables."""
    monkeypatch.delenv("REGISTRY_ERRORS_LOG_LEVEL", raising=False)
    monkeypatch.delenv("REGISTRY_ERRORS_JSON_INDENT", raising=False)


@pytest.fixture
def errs():
    """Empty error aggregate."""
    return Errors()


@pytest.fixture
def unknown_layer_detail():
    """Detail for a manifest referencing a layer that was never uploaded."""
    return DetailUnknownLayer(
        unknown=FSLayer(blob_sum="sha256:" + "ab" * 32)
    )
