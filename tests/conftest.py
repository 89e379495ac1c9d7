import pytest
from django.core.cache import caches

from protection.directory import ProtectedDirectory
from protection.reconciler import ProtectionReconciler
from protection.state import ProtectionCheckState

ORIGIN = "https://example.com/"


@pytest.fixture(autouse=True)
def clear_cache():
    caches["default"].clear()
    yield
    caches["default"].clear()


@pytest.fixture
def media_root(settings, tmp_path):
    root = tmp_path / "media"
    root.mkdir()
    settings.MEDIA_ROOT = root
    settings.MEDIA_URL = "/media/"
    return root


@pytest.fixture
def directory(tmp_path):
    return ProtectedDirectory(root=str(tmp_path / "up"), base_url="https://site/up", segment="protected_x")


@pytest.fixture
def state():
    return ProtectionCheckState(ttl=60 * 60 * 24, key="tests:last_checked")


@pytest.fixture
def reconciler(directory, state):
    return ProtectionReconciler(directory, ORIGIN, state)
