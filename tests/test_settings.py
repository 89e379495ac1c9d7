import importlib

import protectedmedia.settings


def test_malformed_redis_url_falls_back_to_memory_cache(monkeypatch):
    monkeypatch.setenv("REDIS_URL", "pas-une-url")
    try:
        module = importlib.reload(protectedmedia.settings)
        assert module.CACHES["default"]["BACKEND"] == "django.core.cache.backends.locmem.LocMemCache"
    finally:
        monkeypatch.delenv("REDIS_URL")
        importlib.reload(protectedmedia.settings)
