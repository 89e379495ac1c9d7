from django.core.cache import caches
from django.utils import timezone

DEFAULT_KEY = "protection:last_checked"


class ProtectionCheckState:
    """
    Horodatage de la dernière vérification réussie des fichiers de protection.
    Stocké dans le cache Django (Redis en production) avec une durée de vie
    égale au TTL : une clé absente ou trop vieille déclenche une nouvelle passe.
    """

    def __init__(self, ttl=60 * 60 * 24, cache_alias="default", key=DEFAULT_KEY):
        self.ttl = int(ttl)
        self.cache_alias = cache_alias
        self.key = key

    @property
    def cache(self):
        return caches[self.cache_alias]

    def last_checked(self):
        value = self.cache.get(self.key)
        try:
            return float(value) if value is not None else None
        except (TypeError, ValueError):
            return None

    def is_fresh(self, now=None):
        last = self.last_checked()
        if last is None:
            return False
        now_ts = now if now is not None else timezone.now().timestamp()
        return now_ts - last < self.ttl

    def mark_checked(self, now=None):
        now_ts = now if now is not None else timezone.now().timestamp()
        self.cache.set(self.key, now_ts, timeout=self.ttl)
        return now_ts

    def clear(self):
        self.cache.delete(self.key)
