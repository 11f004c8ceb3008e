"""
Service: ScriptCache

Per-distributor snapshot of active logic scripts grouped by trigger point.
- entries expire ttl_seconds after they are loaded (0 disables caching)
- every script mutation invalidates the distributor's entry
- expired entries are swept whenever a new entry is stored
- thread-safe; one instance per Flask app (app.extensions)
"""

# Python Packages
import threading
import time
from typing import Callable, Dict, List, Optional

# Flask
from flask import current_app


EXTENSION_KEY = "feather_script_cache"





class ScriptCache:

    def __init__(self, ttl_seconds: int):
        self.ttl_seconds = ttl_seconds
        self._lock = threading.Lock()
        # distributor_id -> {"scripts": {trigger_point: [script dict]}, "expires_at": float}
        self._items: Dict[str, dict] = {}
        # bumped on every invalidate(); a load only stores if it is unchanged
        self._generation = 0


    def get_or_load(
        self,
        distributor_id: str,
        loader: Callable[[], Dict[str, List[dict]]]
    ) -> Dict[str, List[dict]]:
        """
        Return the cached grouping or call loader() and cache its result.

        The loader runs outside the lock. A result loaded while an
        invalidate() happened is returned but not stored.
        """

        if self.ttl_seconds <= 0:
            return loader()

        key = str(distributor_id)

        with self._lock:
            cached = self._get_unexpired_unlocked(key)
            if cached is not None:
                return cached
            generation = self._generation

        scripts = loader()

        with self._lock:
            if self._generation == generation:
                self._sweep_expired_unlocked()
                self._items[key] = {
                    "scripts": scripts,
                    "expires_at": time.time() + self.ttl_seconds
                }

        return scripts


    def invalidate(self, distributor_id: str) -> None:
        key = str(distributor_id)
        with self._lock:
            self._items.pop(key, None)
            self._generation += 1


    def clear(self) -> None:
        with self._lock:
            self._items.clear()
            self._generation += 1


    def _get_unexpired_unlocked(self, key: str) -> Optional[Dict[str, List[dict]]]:
        item = self._items.get(key)
        if item is None:
            return None

        if item["expires_at"] <= time.time():
            del self._items[key]
            return None

        return item["scripts"]


    def _sweep_expired_unlocked(self) -> None:
        now = time.time()
        for key in [key for key, item in self._items.items() if item["expires_at"] <= now]:
            del self._items[key]





def init_script_cache(app, ttl_seconds: int) -> ScriptCache:
    """ Attach a cache to the app... """

    cache = ScriptCache(ttl_seconds)
    app.extensions[EXTENSION_KEY] = cache
    return cache


def get_script_cache() -> ScriptCache:
    """ Cache of the current app... """

    return current_app.extensions[EXTENSION_KEY]
