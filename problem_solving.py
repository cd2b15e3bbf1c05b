from __future__ import annotations

from techno_store.algo.lru import LRUCache
from techno_store.utils.config import load_config, print_config


def main() -> None:
    cfg = load_config()
    print("Config:")
    print_config(cfg)

    print(f"Creating LRU cache (capacity {cfg.lru_cache_size}) with 2 items: song1, song2")
    cache = LRUCache[str, str](capacity=cfg.lru_cache_size)
    cache.put("song1", "Song One")
    cache.put("song2", "Song Two")

    print("Retrieving song1 from cache")
    value, found = cache.get("song1")
    if found:
        print(f"song1: {value}")
    else:
        print("song1 not found")

    print("For more detail, see tests/test_lru.py")


if __name__ == "__main__":
    main()
