from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv


@dataclass
class ProjectConfig:
    lru_cache_size: int = 2
    # read-through cache in front of the product store
    lookup_cache_size: int = 1024


def load_config(env_path: Optional[str] = None) -> ProjectConfig:
    if env_path:
        load_dotenv(env_path)
    else:
        load_dotenv()
    return ProjectConfig(
        lru_cache_size=int(os.getenv("LRU_CACHE_SIZE", "2")),
        lookup_cache_size=int(os.getenv("LOOKUP_CACHE_SIZE", "1024")),
    )


def print_config(cfg: ProjectConfig) -> None:
    print(f" - LRU_CACHE_SIZE:     {cfg.lru_cache_size}")
    print(f" - LOOKUP_CACHE_SIZE:  {cfg.lookup_cache_size}")
