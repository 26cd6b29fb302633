from dataclasses import dataclass
from typing import Optional


@dataclass
class ResearchMemoryConfig:
    # Key-value store
    redis_url: str = "redis://localhost:6379/0"
    scan_batch_size: int = 100

    # Resolution
    max_edit_distance: int = 3

    # Semantic memory
    enable_memory: bool = True
    embedding_provider: str = "openai"
    embedding_model: str = "text-embedding-3-small"
    vector_store_path: Optional[str] = None
    default_top_k: int = 5

    # HTTP
    host: str = "0.0.0.0"
    port: int = 8080
    rate_limit: str = "60 per minute"
    rate_limit_enabled: bool = True

    log_level: str = "INFO"
