"""
Configuration loader with validation.
"""
from dotenv import load_dotenv

from .config import ResearchMemoryConfig
from .config_validator import get_optional_env, get_int_env, get_bool_env
from .exceptions import ConfigurationError


def load_config_from_env(dotenv: bool = True) -> ResearchMemoryConfig:
    """
    Load configuration from environment variables with validation.

    This is the recommended way to create ResearchMemoryConfig.

    Usage:
        config = load_config_from_env()
        app = ResearchMemoryApp(config)
        app.initialize()

    :param dotenv: Whether to read a .env file first (local development)
    :return: Validated ResearchMemoryConfig instance
    :raises: ConfigurationError if values are missing or invalid
    """
    if dotenv:
        load_dotenv()

    defaults = ResearchMemoryConfig()

    config = ResearchMemoryConfig(
        redis_url=get_optional_env("REDIS_URL", default=defaults.redis_url),
        scan_batch_size=get_int_env("SCAN_BATCH_SIZE", defaults.scan_batch_size, minimum=1),
        max_edit_distance=get_int_env("MAX_EDIT_DISTANCE", defaults.max_edit_distance, minimum=0),
        enable_memory=get_bool_env("ENABLE_MEMORY", defaults.enable_memory),
        embedding_provider=get_optional_env(
            "EMBEDDING_PROVIDER", default=defaults.embedding_provider
        ).lower(),
        embedding_model=get_optional_env("EMBEDDING_MODEL", default=defaults.embedding_model),
        vector_store_path=get_optional_env("VECTOR_STORE_PATH"),
        default_top_k=get_int_env("DEFAULT_TOP_K", defaults.default_top_k, minimum=1),
        host=get_optional_env("HOST", default=defaults.host),
        port=get_int_env("PORT", defaults.port, minimum=1),
        rate_limit=get_optional_env("RATE_LIMIT", default=defaults.rate_limit),
        rate_limit_enabled=get_bool_env("RATE_LIMIT_ENABLED", defaults.rate_limit_enabled),
        log_level=get_optional_env("LOG_LEVEL", default=defaults.log_level).upper(),
    )

    if not config.redis_url.startswith(("redis://", "rediss://", "unix://")):
        raise ConfigurationError(
            f"REDIS_URL must start with redis://, rediss:// or unix://, got '{config.redis_url}'"
        )

    return config
