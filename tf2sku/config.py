from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(env_file=".env")

    app_name: str = "tf2sku"
    debug: bool = False

    log_level: str = "INFO"

    # Default parse mode for the API and CLI when a request does not choose one
    # Default: False (strict; an invalid quality is an error)
    lenient_quality: bool = False


settings = Settings()


# =============================================================================
# BATCH LIMITS
# =============================================================================

# Maximum number of SKUs accepted by one batch request
MAX_BATCH_SIZE = 500
