from pydantic import ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from wishlist_scraper.errors import ConfigError


class Settings(BaseSettings):
    base_url: str = "https://bandcamp.com"
    username: str = "space-llama"

    # Paginated wishlist API (POST, JSON body)
    api_path: str = "/api/fancollection/1/wishlist_items"

    # None = block until the server answers
    http_timeout_s: float | None = None

    model_config = SettingsConfigDict(
        env_prefix="WISHLIST_",
        env_file=".env",
        extra="ignore",
    )

    @property
    def wishlist_url(self) -> str:
        return f"{self.base_url.rstrip('/')}/{self.username}/wishlist"

    @property
    def api_url(self) -> str:
        return f"{self.base_url.rstrip('/')}/{self.api_path.lstrip('/')}"


def load_settings() -> Settings:
    """Read settings from WISHLIST_* env vars and .env."""
    try:
        return Settings()
    except ValidationError as exc:
        raise ConfigError(f"Invalid WISHLIST_* setting: {exc}") from exc
