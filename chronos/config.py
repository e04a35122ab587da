"""Application configuration via environment variables."""

from pydantic_settings import BaseSettings

from chronos.domains.attribution.models import AttributionModel


class Settings(BaseSettings):
    app_name: str = "chronos-core"
    app_version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    log_json: bool = True

    host: str = "0.0.0.0"
    port: int = 8000

    # Used when an attribution request does not name a model
    default_attribution_model: AttributionModel = AttributionModel.LAST_CLICK

    model_config = {"env_prefix": "", "env_file": ".env", "extra": "ignore"}


settings = Settings()
