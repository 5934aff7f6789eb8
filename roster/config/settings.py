"""Root settings model for Roster configuration."""

from pydantic import Field
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    TomlConfigSettingsSource,
)

from roster.config.loader import config_files
from roster.config.models.observability import ObservabilityConfig


class Settings(BaseSettings):
    """Root configuration object.

    Configuration is loaded in this order:
    1. Pydantic model defaults (in code)
    2. config/default.toml (base configuration)
    3. config/{ROSTER_ENV}.toml (environment overrides)
    4. ROSTER_* environment variables (runtime overrides)
    """

    model_config = SettingsConfigDict(
        env_prefix="ROSTER_",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    app_name: str = Field(default="roster", description="Application name for logging")

    observability: ObservabilityConfig = Field(
        default_factory=ObservabilityConfig,
        description="Observability configuration",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,  # noqa: ARG003
        file_secret_settings: PydanticBaseSettingsSource,  # noqa: ARG003
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Customize settings sources to include TOML config.

        Priority order (highest to lowest):
        1. init_settings (constructor arguments)
        2. env_settings (ROSTER_* environment variables)
        3. config/{ROSTER_ENV}.toml
        4. config/default.toml
        5. (defaults from model)

        Sources are deep-merged, so an environment file only needs the
        keys it changes.
        """
        toml_settings = [
            TomlConfigSettingsSource(settings_cls, toml_file=path)
            for path in reversed(config_files())
        ]
        return (init_settings, env_settings, *toml_settings)
