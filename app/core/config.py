from functools import lru_cache

from pydantic import AnyUrl, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


_DATE_FORMATS = {"short", "medium", "long", "full"}


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    debug: bool = Field(False, description="Enable FastAPI debug mode")
    environment: str = Field(
        default="development",
        description="Runtime environment (development|staging|production)",
    )
    results_api_base_url: AnyUrl = Field(
        default="https://servicebus2.caixa.gov.br/portaldeloterias/api",
        description="Base URL for the Caixa lottery results API",
    )
    results_path: str = Field(
        default="/megasena",
        description="Relative path for the Mega-Sena results endpoint",
    )
    request_timeout_seconds: float = Field(
        default=10.0,
        description="Timeout applied to outbound results requests",
        gt=0,
    )
    display_locale: str = Field(
        default="pt_BR",
        description="Locale used when rendering currency and dates",
    )
    currency_code: str = Field(
        default="BRL",
        description="ISO 4217 currency code for prize amounts",
    )
    date_format: str = Field(
        default="short",
        description="Date style passed to the locale formatter (short|medium|long|full)",
    )
    results_search_url: AnyUrl = Field(
        default="https://loterias.caixa.gov.br/Paginas/Mega-Sena.aspx",
        description="Official page where users can look up other contests",
    )

    @field_validator("results_path")
    @classmethod
    def _normalize_results_path(cls, value: str) -> str:
        candidate = value.strip()
        if not candidate:
            raise ValueError("results_path cannot be empty")
        return candidate if candidate.startswith("/") else f"/{candidate}"

    @field_validator("currency_code")
    @classmethod
    def _validate_currency_code(cls, value: str) -> str:
        candidate = value.strip().upper()
        if len(candidate) != 3 or not candidate.isalpha():
            raise ValueError("currency_code must be a three-letter ISO 4217 code")
        return candidate

    @field_validator("date_format")
    @classmethod
    def _validate_date_format(cls, value: str) -> str:
        candidate = value.strip().lower()
        if candidate not in _DATE_FORMATS:
            raise ValueError(
                f"date_format must be one of: {', '.join(sorted(_DATE_FORMATS))}"
            )
        return candidate


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
