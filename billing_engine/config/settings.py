from pydantic import Field, AliasChoices
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_EMAIL_TEMPLATE = (
    "Hi,\n\nPlease find the {type} \"{number}\" for the amount of \"{amount}\""
    "\n\nRegards,\n{companyName}"
)


class Settings(BaseSettings):
    # Read env from the process + optionally from a local file
    model_config = SettingsConfigDict(
        env_file=(".env",),
        extra="ignore",
        case_sensitive=False,
    )

    # App
    ENVIRONMENT: str = Field(default="dev", validation_alias=AliasChoices("ENVIRONMENT", "environment"))
    APP_NAME: str = Field(default="billing_engine", validation_alias=AliasChoices("APP_NAME", "app_name"))
    LOG_LEVEL: str = Field(default="INFO", validation_alias=AliasChoices("LOG_LEVEL", "log_level"))
    DEBUG: bool = Field(default=False, validation_alias=AliasChoices("DEBUG", "debug"))

    # Default issuer (used when a request carries no issuer profile)
    ISSUER_COMPANY_NAME: str = Field(default="", validation_alias=AliasChoices("ISSUER_COMPANY_NAME", "issuer_company_name"))
    ISSUER_HOME_STATE: str = Field(default="Delhi", validation_alias=AliasChoices("ISSUER_HOME_STATE", "issuer_home_state"))
    ISSUER_HOME_STATE_CODE: str = Field(default="07", validation_alias=AliasChoices("ISSUER_HOME_STATE_CODE", "issuer_home_state_code"))
    ISSUER_EMAIL_TEMPLATE: str = Field(
        default=DEFAULT_EMAIL_TEMPLATE,
        validation_alias=AliasChoices("ISSUER_EMAIL_TEMPLATE", "issuer_email_template"),
    )

    # Cloud mirror for the storage layer (accept both names)
    CLOUD_SYNC_URL: str = Field(default="", validation_alias=AliasChoices("CLOUD_SYNC_URL", "SUPABASE_URL"))
    CLOUD_SYNC_KEY: str = Field(default="", validation_alias=AliasChoices("CLOUD_SYNC_KEY", "SUPABASE_ANON_KEY"))

    @property
    def cloud_sync_enabled(self) -> bool:
        return bool(self.CLOUD_SYNC_URL and self.CLOUD_SYNC_KEY)


settings = Settings()
