from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Total delivery attempts per notification (first try plus retries).
MAX_NOTIFICATION_ATTEMPTS = 5


class Settings(BaseSettings):
    # Notification delivery
    notification_max_attempts: int = Field(
        default=MAX_NOTIFICATION_ATTEMPTS, ge=1, alias="NOTIFICATION_MAX_ATTEMPTS"
    )

    @field_validator("notification_max_attempts", mode="before")
    @classmethod
    def empty_str_to_default(cls, v: str | int | None) -> str | int:
        """Treat an empty NOTIFICATION_MAX_ATTEMPTS as unset."""
        if v == "" or v is None:
            return MAX_NOTIFICATION_ATTEMPTS
        return v

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )


settings = Settings()
