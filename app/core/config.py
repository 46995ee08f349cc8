from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"
    BUSINESS_TIMEZONE: str = "America/Sao_Paulo"

    ASSISTANT_NAME: str = "Assistente"
    ASSISTANT_SENDER_ID: str = "ai"
    CONVERSATION_IDLE_TIMEOUT_MINUTES: int = 30

    DATA_PROVIDER: str = "memory"  # "memory" | "firestore"
    # credentials come from GOOGLE_APPLICATION_CREDENTIALS / ADC
    FIRESTORE_PROJECT_ID: str | None = None
    FIRESTORE_DATABASE: str = "(default)"


settings = Settings()
