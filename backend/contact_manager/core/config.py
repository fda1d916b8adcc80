from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    PROJECT_NAME: str = "Contact Manager"
    API_V1_PREFIX: str = "/api/v1"
    DEBUG: bool = False

    CORS_ORIGINS: list[str] = ["http://localhost:5173"]

    # Remote CRM service the gateway talks to
    CRM_API_BASE_URL: str = "http://localhost:3000"

    # Contact list page size exposed by the HTTP API
    CONTACT_LIST_DEFAULT_LIMIT: int = 50
    CONTACT_LIST_MAX_LIMIT: int = 100

    model_config = {"env_file": ".env", "case_sensitive": True}


settings = Settings()
