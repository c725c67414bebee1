from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .services.table import Layout

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Core
    log_level: str = "INFO"
    service_env: str = "dev"  # dev|prod
    server_public_url: str = "http://localhost:8000"

    # CORS
    cors_allow_origins: str = "*"
    cors_allow_credentials: bool = True
    cors_allow_methods: str = "*"
    cors_allow_headers: str = "*"

    # Render
    default_layout: str = "vertical"  # horizontal|vertical
    markdown_breaks: bool = True

    # Size limit
    max_body_bytes: int = 262144  # 256KB

    def parsed_cors(self, value: str) -> list[str]:
        if value == "*":
            return ["*"]
        return [v.strip() for v in value.split(",") if v.strip()]

    @model_validator(mode="after")
    def _validate_layout(self) -> "Settings":
        if Layout.parse(self.default_layout) is None:
            raise ValueError(f"default_layout must be one of: {', '.join(l.value for l in Layout)}")
        if self.max_body_bytes <= 0:
            raise ValueError("max_body_bytes must be positive")
        return self

settings = Settings()
