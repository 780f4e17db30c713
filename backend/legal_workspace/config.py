from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    gateway_api_key: str = ""
    gateway_base_url: str = "https://ai.gateway.lovable.dev/v1"
    gateway_model: str = "google/gemini-3-flash-preview"

    # Where the workspace client reaches the proxy endpoint.
    workspace_api_url: str = "http://localhost:8000/api/analyze-case"
    workspace_api_key: str = ""

    cors_origins: list[str] = ["*"]
    log_level: str = "INFO"

    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()
