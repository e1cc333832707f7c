from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    database_url: str = "postgresql://postgres:postgres@db:5432/fridgechef"
    anthropic_api_key: str = ""

    vision_model: str = "claude-sonnet-4-5-20250929"  # Ingredient scanning from photos
    recipe_model: str = "claude-sonnet-4-5-20250929"

    # Anthropic API timeout settings (seconds)
    anthropic_timeout: int = 60  # Recipe generation is a single non-streaming call
    anthropic_connect_timeout: int = 10  # Connection establishment

    # AI cost tracking (per 1K tokens in cents)
    sonnet_input_cost_per_1k: float = 0.3  # $0.003 per 1K input tokens
    sonnet_output_cost_per_1k: float = 1.5  # $0.015 per 1K output tokens

    # Free tier limits (checked before any AI call)
    free_scans_per_month: int = 10
    free_recipe_generations_per_hour: int = 5

    # Uploads
    upload_dir: str = "uploads/scans"
    max_upload_bytes: int = 10 * 1024 * 1024

    # Auth settings
    session_secret_key: str = ""  # Required in production
    session_cookie_name: str = "fridgechef_session"
    session_max_age: int = 86400 * 7  # 7 days
    session_cookie_secure: bool = False  # True in production

    class Config:
        env_file = ".env"


settings = Settings()
