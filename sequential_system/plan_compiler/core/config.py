"""
Application configuration loader and it handles:
- Environment variables
- Plan compiler defaults
- Logging settings

And, the main purpose:
Central place for system configuration.
"""


from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    # Plan compiler
    ALLOW_MISSING_FUNCTIONS: bool = False  # placeholder steps instead of FunctionNotFound

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_SNIPPET_CHARS: int = 400

    class Config:
        env_file = ".env"
        extra = "ignore"

settings = Settings()
