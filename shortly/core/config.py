from pydantic_settings import BaseSettings

from shortly.utils.encoding import DEFAULT_ALPHABET

class Settings(BaseSettings):
    PROJECT_NAME: str = "shortly"

    # Session defaults (Env Vars - override per deployment)
    ALPHABET: str = DEFAULT_ALPHABET
    PROTOCOL: str = "http://short.ly/"
    START_ID: int = 4097

    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"

settings = Settings()
