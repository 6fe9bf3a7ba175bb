"""
Lipsum Service Configuration
"""

from typing import List, Optional
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    # ===== Service =====
    SERVICE_NAME: str = Field(default="lipsum-service", env="SERVICE_NAME")  # type: ignore
    SERVICE_VERSION: str = Field(default="0.1.0", env="SERVICE_VERSION")  # type: ignore
    HOST: str = Field(default="0.0.0.0", env="HOST")  # type: ignore
    PORT: int = Field(default=8000, env="PORT")  # type: ignore
    LOG_LEVEL: str = Field(default="info", env="LOG_LEVEL")  # type: ignore
    DEBUG: bool = Field(default=False, env="DEBUG")  # type: ignore

    # ===== CORS =====
    CORS_ORIGINS: List[str] = Field(
        default=["http://localhost:3000", "http://localhost:8080"], env="CORS_ORIGINS"  # type: ignore
    )

    # ===== Generation =====
    CHAIN_ORDER: int = Field(default=2, env="CHAIN_ORDER")  # type: ignore
    DEFAULT_WORDS: int = Field(default=25, env="DEFAULT_WORDS")  # type: ignore
    MAX_WORDS: int = Field(default=10000, env="MAX_WORDS")  # type: ignore
    RANDOM_SEED: Optional[int] = Field(default=None, env="RANDOM_SEED")  # type: ignore

    # ===== Trained models =====
    MAX_CORPUS_CHARS: int = Field(default=1_000_000, env="MAX_CORPUS_CHARS")  # type: ignore
    MAX_CACHED_MODELS: int = Field(default=16, env="MAX_CACHED_MODELS")  # type: ignore

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )


settings = Settings()
