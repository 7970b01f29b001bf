"""
Environment settings
"""
from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    # Supabase
    SUPABASE_URL: str = ""
    SUPABASE_SERVICE_ROLE_KEY: str = ""  # preferred: bypasses RLS on the applicant tables
    SUPABASE_ANON_KEY: str = ""  # fallback when no service role key is configured

    # Server
    BACKEND_PORT: int = 8000
    LOG_LEVEL: str = "INFO"

    # Letters
    SCHOOL_NAME: str = "Modern Higher Secondary School, Pottur"
    LETTER_REFERENCE_PREFIX: str = "AMHSS/ADM"

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"  # ignore VITE_* and other front-end variables in .env

    @property
    def supabase_key(self) -> str:
        """Service role key if set, otherwise the anon key"""
        return self.SUPABASE_SERVICE_ROLE_KEY or self.SUPABASE_ANON_KEY


@lru_cache()
def get_settings() -> Settings:
    return Settings()


# global settings object
settings = get_settings()
