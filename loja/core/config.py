"""
Configuração centralizada da aplicação
"""
from pydantic_settings import BaseSettings
from typing import Optional


class Settings(BaseSettings):
    """Configuração da aplicação (lida do ambiente e do arquivo .env)"""

    # Database
    # Missing values fall through to libpq defaults (PGHOST, PGUSER, ...)
    DB_USER: Optional[str] = None
    DB_PASSWORD: Optional[str] = None
    DB_HOST: Optional[str] = None
    DB_PORT: Optional[int] = None
    DB_NAME: Optional[str] = None
    DB_CONNECT_TIMEOUT: int = 10

    # Logging
    LOG_LEVEL: str = "WARNING"
    LOG_FILE: Optional[str] = None

    def get_connection_params(self) -> dict:
        """Keyword arguments for psycopg2.connect()"""
        return {
            "user": self.DB_USER,
            "password": self.DB_PASSWORD,
            "host": self.DB_HOST,
            "port": self.DB_PORT,
            "dbname": self.DB_NAME,
            "connect_timeout": self.DB_CONNECT_TIMEOUT,
        }

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"


settings = Settings()
