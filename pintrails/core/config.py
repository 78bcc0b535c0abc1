import os
from dataclasses import dataclass
from typing import Literal, Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Valores fijos de este despliegue (no configurables por entorno)
DB_HOST = "dev_pg"
DB_NAME = "pintrails"
DB_DIALECT = "postgres"


class Settings(BaseSettings):
    # Credenciales opcionales: si faltan quedan en None
    POSTGRES_USER: Optional[str] = None
    POSTGRES_PASSWORD: Optional[str] = None

    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    ON_VERIFY_FAILURE: Literal["continue", "exit"] = "continue"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def _upper_log_level(cls, v):
        return v.strip().upper() if isinstance(v, str) else v


def read_env(name: str, source: Optional[Settings] = None) -> Optional[str]:
    """
    Devuelve el valor configurado o None si no existe. Nunca lanza.
    Los campos de Settings se leen del entorno y de .env; el resto, solo del entorno.
    """
    if name in Settings.model_fields:
        return getattr(source or Settings(), name)
    return os.environ.get(name)


@dataclass(frozen=True)
class EnvironmentConfig:
    user: Optional[str]
    password: Optional[str]
    host: str = DB_HOST
    database: str = DB_NAME

    @classmethod
    def from_env(cls, source: Optional[Settings] = None) -> "EnvironmentConfig":
        # Se relee en cada llamada; credenciales ausentes pasan tal cual (None)
        source = source or Settings()
        return cls(
            user=read_env("POSTGRES_USER", source),
            password=read_env("POSTGRES_PASSWORD", source),
        )


settings = Settings()
