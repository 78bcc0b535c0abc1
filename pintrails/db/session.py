import logging
from dataclasses import dataclass
from typing import Optional

from sqlalchemy import create_engine, text
from sqlalchemy.engine import URL, Engine
from sqlalchemy.exc import SQLAlchemyError

from pintrails.core.config import DB_DIALECT

logger = logging.getLogger(__name__)

# "postgres" es el nombre del dialecto; SQLAlchemy lo registra como postgresql
DRIVERS = {
    "postgres": "postgresql+psycopg2",
}


@dataclass(frozen=True)
class VerificationResult:
    ok: bool
    error: Optional[str] = None


def build_connection(database: Optional[str], user: Optional[str],
                     password: Optional[str], host: Optional[str]) -> Engine:
    """
    Construye el engine sin tocar la red (SQLAlchemy conecta de forma perezosa).
    No valida los valores: los errores aparecen en verify().
    """
    url = URL.create(
        drivername=DRIVERS[DB_DIALECT],
        username=user,
        password=password,
        host=host,
        database=database,
    )
    return create_engine(url, future=True)


def verify(engine: Engine) -> VerificationResult:
    """
    Un único intento de conexión para validar credenciales/red.
    Nunca lanza: el fallo se registra y se devuelve en el resultado.
    """
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        logger.error(f"❌ Unable to connect to the database: {e}")
        return VerificationResult(ok=False, error=str(e))
    except Exception as e:
        # Errores que el driver no envuelve en SQLAlchemyError
        logger.error(f"❌ Unable to connect to the database: {type(e).__name__}: {e}")
        return VerificationResult(ok=False, error=f"{type(e).__name__}: {e}")

    logger.info("✅ Connection has been established successfully.")
    return VerificationResult(ok=True)
