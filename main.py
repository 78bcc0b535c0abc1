"""
Verificación única de la base de datos, sin servidor HTTP.

Uso:
  python main.py

Códigos de salida:
  0 = conexión verificada, o fallo con ON_VERIFY_FAILURE=continue
  1 = fallo con ON_VERIFY_FAILURE=exit
"""
import logging

from pintrails.core.config import settings
from pintrails.db.bootstrap import ConnectionBootstrapper, DatabaseUnavailableError


def main() -> int:
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    bootstrapper = ConnectionBootstrapper()
    try:
        bootstrapper.run()
    except DatabaseUnavailableError:
        # El detalle ya quedó registrado por verify()
        return 1
    finally:
        bootstrapper.dispose()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
