import os
import logging
from fastapi import FastAPI
import uvicorn

from pintrails.core.config import settings
from pintrails.db.bootstrap import ConnectionBootstrapper, DatabaseUnavailableError
from pintrails.api.v1.router import api_router

from contextlib import asynccontextmanager

# Configurar logging
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Arranque controlado: la verificación de la base de datos se ejecuta una vez
    antes de aceptar peticiones. Con ON_VERIFY_FAILURE=exit el error aborta el arranque.
    """
    bootstrapper = ConnectionBootstrapper()
    app.state.bootstrapper = bootstrapper
    try:
        bootstrapper.run()
    except DatabaseUnavailableError:
        bootstrapper.dispose()
        raise

    yield

    # Cierre limpio
    try:
        bootstrapper.dispose()
        logger.info("🧹 Conexión a PostgreSQL cerrada.")
    except Exception as e:
        logger.error(f"⚠️ Error al cerrar conexión: {e}")


# ======================================================
# Inicializar aplicación
# ======================================================

app = FastAPI(lifespan=lifespan)

app.include_router(api_router, prefix="/api/v1")


@app.get("/")
async def root():
    return {"message": "API pintrails activa ✅"}


if __name__ == "__main__":
    port = int(os.getenv("PORT", 8000))
    uvicorn.run(app, host="0.0.0.0", port=port)
