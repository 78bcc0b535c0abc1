from fastapi import APIRouter, Request
from pintrails.db.bootstrap import BootstrapState
from pintrails.db.schemas.health import DatabaseStatusOut

router = APIRouter()

@router.get("/db", response_model=DatabaseStatusOut)
def database_status(request: Request):
    # Reporta el resultado del arranque; no vuelve a consultar la base de datos
    bootstrapper = getattr(request.app.state, "bootstrapper", None)
    if bootstrapper is None:
        return DatabaseStatusOut(state=BootstrapState.unconfigured.value)

    config = bootstrapper.config
    return DatabaseStatusOut(
        state=bootstrapper.state.value,
        host=config.host if config else None,
        database=config.database if config else None,
        error=bootstrapper.result.error if bootstrapper.result else None,
    )
