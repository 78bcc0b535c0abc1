import logging
from enum import Enum
from typing import Optional

from sqlalchemy.engine import Engine

from pintrails.core.config import EnvironmentConfig, settings
from pintrails.db.session import VerificationResult, build_connection, verify

logger = logging.getLogger(__name__)


class BootstrapState(str, Enum):
    unconfigured = "unconfigured"
    configured = "configured"
    verified = "verified"
    verification_failed = "verification_failed"


class VerifyFailurePolicy(str, Enum):
    # continue: se registra el error y el proceso sigue sin conexión verificada
    # exit: se registra el error y se aborta el arranque
    continue_ = "continue"
    exit = "exit"


class DatabaseUnavailableError(RuntimeError):
    pass


class ConnectionBootstrapper:
    """
    Secuencia de arranque: leer entorno -> construir engine -> verificar.
    Se ejecuta una sola vez; no hay reintentos.
    """

    def __init__(
        self,
        config: Optional[EnvironmentConfig] = None,
        on_verify_failure: Optional[VerifyFailurePolicy] = None,
    ):
        self.config = config
        self.on_verify_failure = VerifyFailurePolicy(
            on_verify_failure or settings.ON_VERIFY_FAILURE
        )
        self.engine: Optional[Engine] = None
        self.result: Optional[VerificationResult] = None
        self.state = BootstrapState.unconfigured

    def configure(self) -> Engine:
        if self.engine is None:
            if self.config is None:
                self.config = EnvironmentConfig.from_env()
            self.engine = build_connection(
                self.config.database,
                self.config.user,
                self.config.password,
                self.config.host,
            )
            self.state = BootstrapState.configured
        return self.engine

    def run(self) -> BootstrapState:
        if self.state in (BootstrapState.verified, BootstrapState.verification_failed):
            return self.state

        self.result = verify(self.configure())
        if self.result.ok:
            self.state = BootstrapState.verified
            return self.state

        self.state = BootstrapState.verification_failed
        if self.on_verify_failure is VerifyFailurePolicy.exit:
            raise DatabaseUnavailableError(self.result.error)
        return self.state

    def dispose(self) -> None:
        if self.engine is not None:
            self.engine.dispose()
