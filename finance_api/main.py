"""
Entry point del proceso HTTP.

    finance-api                                   # usa PORT (default 3000)
    uvicorn finance_api.main:create_app --factory # equivalente

La app se construye en el factory (no al importar): settings inválidos
fallan al arrancar el servidor, no al importar el paquete.
"""

import uvicorn

from .api.main import create_app
from .crosscutting.config import get_settings

__all__ = ["create_app", "run"]


def run() -> None:
    settings = get_settings()
    uvicorn.run(
        "finance_api.main:create_app",
        factory=True,
        host="0.0.0.0",
        port=settings.port,
        log_config=None,
    )


if __name__ == "__main__":
    run()
