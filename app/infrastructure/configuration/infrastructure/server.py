"""Server infrastructure settings."""

from pydantic import Field

from infrastructure.configuration.base import InfrastructureSettings


class ServerSettings(InfrastructureSettings):
    """HTTP listener configuration.

    Environment Variables:
        HOST: Bind address (default: 0.0.0.0)
        PORT: Bind port (default: 7979)

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()

        uvicorn.run(app, host=settings.server.HOST, port=settings.server.PORT)
        ```
    """

    HOST: str = Field(default="0.0.0.0", alias="HOST")
    PORT: int = Field(default=7979, alias="PORT")
