import uvicorn

from infrastructure.services import get_settings
from server import server

server_app = server.handler


def main():
    """Run the API server."""
    settings = get_settings()
    uvicorn.run(
        "main:server_app",
        host=settings.server.HOST,
        port=settings.server.PORT,
        log_config=None,
    )


if __name__ == "__main__":
    main()
