"""Entry point for running Ping directly."""

import uvicorn

from . import config


def main():
    """Run the Ping server."""
    uvicorn.run(
        "ping.app:app",
        host=config.HOST,
        port=config.PORT,
        reload=config.RELOAD,
    )


if __name__ == "__main__":
    main()
