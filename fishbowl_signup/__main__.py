"""Serve the signup API with uvicorn: ``python -m fishbowl_signup``."""

import uvicorn

from .config.app_config import get_app_config


def main() -> None:
    """Start uvicorn on the configured host and port."""
    app_config = get_app_config()
    # Loguru owns logging; uvicorn's records reach it through the stdlib bridge.
    uvicorn.run(
        "fishbowl_signup.main:app",
        host=app_config.app_host,
        port=app_config.app_port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
