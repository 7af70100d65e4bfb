"""Application entry point for the Medcoders backend server."""

from medcoders.app import App
from medcoders.config import Config
from medcoders.logging import setup_logging
from medcoders.web.runner import run_server


def main() -> None:
    config = Config()
    setup_logging(config.debug)
    app = App(config)
    run_server(app, config)


if __name__ == "__main__":
    main()
