"""Application entry point for EventBoard backend server."""

from eventboard.app import App
from eventboard.config import Config
from eventboard.logging import setup_logging
from eventboard.web.runner import run_server


def main() -> None:
    config = Config()
    setup_logging(config.debug)
    app = App(config)
    run_server(app, config)


if __name__ == "__main__":
    main()
