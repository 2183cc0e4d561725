"""Entry point for the revolver calculator demo."""

from revolver.calculator import run
from revolver.config import get_config
from revolver.log import configure_logging


def main() -> None:
    """Run the calculator on stdin/stdout."""
    config = get_config()
    configure_logging(config.log_level)
    run(config=config)


if __name__ == "__main__":
    main()
