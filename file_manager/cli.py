import logging

from file_manager.config.settings import Settings, configure_logging
from file_manager.container import DependencyContainer
from file_manager.exceptions import ConfigurationError, FileRepositoryError
from file_manager.repl import Repl, create_console


def main() -> int:
    console = create_console()
    try:
        settings = Settings()
    except ConfigurationError as e:
        console.print(f"Configuration error: {e}")
        return 2
    configure_logging(settings)
    logger = logging.getLogger(__name__)

    container = DependencyContainer()
    try:
        engine = container.get_command_engine()
    except FileRepositoryError as e:
        console.print(f"Cannot determine current directory: {e}")
        return 1

    logger.info(f"Starting in {engine.working_directory}")
    repl = Repl(
        engine,
        console=console,
        collapse_whitespace=settings.collapse_whitespace,
    )
    return repl.run()


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
