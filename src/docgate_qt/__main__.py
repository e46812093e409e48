"""Main entry point for the docgate demo application."""

import asyncio
from datetime import datetime, timezone
import glob
import json
import logging
from logging.handlers import RotatingFileHandler
import os
import sys
from types import TracebackType

from qasync import QEventLoop, QApplication  # type: ignore[import-untyped]

from docgate import DocGateError, DocGateSettings
from docgate_qt.doc_window import DocWindow


DEFAULT_SETTINGS_PATH = os.path.expanduser("~/.docgate/settings.json")


def setup_logging() -> None:
    """Configure application logging with timestamped files and rotation."""
    # Create logs directory in user's home .docgate directory
    log_dir = os.path.expanduser("~/.docgate/logs")
    os.makedirs(log_dir, exist_ok=True)

    # Generate timestamp for log filename
    timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%d-%H-%M-%S-%f")[:23]
    log_file = os.path.join(log_dir, f"{timestamp}.log")

    # Configure rotating file handler
    # Keep up to 20 log files, max 1MB each
    handler = RotatingFileHandler(
        log_file,
        maxBytes=1024*1024,  # 1MB
        backupCount=19,  # Keep 20 files total (current + 19 backups)
        encoding='utf-8'
    )

    # Configure logging
    logging.basicConfig(
        level=logging.DEBUG,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[handler]
    )

    # Clean up old logs if we have too many
    cleanup_old_logs(log_dir, max_logs=20)


def cleanup_old_logs(log_dir: str, max_logs: int) -> None:
    """Remove oldest log files if we exceed maximum count."""
    log_files = glob.glob(os.path.join(log_dir, "*.log*"))
    log_files.sort(key=os.path.getctime)  # Sort by creation time

    # Remove oldest files if we have too many
    while len(log_files) > max_logs:
        try:
            os.remove(log_files.pop(0))  # Remove oldest file

        except OSError:
            pass  # Ignore errors removing old logs


def install_global_exception_handler() -> None:
    """Install a global exception handler for uncaught exceptions."""
    logger = logging.getLogger('GlobalExceptionHandler')

    def handle_exception(exc_type: type[BaseException], exc_value: BaseException, exc_traceback: TracebackType | None) -> None:
        """Handle uncaught exceptions and log them."""
        if issubclass(exc_type, KeyboardInterrupt):
            # Don't log keyboard interrupt
            sys.__excepthook__(exc_type, exc_value, exc_traceback)
            return

        logger.critical(
            "Uncaught exception",
            exc_info=(exc_type, exc_value, exc_traceback),
            stack_info=True
        )

    sys.excepthook = handle_exception


def load_settings(path: str) -> DocGateSettings:
    """
    Load gate settings, falling back to defaults if they cannot be read.

    Args:
        path: Path to the settings file

    Returns:
        Loaded or default settings
    """
    logger = logging.getLogger('DocGateSettings')
    if not os.path.exists(path):
        return DocGateSettings.create_default()

    try:
        return DocGateSettings.load(path)

    except (OSError, json.JSONDecodeError, DocGateError) as e:
        logger.error("Failed to load settings from '%s': %s", path, str(e))
        return DocGateSettings.create_default()


def main() -> int:
    """Main function to run the application."""
    setup_logging()
    install_global_exception_handler()

    settings_path = sys.argv[1] if len(sys.argv) > 1 else DEFAULT_SETTINGS_PATH
    settings = load_settings(settings_path)

    # Create application
    app = QApplication(sys.argv)

    # Create and set event loop
    loop = QEventLoop(app)
    asyncio.set_event_loop(loop)

    window = DocWindow(settings)
    window.show()

    # Run the main function
    try:
        with loop:
            loop.run_forever()

    except KeyboardInterrupt:
        return 0

    return 0


if __name__ == "__main__":
    sys.exit(main())
