# src/taskpad/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState (settings -> storage -> TaskStore),
then runs the console REPL in the main thread.
"""

from __future__ import annotations

import logging
import signal

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def _shutdown(state) -> None:
    """Best-effort shutdown (no exceptions should escape)."""
    # Every mutation is already persisted; only release backend handles.
    try:
        storage = getattr(state, "storage", None)
        if storage is not None and hasattr(storage, "close"):
            storage.close()
    except Exception:
        logger.debug("Storage close failed.", exc_info=True)


def main() -> None:
    settings = get_settings()

    # choose console log level from settings.log_level
    level_name = str(getattr(settings, "log_level", "INFO")).upper()
    console_level = getattr(logging, level_name, logging.INFO)

    log_dir = getattr(settings, "data_dir", ".local/taskpad")
    log_file = setup_logging(log_dir=log_dir, console_level=console_level)

    logger.info("Starting %s... (log file: %s)", getattr(settings, "app_name", "taskpad"), log_file)

    # IMPORTANT: reuse same settings object
    state = create_initial_state(settings=settings)

    def _handle_signal(signum, _frame) -> None:
        logger.info("Signal %s received, shutting down...", signum)
        raise KeyboardInterrupt

    try:
        signal.signal(signal.SIGINT, _handle_signal)
        signal.signal(signal.SIGTERM, _handle_signal)
    except Exception:
        # Some platforms may not support SIGTERM, etc.
        pass

    try:
        if settings.console_enabled:
            run_console_loop(state)
        else:
            logger.info("Console disabled; nothing to run. Tasks loaded: %d", len(state.store.tasks))
    except KeyboardInterrupt:
        logger.info("Interrupted.")
    finally:
        _shutdown(state)
        logger.info("Bye.")


if __name__ == "__main__":
    main()
