# src/tasklist/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState (loading the initial tasks), then runs
the console REPL in the main thread.
"""

from __future__ import annotations

import logging

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import setup_logging
from ..tasks.task_api import log_tasks

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "INFO")).upper()
    console_level = getattr(logging, level_name, logging.INFO)

    setup_logging(log_dir=settings.data_dir, console_level=console_level)

    logger.info("Starting %s...", settings.app_name)

    state = create_initial_state(settings=settings)
    log_tasks(state.task_store, level=logging.DEBUG)

    try:
        run_console_loop(state)
    finally:
        log_tasks(state.task_store, level=logging.DEBUG)
        logger.info("Bye.")


if __name__ == "__main__":
    main()
