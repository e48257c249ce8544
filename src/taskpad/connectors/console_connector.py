# src/taskpad/connectors/console_connector.py

from __future__ import annotations

import logging

from ..cli.commands import add_from_input, format_stats, format_task_list
from ..cli.commands import registry as command_registry
from ..core.state import AppState

logger = logging.getLogger(__name__)

PROMPT = "> "


def run_console_loop(state: AppState) -> None:
    app_name = str(getattr(getattr(state, "settings", None), "app_name", "taskpad"))
    logger.info("Console connector started.")
    print(f"{app_name}: type a task to add it. Use /help for commands, /exit to quit.\n")
    print(format_task_list(state))
    print(format_stats(state))

    def emit(text: str) -> None:
        print(text, flush=True)

    while True:
        try:
            user_input = input(PROMPT).strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        if user_input.lower() in ("/exit", "/quit", "/q"):
            logger.info("Console exit command received.")
            break

        try:
            reply = command_registry.handle(state, user_input, emit=emit)
            if reply is None:
                reply = add_from_input(state, user_input)
        except Exception:
            logger.exception("Command handler crashed.")
            reply = "Internal error while handling a command."

        print(reply)

    logger.info("Console connector finished.")
