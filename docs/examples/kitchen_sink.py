"""Walk through every FlagSet operation on a small set of account flags.

Run with::

    python docs/examples/kitchen_sink.py
"""
from __future__ import annotations

import os

from flagmask.config.settings import FlagSetSettings, build_flag_set
from flagmask.observability.logging import JsonLoggerFactory, get_logger

log = get_logger("kitchen_sink")


def main() -> None:
    settings = FlagSetSettings(
        labels=["is_admin", "dark_mode", "experimental_mode", "pro_account"],
        log_level=os.environ.get("FLAGMASK_LOG_LEVEL", "DEBUG"),
    )
    JsonLoggerFactory.configure(level=settings.log_level)

    feature_flags = build_flag_set(settings)
    log.info("defined", active=feature_flags.list_active_flags())  # []

    # Turn a flag on
    log.info("set", state=feature_flags.set_flag("dark_mode"))  # 2 (0b0010)
    log.info("active", flags=feature_flags.list_active_flags())  # ["dark_mode"]

    # Individual flag status
    log.info("status", dark_mode=feature_flags.is_flag_active("dark_mode"))  # True
    log.info("status", is_admin=feature_flags.is_flag_active("is_admin"))  # False

    log.info("set", state=feature_flags.set_flag("pro_account"))  # 10 (0b1010)
    log.info("active", flags=feature_flags.list_active_flags())  # ["dark_mode", "pro_account"]

    # All flags as (label, active) pairs
    log.info("all", flags=feature_flags.list_all_flags())

    # Unset a flag
    log.info("clear", state=feature_flags.clear_flag("dark_mode"))  # 8 (0b1000)

    # Completely remove a flag
    feature_flags.remove_flag("pro_account")
    log.info("removed", state=feature_flags.get_state(), length=len(feature_flags))  # 0, 3

    # Add a new flag
    feature_flags.add_flag("is_moderator")
    log.info("added", state=feature_flags.set_flag("is_moderator"))  # 8 (0b1000)

    # Turn all flags on, then off
    feature_flags.set_state(15)
    log.info("all_on", state=feature_flags.get_state())  # 15 (0b1111)
    feature_flags.set_state(0)
    log.info("all_off", state=feature_flags.get_state())  # 0


if __name__ == "__main__":
    main()
