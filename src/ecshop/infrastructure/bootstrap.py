"""Composition root: wires concrete implementations for the CLI.

This is the only place in the codebase that knows about *all* layers.
"""

from __future__ import annotations

import logging

from ecshop.application.validate_order import OrderInputValidator

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
DEFAULT_LOG_LEVEL = "WARNING"


def configure_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)


def order_input_validator() -> OrderInputValidator:
    return OrderInputValidator()
