"""ANSI-colored console logging for outbound gateway calls.

Color scheme:
    🔵 Blue    — Service requests
    🟣 Magenta — Health checks
    🔴 Red     — Failures (any stage)
    ⚪ Gray    — Timing / details
"""

import logging
import time
from collections.abc import Iterator
from contextlib import contextmanager
from enum import Enum
from typing import Any


class _Colors:
    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    RED = "\033[91m"
    GREEN = "\033[92m"
    BLUE = "\033[94m"
    MAGENTA = "\033[95m"
    GRAY = "\033[90m"


class GatewayStage(Enum):
    """Kinds of gateway activity, each with its label, color and icon."""

    REQUEST = ("REQUEST", _Colors.BLUE, "➡️")
    HEALTH = ("HEALTH", _Colors.MAGENTA, "🩺")

    @property
    def label(self) -> str:
        return self.value[0]

    @property
    def color(self) -> str:
        return self.value[1]

    @property
    def icon(self) -> str:
        return self.value[2]


class GatewayLogger:
    """Color-coded logger for client gateway calls.

    Usage:
        log = GatewayLogger("ClientGateway")
        with log.timed_step(GatewayStage.REQUEST, "GET http://localhost:3001/products") as outcome:
            response = await client.get(url)
            outcome["status"] = response.status_code
    """

    def __init__(self, component_name: str):
        self._logger = logging.getLogger(component_name)

    def started(self, stage: GatewayStage, message: str) -> None:
        self._logger.debug(
            f"{stage.color}{_Colors.BOLD}{stage.icon} [{stage.label}]{_Colors.RESET} "
            f"{stage.color}{message}{_Colors.RESET}"
        )

    def finished(self, stage: GatewayStage, message: str, **fields: Any) -> None:
        self._logger.info(
            f"{stage.color}{stage.icon} [{stage.label}]{_Colors.RESET} "
            f"{_Colors.GREEN}✓ {message}{_Colors.RESET}{_fields(fields)}"
        )

    def failed(self, stage: GatewayStage, message: str, error: BaseException | None = None) -> None:
        """Warning level: a failed call is reported to the caller as an ApiError, not fatal here."""
        line = (
            f"{_Colors.RED}{_Colors.BOLD}❌ [{stage.label}]{_Colors.RESET} "
            f"{_Colors.RED}{message}{_Colors.RESET}"
        )
        if error is not None:
            line += f" {_Colors.DIM}→ {error}{_Colors.RESET}"
        self._logger.warning(line)

    @contextmanager
    def timed_step(self, stage: GatewayStage, message: str) -> Iterator[dict[str, Any]]:
        """Log start and end of a step with elapsed time.

        Yields a dict; whatever the block stores in it is appended to the
        completion line.
        """
        outcome: dict[str, Any] = {}
        self.started(stage, message)
        start = time.perf_counter()
        try:
            yield outcome
        except Exception as e:
            self.failed(stage, f"{message} failed after {time.perf_counter() - start:.2f}s", error=e)
            raise
        self.finished(stage, f"{message} ({time.perf_counter() - start:.2f}s)", **outcome)


def _fields(fields: dict[str, Any]) -> str:
    if not fields:
        return ""
    joined = " | ".join(f"{k}={v}" for k, v in fields.items())
    return f" {_Colors.GRAY}({joined}){_Colors.RESET}"
