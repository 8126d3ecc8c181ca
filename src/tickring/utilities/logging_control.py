from __future__ import annotations

import logging
import os
import time
from dataclasses import dataclass
from functools import cache
from typing import Callable, Sequence

LOG_RULES_ENV_VAR = "TICKRING_LOG_RULES"
DEFAULT_INTERVAL_ENV_VAR = "TICKRING_LOG_DEFAULT_INTERVAL"
DEFAULT_INTERVAL_SECONDS = 1.0
DEFAULT_QUIET_LEVEL = logging.DEBUG


@dataclass(frozen=True)
class SampleRule:
    """``interval_seconds`` of ``None`` lets every statement through.

    Statements inside the interval go out at ``quiet_level``, or are dropped
    when it is ``None``.
    """

    interval_seconds: float | None
    quiet_level: int | None = DEFAULT_QUIET_LEVEL


class LoggingController:
    """Throttle keyed per-frame log statements to one per interval."""

    def __init__(
        self,
        *,
        default_rule: SampleRule,
        rules: dict[str, SampleRule] | None = None,
        monotonic: Callable[[], float] = time.monotonic,
    ) -> None:
        self._default_rule = default_rule
        self._rules = rules or {}
        self._monotonic = monotonic
        self._due: dict[str, float] = {}

    def rule_for(self, key: str) -> SampleRule:
        return self._rules.get(key, self._default_rule)

    def log(
        self,
        *,
        key: str,
        logger: logging.Logger,
        level: int,
        msg: str,
        args: Sequence[object] = (),
    ) -> bool:
        """Log ``msg`` at ``level`` if ``key`` is due; returns whether it was."""
        rule = self.rule_for(key)
        now = self._monotonic()
        if rule.interval_seconds is None or now >= self._due.get(key, 0.0):
            if rule.interval_seconds is not None:
                self._due[key] = now + rule.interval_seconds
            logger.log(level, msg, *args)
            return True
        if rule.quiet_level is not None:
            logger.log(rule.quiet_level, msg, *args)
        return False


def _parse_interval(value: str) -> float | None:
    if value.strip().lower() == "none":
        return None
    try:
        return float(value)
    except ValueError as exc:
        raise ValueError(f"Invalid log interval {value!r}") from exc


def _parse_level(name: str) -> int | None:
    if name.lower() == "none":
        return None
    level = logging.getLevelName(name.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level {name!r}")
    return level


def parse_rules(raw: str) -> dict[str, SampleRule]:
    """Parse comma separated ``key=interval[:QUIET_LEVEL]`` entries."""
    rules: dict[str, SampleRule] = {}
    for entry in filter(None, (part.strip() for part in raw.split(","))):
        key, sep, value = entry.partition("=")
        if not sep or not key.strip():
            raise ValueError(
                f"Invalid {LOG_RULES_ENV_VAR} entry {entry!r}; "
                "expected 'key=interval[:QUIET_LEVEL]'"
            )
        interval, _, quiet = value.partition(":")
        rules[key.strip()] = SampleRule(
            interval_seconds=_parse_interval(interval),
            quiet_level=_parse_level(quiet) if quiet else DEFAULT_QUIET_LEVEL,
        )
    return rules


@cache
def get_logging_controller() -> LoggingController:
    interval_raw = os.getenv(DEFAULT_INTERVAL_ENV_VAR)
    return LoggingController(
        default_rule=SampleRule(
            DEFAULT_INTERVAL_SECONDS
            if interval_raw is None
            else _parse_interval(interval_raw)
        ),
        rules=parse_rules(os.getenv(LOG_RULES_ENV_VAR, "")),
    )
