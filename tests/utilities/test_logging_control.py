import logging

import pytest

from tickring.utilities import logging_control
from tickring.utilities.logging_control import LoggingController, SampleRule


class StubLogger:
    def __init__(self) -> None:
        self.records: list[tuple[int, str, tuple[object, ...]]] = []

    def log(self, level: int, msg: str, *args: object) -> None:
        self.records.append((level, msg, tuple(args)))


@pytest.fixture(autouse=True)
def reset_logging_controller_cache() -> None:
    logging_control.get_logging_controller.cache_clear()
    yield
    logging_control.get_logging_controller.cache_clear()


def _controller(rules=None, now=None) -> LoggingController:
    return LoggingController(
        default_rule=SampleRule(1.0),
        rules=rules,
        monotonic=now or (lambda: 0.0),
    )


def test_interval_demotes_repeats_until_it_elapses() -> None:
    """Per-frame statements go out once per interval and fall back to DEBUG in between."""
    clock = [0.0]
    controller = _controller(now=lambda: clock[0])
    logger = StubLogger()

    def emit() -> bool:
        return controller.log(
            key="clock.frame", logger=logger, level=logging.INFO, msg="frame"
        )

    assert emit() is True
    assert emit() is False
    clock[0] = 1.0
    assert emit() is True

    assert [level for level, _, _ in logger.records] == [
        logging.INFO,
        logging.DEBUG,
        logging.INFO,
    ]


def test_keys_are_sampled_independently() -> None:
    controller = _controller()
    logger = StubLogger()

    assert controller.log(key="a", logger=logger, level=logging.INFO, msg="a")
    assert controller.log(key="b", logger=logger, level=logging.INFO, msg="b")


def test_unthrottled_rule_always_emits() -> None:
    controller = _controller(rules=logging_control.parse_rules("clock.frame=none"))
    logger = StubLogger()

    for _ in range(3):
        controller.log(
            key="clock.frame",
            logger=logger,
            level=logging.DEBUG,
            msg="frame %s",
            args=("x",),
        )

    assert logger.records == [(logging.DEBUG, "frame %s", ("x",))] * 3


def test_quiet_level_none_drops_repeats() -> None:
    controller = _controller(rules=logging_control.parse_rules("clock.frame=5:none"))
    logger = StubLogger()

    controller.log(key="clock.frame", logger=logger, level=logging.INFO, msg="frame")
    controller.log(key="clock.frame", logger=logger, level=logging.INFO, msg="frame")

    assert [level for level, _, _ in logger.records] == [logging.INFO]


def test_parse_rules_reads_every_field() -> None:
    rules = logging_control.parse_rules("clock.frame=0.5:WARNING, driver=none")

    assert rules["clock.frame"] == SampleRule(0.5, logging.WARNING)
    assert rules["driver"] == SampleRule(None, logging.DEBUG)


@pytest.mark.parametrize("raw", ["clock.frame", "clock.frame=often", "x=1:LOUD", "=1"])
def test_parse_rules_rejects_malformed_entries(raw: str) -> None:
    with pytest.raises(ValueError):
        logging_control.parse_rules(raw)


def test_controller_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TICKRING_LOG_RULES", "clock.frame=none")
    monkeypatch.setenv("TICKRING_LOG_DEFAULT_INTERVAL", "2.5")

    controller = logging_control.get_logging_controller()

    assert controller.rule_for("clock.frame").interval_seconds is None
    assert controller.rule_for("other").interval_seconds == 2.5
