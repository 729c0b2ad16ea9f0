from conlog.core.config import LogConfig
from conlog.core.levels import Severity


def test_defaults():
    cfg = LogConfig()
    assert cfg.colors and cfg.enabled and not cfg.flush
    assert cfg.threshold is Severity.INFO


def test_from_env_reads_switches():
    cfg = LogConfig.from_env({
        "CONLOG_COLOR_DISABLED": "1",
        "CONLOG_FLUSH": "yes",
        "CONLOG_DISABLED": "true",
        "CONLOG_LEVEL": "debug",
    })
    assert cfg.colors is False
    assert cfg.flush is True
    assert cfg.enabled is False
    assert cfg.normalize() is True
    assert cfg.threshold is Severity.DEBUG


def test_from_env_empty():
    cfg = LogConfig.from_env({})
    assert cfg == LogConfig()


def test_from_env_ignores_falsy_values():
    cfg = LogConfig.from_env({"CONLOG_COLOR_DISABLED": "0", "CONLOG_DISABLED": "off"})
    assert cfg.colors is True
    assert cfg.enabled is True


def test_normalize_resets_bad_threshold():
    cfg = LogConfig(threshold="chatty")
    assert cfg.normalize() is False
    assert cfg.threshold is Severity.INFO
