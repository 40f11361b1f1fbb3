from optimistic.utils.logging import get, level_from_env


def test_logger_levels():
    logger = get("debug")
    assert logger.level == 10  # DEBUG
    logger = get("error")
    assert logger.level == 40  # ERROR
    logger = get("bogus")
    assert logger.level == 20  # unknown → INFO


def test_level_from_env(monkeypatch):
    monkeypatch.setenv("OPTIMISTIC_LOG_LEVEL", "DEBUG")
    assert level_from_env() == "debug"
    monkeypatch.delenv("OPTIMISTIC_LOG_LEVEL")
    assert level_from_env() == "warning"
