import pytest

from rtt.config import QUIT_TIMES, STATUS_TIMEOUT, TAB_STOP, EditorConfig
from rtt.editor.render import text_area_size


def test_defaults() -> None:
    config = EditorConfig()

    assert config.tab_stop == TAB_STOP == 8
    assert config.quit_times == QUIT_TIMES == 3
    assert config.status_timeout == STATUS_TIMEOUT == 5.0


def test_from_env_reads_prefixed_values() -> None:
    config = EditorConfig.from_env(
        {
            "RTT_TAB_STOP": "4",
            "RTT_QUIT_TIMES": "1",
            "RTT_STATUS_TIMEOUT": "2.5",
            "RTT_ENCODING": "latin-1",
        }
    )

    assert config.tab_stop == 4
    assert config.quit_times == 1
    assert config.status_timeout == 2.5
    assert config.encoding == "latin-1"


@pytest.mark.parametrize("value", ["", "zero", "0", "-3"])
def test_from_env_ignores_invalid_values(value: str) -> None:
    config = EditorConfig.from_env({"RTT_TAB_STOP": value, "RTT_STATUS_TIMEOUT": value})

    assert config.tab_stop == TAB_STOP
    assert config.status_timeout == STATUS_TIMEOUT


def test_from_env_uses_process_environment(monkeypatch) -> None:
    monkeypatch.setenv("RTT_QUIT_TIMES", "5")

    assert EditorConfig.from_env().quit_times == 5


def test_text_area_reserves_two_rows() -> None:
    assert text_area_size(80, 24) == (80, 22)
    assert text_area_size(0, 1) == (1, 1)
