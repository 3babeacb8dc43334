"""Tests for the uvicorn entrypoint."""

import logging

import pytest

import server

CONFIG_VARS = ("SNOWMAN_WORD", "SNOWMAN_MAX_GUESSES", "ALLOWED_ORIGINS", "HOST", "PORT", "LOG_LEVEL")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in CONFIG_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def run_calls(monkeypatch: pytest.MonkeyPatch) -> list[tuple[tuple, dict]]:
    calls: list[tuple[tuple, dict]] = []
    monkeypatch.setattr(server.uvicorn, "run", lambda *args, **kwargs: calls.append((args, kwargs)))
    return calls


def test_main_runs_app_on_configured_host_and_port(
    monkeypatch: pytest.MonkeyPatch, run_calls: list[tuple[tuple, dict]]
) -> None:
    monkeypatch.setenv("HOST", "0.0.0.0")
    monkeypatch.setenv("PORT", "9001")
    monkeypatch.setenv("LOG_LEVEL", "warning")

    server.main()

    assert len(run_calls) == 1
    args, kwargs = run_calls[0]
    assert args[0].title == "Melting Snowman API"
    assert kwargs == {"host": "0.0.0.0", "port": 9001, "log_level": "warning"}


@pytest.mark.parametrize(
    ("name", "value"),
    [("LOG_LEVEL", "verbose"), ("PORT", "70000"), ("SNOWMAN_MAX_GUESSES", "none")],
)
def test_main_exits_on_invalid_config(
    monkeypatch: pytest.MonkeyPatch,
    caplog: pytest.LogCaptureFixture,
    run_calls: list[tuple[tuple, dict]],
    name: str,
    value: str,
) -> None:
    monkeypatch.setenv(name, value)

    with caplog.at_level(logging.ERROR), pytest.raises(SystemExit) as excinfo:
        server.main()

    assert excinfo.value.code == 1
    assert run_calls == []
    assert name in caplog.text
