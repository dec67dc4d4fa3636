import json
import logging
import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

import cli
from core.logging_setup import setup_console_logging
from testhub.utils import json_utils, time_utils, validation


def test_isoformat_utc_treats_naive_as_utc() -> None:
    naive = datetime(2024, 1, 1, 12, 0, 0, 123456)
    assert time_utils.isoformat_utc(naive) == "2024-01-01T12:00:00.123Z"

    shifted = datetime(2024, 1, 1, 17, 30, tzinfo=timezone(timedelta(hours=5, minutes=30)))
    assert time_utils.isoformat_utc(shifted) == "2024-01-01T12:00:00.000Z"
    assert time_utils.isoformat_utc(None) is None


def test_epoch_millis_is_milliseconds() -> None:
    now = time_utils.epoch_millis()
    assert abs(now - time_utils.utc_now().timestamp() * 1000) < 5000


def test_read_json_file(tmp_path: Path) -> None:
    payload = {"name": "गणित", "count": 2}
    path = tmp_path / "payload.json"
    path.write_text(json.dumps(payload, ensure_ascii=False), encoding="utf-8")
    assert json_utils.read_json_file(path, {}) == payload
    assert json_utils.read_json_file(tmp_path / "missing.json", {"fallback": True}) == {"fallback": True}


def test_setup_console_logging_accepts_names() -> None:
    setup_console_logging("warning")
    assert logging.getLogger().level == logging.WARNING
    setup_console_logging("not-a-level")
    assert logging.getLogger().level == logging.INFO


@pytest.mark.parametrize("wrapped", [True, False])
def test_cli_loads_seed_file(tmp_path: Path, wrapped: bool) -> None:
    tests = [{"id": "t1", "name": "Math", "subject": "Math", "duration": 60}]
    path = tmp_path / "seed.json"
    path.write_text(json.dumps({"tests": tests} if wrapped else tests), encoding="utf-8")
    assert cli.load_seed_tests(path) == tests


def test_cli_seed_reports_server_message(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    calls = []

    class FakeStorage:
        def __init__(self, base_url: str) -> None:
            calls.append(base_url)

        def init_data(self, tests):
            return f"Initialized database with {len(tests)} tests"

    path = tmp_path / "seed.json"
    path.write_text(json.dumps([{"id": "t1"}, {"id": "t2"}]), encoding="utf-8")
    monkeypatch.setattr(cli, "StorageService", FakeStorage)

    assert cli.main(["seed", str(path), "--url", "http://example.test"]) == 0
    assert calls == ["http://example.test"]
    assert capsys.readouterr().out.strip() == "Initialized database with 2 tests"


def test_cli_seed_missing_file_fails(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    def unexpected_storage(base_url: str):
        raise AssertionError("nothing should be sent")

    monkeypatch.setattr(cli, "StorageService", unexpected_storage)
    missing = tmp_path / "typo.json"

    assert cli.main(["seed", str(missing)]) == 1
    assert f"Seed file not found: {missing}" in capsys.readouterr().err


def test_main_passes_configured_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    import main
    from testhub import config

    calls = []
    monkeypatch.setattr(config, "LOG_LEVEL", "WARNING")
    monkeypatch.setattr(main.uvicorn, "run", lambda app, **kwargs: calls.append((app, kwargs)))
    monkeypatch.setattr(sys, "argv", ["main.py", "--port", "8123"])

    main.main()

    assert calls == [("testhub.app:app", {"host": config.HOST, "port": 8123, "log_level": "warning"})]


def test_describe_validation_errors_prefixes_location() -> None:
    errors = [
        {"loc": ("body", "name"), "msg": "Field required"},
        {"loc": ("questions", 0, "options"), "msg": "Input should be a valid list"},
    ]
    assert validation.describe_validation_errors(errors) == (
        "Validation failed: name: Field required; "
        "questions.0.options: Input should be a valid list"
    )
    assert validation.describe_validation_errors(errors[:1], ("tests", 2)) == (
        "Validation failed: tests.2.name: Field required"
    )
