from __future__ import annotations

import logging
from pathlib import Path

import pytest

from vela_import.app import ImportResult
from vela_import.config import FatalPolicy, ImportConfig
from vela_import.ui import cli


@pytest.fixture
def captured(monkeypatch: pytest.MonkeyPatch) -> dict[str, object]:
    logging_calls: list[dict[str, object]] = []
    calls: dict[str, object] = {"logging": logging_calls}

    def fake_run_import(regions: Path, output: Path, *, config: ImportConfig) -> ImportResult:
        calls.update(regions=regions, output=output, config=config)
        return ImportResult(rows=1, records=1)

    def fake_configure_logging(**kwargs: object) -> None:
        logging_calls.append(kwargs)

    monkeypatch.setattr(cli, "run_import", fake_run_import)
    monkeypatch.setattr(cli, "configure_logging", fake_configure_logging)
    for name in ("VELA_THESAURI_PATH", "VELA_ON_FATAL", "VELA_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    return calls


def test_import_defaults(captured: dict[str, object]) -> None:
    cli.main(["import", "data/survey.jsonl"])

    assert captured["regions"] == Path("data/survey.jsonl")
    assert captured["output"] == Path("data/survey.records.jsonl")
    config = captured["config"]
    assert isinstance(config, ImportConfig)
    assert config.on_fatal is FatalPolicy.ABORT
    assert config.log_level == logging.INFO


def test_import_with_flags(captured: dict[str, object]) -> None:
    cli.main(
        [
            "import",
            "survey.jsonl",
            "--output",
            "out/records.jsonl",
            "--thesauri",
            "thesauri.json",
            "--on-fatal",
            "Skip-Row",
            "-v",
        ]
    )

    assert captured["output"] == Path("out/records.jsonl")
    config = captured["config"]
    assert isinstance(config, ImportConfig)
    assert config.thesauri_path == Path("thesauri.json")
    assert config.on_fatal is FatalPolicy.SKIP_ROW
    assert config.log_level == logging.DEBUG
    assert captured["logging"] == [{}, {"level": logging.DEBUG, "force": True}]


def test_environment_provides_defaults(
    captured: dict[str, object], monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("VELA_ON_FATAL", "skip-row")
    monkeypatch.setenv("VELA_THESAURI_PATH", "/srv/thesauri.json")

    cli.main(["import", "survey.jsonl"])

    config = captured["config"]
    assert isinstance(config, ImportConfig)
    assert config.on_fatal is FatalPolicy.SKIP_ROW
    assert config.thesauri_path == Path("/srv/thesauri.json")


def test_invalid_policy_exits_with_2(captured: dict[str, object]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["import", "survey.jsonl", "--on-fatal", "ignore"])

    assert excinfo.value.code == 2
    assert "config" not in captured


def test_missing_command_exits_with_2(captured: dict[str, object]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.main([])

    assert excinfo.value.code == 2
    assert "config" not in captured


def test_import_failure_exits_with_1(
    captured: dict[str, object], monkeypatch: pytest.MonkeyPatch
) -> None:
    def failing_run_import(*_: object, **__: object) -> ImportResult:
        raise OSError("disk full")

    monkeypatch.setattr(cli, "run_import", failing_run_import)

    with pytest.raises(SystemExit) as excinfo:
        cli.main(["import", "survey.jsonl"])

    assert excinfo.value.code == 1
