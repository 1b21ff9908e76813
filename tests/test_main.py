import json
import logging

import pytest

from week_logs import main as main_module

from .conftest import FakeSheetsClient


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("LOG_DIR", str(tmp_path / "logs"))
    monkeypatch.setattr(main_module, "setup_logging", lambda: None)


@pytest.fixture
def fake_client_factory(monkeypatch, sample_rows):
    def factory(spreadsheet_id, credentials_path):
        return FakeSheetsClient(sample_rows)

    monkeypatch.setattr(main_module, "GoogleSheetsClient", factory)


def test_writes_a_pdf_per_week(monkeypatch, tmp_path, raw_config, copying_converter, fake_client_factory):
    raw_config["converter"] = str(copying_converter)
    config_path = tmp_path / "config.json"
    config_path.write_text(json.dumps(raw_config), encoding="utf-8")
    monkeypatch.setenv("WEEK_LOGS_CONFIG", str(config_path))

    main_module.main()

    assert "Weekly report, week 1" in (tmp_path / "week-01.pdf").read_text(encoding="utf-8")
    assert "Weekly report, week 2" in (tmp_path / "week-02.pdf").read_text(encoding="utf-8")


def test_missing_config_exits_non_zero(monkeypatch, tmp_path, caplog):
    monkeypatch.setenv("WEEK_LOGS_CONFIG", str(tmp_path / "missing.json"))

    with caplog.at_level(logging.ERROR), pytest.raises(SystemExit) as exc_info:
        main_module.main()

    assert exc_info.value.code == 1
    assert "Unable to load config" in caplog.text


def test_converter_failure_names_the_week(monkeypatch, tmp_path, raw_config, failing_converter, fake_client_factory, caplog):
    raw_config["converter"] = str(failing_converter)
    config_path = tmp_path / "config.json"
    config_path.write_text(json.dumps(raw_config), encoding="utf-8")
    monkeypatch.setenv("WEEK_LOGS_CONFIG", str(config_path))

    with caplog.at_level(logging.ERROR), pytest.raises(SystemExit) as exc_info:
        main_module.main()

    assert exc_info.value.code == 1
    assert "Unable to render week 1" in caplog.text
    assert not (tmp_path / "week-02.pdf").exists()


def test_short_row_logs_one_error_naming_the_stage(monkeypatch, tmp_path, config_file, caplog):
    def factory(spreadsheet_id, credentials_path):
        return FakeSheetsClient([["01/01/24", "desc", "note", "9h"], ["02/01/24", "desc", "note"]])

    monkeypatch.setattr(main_module, "GoogleSheetsClient", factory)
    monkeypatch.setenv("WEEK_LOGS_CONFIG", str(config_file))

    with caplog.at_level(logging.INFO), pytest.raises(SystemExit) as exc_info:
        main_module.main()

    errors = [record.getMessage() for record in caplog.records if record.levelno >= logging.ERROR]
    assert exc_info.value.code == 1
    assert len(errors) == 1
    assert errors[0].startswith("Unable to fetch and group logs. Row 2:")
    assert not (tmp_path / "week-01.pdf").exists()


def test_missing_credentials_exits_non_zero(monkeypatch, tmp_path, config_file, caplog):
    monkeypatch.setenv("WEEK_LOGS_CONFIG", str(config_file))
    monkeypatch.setenv("GOOGLE_CREDENTIALS", str(tmp_path / "missing-credentials.json"))

    with caplog.at_level(logging.ERROR), pytest.raises(SystemExit) as exc_info:
        main_module.main()

    assert exc_info.value.code == 1
    assert "Unable to authenticate." in caplog.text
