import pytest

from json_type_report.config import AppCfg, ConfigError, load_config


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    monkeypatch.delenv("JSON_TYPE_REPORT_LOG_LEVEL", raising=False)
    monkeypatch.delenv("JSON_TYPE_REPORT_LOG_DIR", raising=False)


def test_defaults_without_file():
    cfg = load_config(None)
    assert cfg == AppCfg()
    assert cfg.report.max_column_width == 40
    assert cfg.logging.level == "WARNING"


def test_partial_file_and_coercion(tmp_path):
    p = tmp_path / "c.yaml"
    p.write_text("report:\n  max_column_width: '12'\n  raw: 'yes'\n", encoding="utf-8")
    cfg = load_config(str(p))
    assert cfg.report.max_column_width == 12
    assert cfg.report.raw is True
    assert cfg.logging.file_prefix == "diagnostics"


def test_bad_width_falls_back(tmp_path):
    p = tmp_path / "c.yaml"
    p.write_text("report:\n  max_column_width: wide\n", encoding="utf-8")
    assert load_config(str(p)).report.max_column_width == 40


def test_env_overrides(tmp_path, monkeypatch):
    monkeypatch.setenv("JSON_TYPE_REPORT_LOG_LEVEL", "debug")
    monkeypatch.setenv("JSON_TYPE_REPORT_LOG_DIR", str(tmp_path))
    cfg = load_config(None)
    assert cfg.logging.level == "DEBUG"
    assert cfg.logging.ndjson_dir == str(tmp_path)


@pytest.mark.parametrize("text", ["- a\n- b\n", "logging:\n  colour: red\n", "a: [\n", "report: oops\n", "logging: [1]\n", "report: 3\n"])
def test_invalid_config(tmp_path, text):
    p = tmp_path / "c.yaml"
    p.write_text(text, encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(str(p))
