"""Tests for environment settings and chart spec files."""

from __future__ import annotations

import pytest
import yaml

from image_charts import ImageCharts
from image_charts.core.chart_spec import load_chart_spec, parse_chart_spec
from image_charts.core.config import Settings, get_settings

ENV_VARS = [
    "IMAGE_CHARTS_SECRET",
    "IC_SECRET",
    "IMAGE_CHARTS_PROTOCOL",
    "IMAGE_CHARTS_HOST",
    "IMAGE_CHARTS_PORT",
    "IMAGE_CHARTS_TIMEOUT",
    "IMAGE_CHARTS_USER_AGENT",
]


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Isolate settings from the developer's environment and .env file."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_defaults(clean_env):
    settings = get_settings()
    assert settings == Settings(secret=None)
    assert settings.host == "image-charts.com"
    assert settings.port == 443
    assert settings.timeout == 5000


def test_reads_environment(clean_env, monkeypatch):
    monkeypatch.setenv("IMAGE_CHARTS_SECRET", "s3cr3t")
    monkeypatch.setenv("IMAGE_CHARTS_HOST", "charts.internal")
    monkeypatch.setenv("IMAGE_CHARTS_PORT", "8080")
    monkeypatch.setenv("IMAGE_CHARTS_PROTOCOL", "http")
    monkeypatch.setenv("IMAGE_CHARTS_TIMEOUT", "1500")
    monkeypatch.setenv("IMAGE_CHARTS_USER_AGENT", "reports/2.0")

    settings = get_settings()

    assert settings.secret == "s3cr3t"
    assert settings.host == "charts.internal"
    assert settings.port == 8080
    assert settings.protocol == "http"
    assert settings.timeout == 1500.0
    assert settings.user_agent == "reports/2.0"


def test_secret_fallback_name(clean_env, monkeypatch):
    monkeypatch.setenv("IC_SECRET", "fallback")
    assert get_settings().secret == "fallback"


def test_env_file_used_when_not_in_environment(clean_env, monkeypatch):
    (clean_env / ".env").write_text(
        "# comment\nIMAGE_CHARTS_SECRET='from-file'\nIMAGE_CHARTS_HOST=file-host\ngarbage\n",
        encoding="utf-8",
    )
    monkeypatch.setenv("IMAGE_CHARTS_HOST", "env-host")

    settings = get_settings()

    assert settings.secret == "from-file"
    assert settings.host == "env-host"


def test_invalid_port_names_the_variable(clean_env, monkeypatch):
    monkeypatch.setenv("IMAGE_CHARTS_PORT", "https")

    with pytest.raises(ValueError, match="IMAGE_CHARTS_PORT"):
        get_settings()


def test_builder_from_settings():
    settings = Settings(secret="plop", protocol="http", host="localhost", port=9000, timeout=100, user_agent="ua")

    chart = ImageCharts.from_settings(settings).icac("acct")

    assert chart.to_url().startswith("http://localhost:9000/chart?icac=acct&ichm=")
    assert chart.timeout == 100
    assert chart.request_headers == {"user-agent": "ua"}


def test_parse_chart_spec_flat_and_nested():
    assert parse_chart_spec({"cht": "p", "chs": "10x10"}) == {"cht": "p", "chs": "10x10"}
    assert parse_chart_spec({"chart": {"cht": "p"}}) == {"cht": "p"}
    assert parse_chart_spec(None) == {}


def test_parse_chart_spec_stringifies_scalars():
    assert parse_chart_spec({"icretina": True, "chbr": 5, "chds": 1.5}) == {
        "icretina": "1",
        "chbr": "5",
        "chds": "1.5",
    }


@pytest.mark.parametrize("data", [["cht", "p"], {"chart": ["cht"]}, {"chd": {"nested": 1}}])
def test_parse_chart_spec_rejects_non_flat_documents(data):
    with pytest.raises(ValueError):
        parse_chart_spec(data)


def test_load_chart_spec(tmp_path):
    spec = tmp_path / "chart.yaml"
    spec.write_text("chart:\n  cht: bvg\n  chs: 300x300\n  chd: 'a:60,40'\n", encoding="utf-8")

    params = load_chart_spec(spec)

    assert params == {"cht": "bvg", "chs": "300x300", "chd": "a:60,40"}
    assert ImageCharts().with_parameters(params).to_url().endswith("?cht=bvg&chs=300x300&chd=a%3A60%2C40")


def test_load_chart_spec_errors(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_chart_spec(tmp_path / "missing.yaml")

    bad = tmp_path / "bad.yaml"
    bad.write_text("cht: [unclosed\n", encoding="utf-8")
    with pytest.raises(yaml.YAMLError):
        load_chart_spec(bad)


@pytest.mark.parametrize("raw", ["0", "-250"])
def test_non_positive_timeout_names_the_variable(clean_env, monkeypatch, raw):
    monkeypatch.setenv("IMAGE_CHARTS_TIMEOUT", raw)

    with pytest.raises(ValueError, match="IMAGE_CHARTS_TIMEOUT must be > 0"):
        get_settings()
