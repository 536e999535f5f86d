import subprocess
import sys
from pathlib import Path

import httpx
import pytest
import typer
from freezegun import freeze_time
from respx import MockRouter
from typer.testing import CliRunner

from playground.cli import app, require_library
from playground.errors import UpstreamError

SUNRISE_URL = "https://api.sunrise-sunset.org/json"

runner = CliRunner()


def sunrise_payload(sunrise_at: str) -> dict:
    return {
        "results": {"sunrise": sunrise_at, "sunset": "2026-10-19T17:00:00+00:00"},
        "status": "OK",
    }


def test_dates():
    with freeze_time("2026-10-19 15:04:05"):
        result = runner.invoke(app, ["dates"])

    assert result.exit_code == 0
    assert "Current date: Monday, October 19th, 2026" in result.output
    assert "Day of year: 292 of 365" in result.output


def test_file_info_existing_file(tmp_path: Path):
    path = tmp_path / "notes.txt"
    path.write_text("hello")

    result = runner.invoke(app, ["file-info", str(path)])

    assert result.exit_code == 0
    assert "File exists!" in result.output
    assert "Size: 5 bytes" in result.output
    assert "Parsed path components:" in result.output
    assert "   Extension: .txt" in result.output


def test_file_info_missing_file(tmp_path: Path):
    result = runner.invoke(app, ["file-info", str(tmp_path / "nope.txt")])

    assert result.exit_code == 0
    assert "File does not exist!" in result.output
    assert "   Base: nope.txt" in result.output


def test_file_info_defaults_to_bundled_example():
    result = runner.invoke(app, ["file-info"])

    assert result.exit_code == 0
    assert "example.txt" in result.output
    assert "File exists!" in result.output


def test_countdown_preview():
    result = runner.invoke(app, ["countdown", "--ticks", "2", "--interval", "0"])

    assert result.exit_code == 0
    assert "Live Countdown Preview (2 updates):" in result.output
    assert result.output.count("The 1st January is in") == 3
    assert "Countdown preview completed!" in result.output


def test_sunrise_with_presets(respx_mock: MockRouter):
    respx_mock.get(SUNRISE_URL, params__contains={"lat": "48.864716"}).mock(
        return_value=httpx.Response(200, json=sunrise_payload("2026-10-19T06:12:00+00:00"))
    )
    respx_mock.get(SUNRISE_URL, params__contains={"lat": "35.676762"}).mock(
        return_value=httpx.Response(200, json=sunrise_payload("2026-10-18T20:50:00+00:00"))
    )

    result = runner.invoke(app, ["sunrise", "--first", "paris", "--second", "tokyo"])

    assert result.exit_code == 0
    assert "Comparing sunrise times..." in result.output
    assert "Paris (48.864716, 2.349014): sunrise at 06:12 UTC" in result.output
    assert "Tokyo" in result.output
    assert "sunrise at 20:50 UTC" in result.output


def test_sunrise_upstream_failure(respx_mock: MockRouter):
    respx_mock.get(SUNRISE_URL).mock(side_effect=httpx.ConnectError("network down"))

    result = runner.invoke(app, ["sunrise"])

    assert result.exit_code == 1
    assert "Error: Failed to fetch sunrise data" in result.output


def test_sunrise_invalid_coordinates(respx_mock: MockRouter):
    result = runner.invoke(app, ["sunrise", "--lat1", "abc", "--lng1", "2"])

    assert result.exit_code == 1
    assert "Please enter valid numeric coordinates" in result.output
    assert len(respx_mock.calls) == 0


def test_sunrise_unknown_preset():
    result = runner.invoke(app, ["sunrise", "--first", "atlantis"])

    assert result.exit_code == 2


def test_placeholder_network_error(monkeypatch):
    def fake_run_demo(limit):
        raise UpstreamError("Posts lookup failed") from httpx.ConnectError("offline")

    monkeypatch.setattr(
        "playground.placeholder_service.placeholder.run_demo", fake_run_demo
    )

    result = runner.invoke(app, ["placeholder"])

    assert result.exit_code == 1
    assert "Application error: Posts lookup failed" in result.output
    assert "Network error: Please check your internet connection" in result.output


def test_placeholder_http_error_has_no_network_hint(monkeypatch):
    def fake_run_demo(limit):
        raise UpstreamError("Users lookup failed", status_code=500)

    monkeypatch.setattr(
        "playground.placeholder_service.placeholder.run_demo", fake_run_demo
    )

    result = runner.invoke(app, ["placeholder"])

    assert result.exit_code == 1
    assert "Network error" not in result.output


def test_require_library_missing():
    with pytest.raises(typer.Exit) as exc_info:
        require_library("surely_not_an_installed_module")
    assert exc_info.value.exit_code == 1


def test_require_library_present():
    require_library("httpx")


def run_with_blocked_module(module: str, command: str) -> subprocess.CompletedProcess:
    script = (
        "import sys\n"
        f"sys.modules[{module!r}] = None\n"
        "from playground.cli import app\n"
        f"app([{command!r}], prog_name='playground')\n"
    )
    return subprocess.run(
        [sys.executable, "-c", script], capture_output=True, text=True, timeout=60
    )


def test_dates_without_dateutil_prints_install_hint():
    result = run_with_blocked_module("dateutil", "dates")

    assert result.returncode == 1
    assert "pip install python-dateutil" in result.stderr
    assert "Traceback" not in result.stderr


def test_placeholder_without_httpx_prints_install_hint():
    result = run_with_blocked_module("httpx", "placeholder")

    assert result.returncode == 1
    assert "pip install httpx" in result.stderr
    assert "Traceback" not in result.stderr
