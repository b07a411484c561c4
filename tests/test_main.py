import json
import logging

import pytest
from requests import Response

from nanopool.errors import FormatMismatch
from nanopool.main import _convert_args, _resolve_log_level, main


class DummyResponse(Response):
    def __init__(self, status_code: int, payload: dict) -> None:
        super().__init__()
        self.status_code = status_code
        self._content = json.dumps(payload).encode()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    for name in ("NANOPOOL_API_ROOT", "NANOPOOL_COIN", "NANOPOOL_TIMEOUT", "NANOPOOL_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


def test_resolve_log_level_is_case_insensitive():
    assert _resolve_log_level("debug") == logging.DEBUG
    assert _resolve_log_level(" Info ") == logging.INFO


def test_resolve_log_level_rejects_invalid_values():
    with pytest.raises(ValueError):
        _resolve_log_level("not-a-level")


def test_convert_args_follows_template_types():
    assert _convert_args("block_stats", ["0", "10"]) == [0, 10]
    assert _convert_args("approximated_earnings", ["150.5"]) == [150.5]
    assert _convert_args("worker_average_hashrate_in", ["0xabc", "rig1", "6"]) == ["0xabc", "rig1", 6]


def test_convert_args_rejects_bad_input():
    with pytest.raises(FormatMismatch):
        _convert_args("block_stats", ["0"])
    with pytest.raises(FormatMismatch):
        _convert_args("average_hashrate_in", ["0xabc", "three"])


@pytest.mark.parametrize(
    "operation, raw",
    [
        ("approximated_earnings", ["nan"]),
        ("approximated_earnings", ["inf"]),
        ("approximated_earnings", ["-Infinity"]),
        ("average_hashrate_in", ["0xabc", "-3"]),
        ("blocks", ["-1", "10"]),
    ],
)
def test_convert_args_rejects_out_of_range_numbers(operation, raw):
    with pytest.raises(FormatMismatch):
        _convert_args(operation, raw)


def test_list_prints_catalog(capsys):
    assert main(["--list"]) == 0
    out = capsys.readouterr().out
    assert "balance" in out
    assert "top_miners" in out


def test_main_prints_json_result(monkeypatch, capsys):
    calls = []

    def fake_get(url, **kwargs):
        calls.append(url)
        return DummyResponse(200, {"status": True, "data": {"h1": "12.5"}})

    monkeypatch.setattr("nanopool.client.requests.get", fake_get)

    assert main(["average_hashrate", "0xabc"]) == 0

    assert calls == ["https://api.nanopool.org/v1/eth/avghashrate/0xabc"]
    printed = json.loads(capsys.readouterr().out)
    assert printed["last_hour"] == 12.5
    assert printed["last_day"] == 0.0


def test_main_honours_coin_setting(monkeypatch, capsys):
    calls = []

    def fake_get(url, **kwargs):
        calls.append(url)
        return DummyResponse(200, {"status": True, "data": "1.25"})

    monkeypatch.setenv("NANOPOOL_COIN", "etc")
    monkeypatch.setattr("nanopool.client.requests.get", fake_get)

    assert main(["balance", "0xabc"]) == 0
    assert calls == ["https://api.nanopool.org/v1/etc/balance/0xabc"]
    assert json.loads(capsys.readouterr().out) == 1.25


def test_main_reports_rejection(monkeypatch):
    monkeypatch.setattr(
        "nanopool.client.requests.get",
        lambda url, **kwargs: DummyResponse(200, {"status": False, "error": "Account not found"}),
    )

    assert main(["balance", "0xabc"]) == 1


def test_main_rejects_wrong_argument_count(monkeypatch):
    def _fail_get(*args, **kwargs):  # pragma: no cover - indicates regression
        raise AssertionError("no request may be sent for a malformed call")

    monkeypatch.setattr("nanopool.client.requests.get", _fail_get)

    assert main(["balance"]) == 2


def test_main_requires_operation():
    with pytest.raises(SystemExit):
        main([])
