"""Tests for configuration validation and the command-line entry point."""
from unittest.mock import patch

import pytest

from radarr_transcode import cli
from radarr_transcode.config import TriageConfig
from radarr_transcode.errors import CatalogFetchError, ConfigurationError, TransportError
from radarr_transcode.utils import constants
from helpers import FakeCatalog, FakeQueue, make_movie, queue_body

FULL_ARGS = [
    "--api-key", "key",
    "--url", "http://radarr:7878",
    "--transcoder-url", "http://transcoder:8080",
    "--transcoder-token", "token",
]


def _config(**overrides) -> TriageConfig:
    values = dict(radarr_api_key="key", radarr_url="http://radarr", transcoder_url="http://t",
                  transcoder_token="tok")
    values.update(overrides)
    return TriageConfig(**values)


class TestTriageConfig:
    def test_valid(self):
        assert _config().validate().movies == 10

    def test_names_every_missing_option(self):
        with pytest.raises(ConfigurationError) as excinfo:
            _config(radarr_api_key=None, transcoder_token="").validate()

        message = str(excinfo.value)
        assert "RADARR_API_KEY" in message
        assert "TRANSCODER_TOKEN" in message
        assert "RADARR_URL" not in message

    def test_dry_run_does_not_need_transcoder(self):
        _config(transcoder_url=None, transcoder_token=None, dry_run=True).validate()

    @pytest.mark.parametrize("overrides", [{"movies": -1}, {"timeout": 0}])
    def test_rejects_invalid_numbers(self, overrides):
        with pytest.raises(ConfigurationError):
            _config(**overrides).validate()


def test_missing_configuration_exits_2_without_network(capsys):
    with patch.object(cli, "RadarrClient") as radarr_cls:
        code = cli.main(["--api-key", "", "--url", "", "--transcoder-url", "", "--transcoder-token", ""])

    assert code == 2
    radarr_cls.assert_not_called()
    assert "Missing required options" in capsys.readouterr().err


def test_all_scheduled_exits_0():
    catalog = FakeCatalog([make_movie("a", 2), make_movie("b", 1)])
    queue = FakeQueue()
    with patch.object(cli, "RadarrClient", return_value=catalog), \
            patch.object(cli, "TranscoderClient", return_value=queue) as transcoder_cls:
        code = cli.main(FULL_ARGS + ["--movies", "1", "--timeout", "5"])

    assert code == 0
    transcoder_cls.assert_called_once_with("http://transcoder:8080", "token", timeout=5.0)
    assert queue.submitted == ["/movies/a/a.mkv"]


def test_rejection_exits_1():
    queue = FakeQueue([queue_body(failed=[{"sourcePath": "/a", "error": "disk full"}])])
    with patch.object(cli, "RadarrClient", return_value=FakeCatalog([make_movie("a", 2)])), \
            patch.object(cli, "TranscoderClient", return_value=queue):
        assert cli.main(FULL_ARGS) == 1


def test_transport_error_exits_1(capsys):
    queue = FakeQueue([TransportError("connection refused")])
    with patch.object(cli, "RadarrClient", return_value=FakeCatalog([make_movie("a", 2)])), \
            patch.object(cli, "TranscoderClient", return_value=queue):
        code = cli.main(FULL_ARGS)

    assert code == 1
    assert "run.aborted" in capsys.readouterr().err


def test_catalog_failure_exits_1(capsys):
    with patch.object(cli, "RadarrClient") as radarr_cls, \
            patch.object(cli, "TranscoderClient", return_value=FakeQueue()):
        radarr_cls.return_value.get_movies.side_effect = CatalogFetchError("refused")
        code = cli.main(FULL_ARGS)

    assert code == 1
    assert "state=\"fetching\"" in capsys.readouterr().err


def test_dry_run_skips_transcoder_client():
    with patch.object(cli, "RadarrClient", return_value=FakeCatalog([make_movie("a", 2)])), \
            patch.object(cli, "TranscoderClient") as transcoder_cls:
        code = cli.main(["--api-key", "key", "--url", "http://radarr", "--dry-run"])

    assert code == 0
    transcoder_cls.assert_not_called()


def test_malformed_catalog_record_aborts_with_exit_1(capsys):
    with patch("radarr_transcode.catalog.radarr_client.requests.Session") as session_cls:
        session = session_cls.return_value
        session.headers = {}
        session.get.return_value.json.return_value = [{"title": "x", "movieFile": {"path": "/a", "size": "big"}}]

        code = cli.main(["-k", "key", "-u", "http://radarr", "--dry-run"])

    assert code == 1
    assert "run.aborted" in capsys.readouterr().err


def test_invalid_timeout_from_environment_exits_2(monkeypatch, capsys):
    monkeypatch.setattr(constants, "TRIAGE_TIMEOUT", "abc")
    with patch.object(cli, "RadarrClient") as radarr_cls:
        code = cli.main(["-k", "key", "-u", "http://radarr", "--dry-run"])

    assert code == 2
    radarr_cls.assert_not_called()
    assert "TRIAGE_TIMEOUT" in capsys.readouterr().err


def test_timeout_from_environment_is_used(monkeypatch):
    monkeypatch.setattr(constants, "TRIAGE_TIMEOUT", "7.5")

    assert _config().validate().timeout == 7.5


def test_command_line_timeout_overrides_environment(monkeypatch):
    monkeypatch.setattr(constants, "TRIAGE_TIMEOUT", "abc")

    assert _config(timeout=12.0).validate().timeout == 12.0


def test_default_timeout(monkeypatch):
    monkeypatch.setattr(constants, "TRIAGE_TIMEOUT", None)

    assert _config().validate().timeout == constants.REQUEST_TIMEOUT
