"""
CLI tests (typer CliRunner against the fake API)
"""

from types import SimpleNamespace

import pytest
from typer.testing import CliRunner

from artifact_provenance.cli import main as cli_main
from artifact_provenance.domain.results import TransportFailure
from artifact_provenance.infra.config.groups import GitHubConfig
from tests.fakes import make_artifact, make_run

runner = CliRunner()


@pytest.fixture(autouse=True)
def wired(monkeypatch, fake_api):
    """Route every command to the fake API and keep logging unconfigured."""
    monkeypatch.setattr(cli_main, "GitHubClient", lambda config: fake_api)
    monkeypatch.setattr(cli_main, "setup_logging", lambda **kwargs: None)
    monkeypatch.setattr(cli_main, "settings", SimpleNamespace(github=GitHubConfig()))
    return fake_api


class TestCommands:
    def test_missing_token(self):
        result = runner.invoke(cli_main.app, ["repos"])

        assert result.exit_code == 1
        assert "Please enter your GitHub token." in result.output

    def test_repos(self, fake_api):
        fake_api.repositories = ["acme/app", "acme/lib"]

        result = runner.invoke(cli_main.app, ["repos", "--token", "t"])

        assert result.exit_code == 0
        assert "acme/app" in result.output
        assert "2 repositories" in result.output

    def test_artifacts_table(self, fake_api):
        fake_api.repositories = ["acme/app"]
        fake_api.artifacts["acme/app"] = [make_artifact(1, size=2 * 1024 * 1024, name="dist")]

        result = runner.invoke(cli_main.app, ["artifacts", "--token", "t"])

        assert result.exit_code == 0
        assert "acme/app | Total Artifact Size: 2.00 MB" in result.output
        assert "dist" in result.output
        assert "Link" not in result.output

    def test_artifacts_with_links(self, fake_api):
        fake_api.artifacts["acme/app"] = [make_artifact(1, name="dist")]
        fake_api.add_run("acme/app", make_run(9), attempts={1: [1]})

        result = runner.invoke(cli_main.app, ["artifacts", "--token", "t", "--repo", "acme/app", "--links"])

        assert result.exit_code == 0
        assert "Link" in result.output
        assert fake_api.calls_for("list_run_attempts") == [("list_run_attempts", "acme/app", 9)]

    def test_artifacts_none_found(self, fake_api):
        result = runner.invoke(cli_main.app, ["artifacts", "--token", "t", "-r", "acme/app"])

        assert result.exit_code == 0
        assert "No artifacts found" in result.output

    def test_resolve(self, fake_api):
        fake_api.artifacts["acme/app"] = [make_artifact(1, name="dist"), make_artifact(2, name="logs")]
        fake_api.add_run("acme/app", make_run(9), attempts={1: [1]})

        result = runner.invoke(cli_main.app, ["resolve", "acme/app", "--token", "t"])

        assert result.exit_code == 0
        assert "1 linked, 1 fallback, 1/1 runs scanned" in result.output
        assert "logs" in result.output

    def test_repos_bad_token(self, fake_api):
        fake_api.fail(TransportFailure(url="/user/repos", error="denied", status_code=401), "list_repositories", 1)

        result = runner.invoke(cli_main.app, ["repos", "--token", "bad"])

        assert result.exit_code == 1
        assert "Failed to fetch repositories" in result.output
