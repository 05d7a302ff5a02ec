"""
Settings Tests

Environment-driven configuration and grouped accessors.
"""

import pytest

from artifact_provenance.infra.config.groups import GitHubConfig
from artifact_provenance.infra.config.settings import Settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """No ambient token or .env leaks into these tests."""
    monkeypatch.chdir(tmp_path)
    for name in ("GITHUB_TOKEN", "ARTIFACT_PROVENANCE_GITHUB_TOKEN", "ARTIFACT_PROVENANCE_PAGE_SIZE"):
        monkeypatch.delenv(name, raising=False)


class TestSettings:
    def test_defaults(self):
        settings = Settings()

        assert settings.github.token is None
        assert settings.github.api_url == "https://api.github.com"
        assert settings.github.page_size == 100
        assert settings.observability.log_format == "console"

    def test_prefixed_env(self, monkeypatch):
        monkeypatch.setenv("ARTIFACT_PROVENANCE_GITHUB_TOKEN", "abc")
        monkeypatch.setenv("ARTIFACT_PROVENANCE_PAGE_SIZE", "30")

        settings = Settings()

        assert settings.github.token == "abc"
        assert settings.github.page_size == 30

    def test_plain_github_token(self, monkeypatch):
        monkeypatch.setenv("GITHUB_TOKEN", "from-gh")

        assert Settings().github.token == "from-gh"

    def test_dotenv_file(self, tmp_path):
        (tmp_path / ".env").write_text("ARTIFACT_PROVENANCE_LOG_LEVEL=DEBUG\n", encoding="utf-8")

        assert Settings().observability.log_level == "DEBUG"

    def test_page_size_bounds(self):
        with pytest.raises(ValueError):
            Settings(page_size=101)

    def test_init_by_field_name(self):
        assert Settings(github_token="direct").github.token == "direct"


class TestGitHubConfig:
    def test_actions_url(self):
        config = GitHubConfig(web_url="https://github.com/")

        assert config.actions_url("acme/app") == "https://github.com/acme/app/actions"
