"""
Global test configuration and fixtures
"""

import pytest

from artifact_provenance.infra.config.groups import GitHubConfig
from tests.fakes import FakeGitHubApi, RecordingProgressSink


@pytest.fixture
def github_config() -> GitHubConfig:
    """GitHub 설정 (테스트용 토큰)"""
    return GitHubConfig(token="test-token")


@pytest.fixture
def fake_api() -> FakeGitHubApi:
    """빈 Fake GitHub API"""
    return FakeGitHubApi()


@pytest.fixture
def progress() -> RecordingProgressSink:
    """Progress 이벤트 기록용 sink"""
    return RecordingProgressSink()


# Pytest hooks
def pytest_configure(config):
    """pytest 설정"""
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line("markers", "infra: Adapter tests against a mocked transport")


def pytest_collection_modifyitems(config, items):
    """테스트 수집 후 처리"""
    for item in items:
        # 경로 기반 자동 마커 추가
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "infra" in str(item.fspath):
            item.add_marker(pytest.mark.infra)
