import pathlib

import pytest

import esendex.common.http_client as http_client
from esendex.common.config import settings


# ----------------------------
#  Auto-mark tests by folder
# ----------------------------

def pytest_collection_modifyitems(config, items):
    for item in items:
        p = pathlib.Path(str(item.fspath)).as_posix()
        if "/tests/unit/" in p:
            item.add_marker(pytest.mark.unit)
        elif "/tests/component/" in p:
            item.add_marker(pytest.mark.component)


@pytest.fixture(autouse=True)
def reset_http_session_singleton():
    http_client._SESSION = None
    yield
    http_client._SESSION = None


# ----------------------------
#  ENV / settings isolation
# ----------------------------

@pytest.fixture(autouse=True)
def env_setup(monkeypatch):
    # tests must never reach the real API with real credentials
    for var in (
        "ESENDEX_USERNAME",
        "ESENDEX_PASSWORD",
        "ESENDEX_ACCOUNT_REFERENCE",
        "ESENDEX_BASE_URL",
        "ESENDEX_USER_AGENT",
        "ESENDEX_TIMEOUT_S",
    ):
        monkeypatch.delenv(var, raising=False)

    monkeypatch.setattr(settings, "base_url", "https://api.esendex.com/")
    monkeypatch.setattr(settings, "user_agent", "esendex/python")
    monkeypatch.setattr(settings, "username", "")
    monkeypatch.setattr(settings, "password", "")
    monkeypatch.setattr(settings, "account_reference", "")
    monkeypatch.setattr(settings, "timeout_s", 10.0)
    monkeypatch.setattr(settings, "slow_threshold_ms", 1000)
    monkeypatch.setattr(settings, "timing_log_all", False)


# ----------------------------
#  Client wired to a dummy session
# ----------------------------

@pytest.fixture()
def make_client():
    """make_client(body, status) -> (client, session)"""
    from esendex.adapters.esendex_client import Client
    from tests.helpers.http import DummyResp, DummySession

    def _make(content="", status_code=200, **client_kwargs):
        sess = DummySession(DummyResp(status_code=status_code, content=content))
        client = Client("user", "pass", session=sess, **client_kwargs)
        return client, sess

    return _make
