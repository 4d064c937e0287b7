from __future__ import annotations

import sys
from pathlib import Path

import pytest
import respx
from typer.testing import CliRunner


# Ensure the repository-local ``src`` directory is importable when the project is
# not installed as a package.
SRC_PATH = Path(__file__).resolve().parents[1] / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

from alertlogic import AlertLogic  # noqa: E402

BASE_URL = "https://api.cloudinsight.alertlogic.com"
ACCOUNT_ID = "12345678"
RELATED_ACCOUNT_ID = "98765432"
USER_ID = "715A4EC0-9833-4D6E-9C03-A537E3F98D23"
ROLE_ID = "F578CCE5-9574-4489-BF05-A04075838DE3"
DEPLOYMENT_ID = "50668317-feb8-49d1-b401-7219bfa22417"
EMAIL = "bob@bobloblawlaw.com"
AUTH_URL = f"{BASE_URL}/aims/v1/authenticate"

# 2100-01-01, far enough ahead that the token never needs refreshing in tests.
FAR_FUTURE = 4_102_444_800


def auth_payload(token: str, expiration: int = FAR_FUTURE) -> dict:
    """Body of a successful ``POST /aims/v1/authenticate``."""

    return {
        "authentication": {
            "user": {"id": USER_ID, "account_id": ACCOUNT_ID, "name": "Bob Loblaw"},
            "account": {"id": ACCOUNT_ID, "name": "Company Name"},
            "token": token,
            "token_expiration": expiration,
        }
    }


@pytest.fixture
def token_getter():
    return lambda: "my_token"


@pytest.fixture
def respx_mock():
    with respx.mock(assert_all_called=False) as respx_mgr:
        yield respx_mgr


@pytest.fixture
def api():
    client = AlertLogic.from_api_token(ACCOUNT_ID, "my_token")
    yield client
    client.close()


@pytest.fixture
def clean_env(monkeypatch):
    """Remove ambient Alert Logic credentials from the environment."""

    for name in (
        "ALERTLOGIC_ACCOUNT_ID",
        "ALERTLOGIC_API_TOKEN",
        "ALERTLOGIC_USERNAME",
        "ALERTLOGIC_PASSWORD",
        "ALERTLOGIC_ACCESS_KEY_ID",
        "ALERTLOGIC_SECRET_KEY",
        "ALERTLOGIC_BASE_URL",
        "ALERTLOGIC_TIMEOUT",
        "ALERTLOGIC_LOG_LEVEL",
        "ALERTLOGIC_DEBUG",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def cli_runner(clean_env):
    return CliRunner()
