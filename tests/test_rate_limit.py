from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from stockapp.core.config import Settings
from stockapp.core.rate_limiter import limiter
from stockapp.main import create_app


@pytest.fixture()
def limited_client():
    app = create_app(
        Settings(
            DATABASE_URL="sqlite+pysqlite:///:memory:",
            SEED_ON_STARTUP=False,
            RATE_LIMIT_ENABLED=True,
            WRITE_RATE_LIMIT="1/minute",
        )
    )
    with TestClient(app) as test_client:
        yield test_client

    # Leave the shared limiter as the rest of the suite expects it
    create_app(Settings(DATABASE_URL="sqlite+pysqlite:///:memory:", SEED_ON_STARTUP=False))


def test_app_settings_reach_the_limiter(limited_client):
    assert limiter.enabled is True

    first = limited_client.post("/stock/add", data={"produk_id": "1", "quantity": "1"}, follow_redirects=False)
    second = limited_client.post("/stock/add", data={"produk_id": "1", "quantity": "1"}, follow_redirects=False)

    assert first.status_code == 404
    assert second.status_code == 429


def test_rate_limit_answer_is_plain_text(limited_client):
    limited_client.post("/cancel/1", follow_redirects=False)
    response = limited_client.post("/cancel/1", follow_redirects=False)

    assert response.status_code == 429
    assert response.headers["content-type"].startswith("text/plain")
    assert response.text.startswith("Rate limit exceeded")


def test_disabled_limiter_never_answers_429():
    app = create_app(
        Settings(
            DATABASE_URL="sqlite+pysqlite:///:memory:",
            SEED_ON_STARTUP=False,
            RATE_LIMIT_ENABLED=False,
            WRITE_RATE_LIMIT="1/minute",
        )
    )

    with TestClient(app) as client:
        codes = {
            client.post("/cancel/1", follow_redirects=False).status_code
            for _ in range(3)
        }

    assert codes == {404}
