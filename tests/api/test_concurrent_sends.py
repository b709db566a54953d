import asyncio

import httpx
import pytest

from ses_mock.main import create_app
from tests.api.conftest import SEND_PATH


@pytest.mark.asyncio
async def test_concurrent_calls_get_distinct_ids(settings, send_payload):
    app = create_app(settings)
    transport = httpx.ASGITransport(app=app)

    async with httpx.AsyncClient(transport=transport, base_url="http://ses.local") as client:
        responses = await asyncio.gather(
            *(client.post(SEND_PATH, json=send_payload) for _ in range(10))
        )

    assert {r.status_code for r in responses} == {200}
    ids = {r.json()["MessageId"] for r in responses}
    assert len(ids) == 10
