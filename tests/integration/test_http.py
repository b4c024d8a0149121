"""End-to-end tests through the FastAPI application."""

from __future__ import annotations

from typing import TYPE_CHECKING

from cardgraph.core.pagination import CursorCodec
from tests.graphql.conftest import PAGINATED_CARDS_QUERY

if TYPE_CHECKING:
    from fastapi import FastAPI
    from httpx import AsyncClient


async def post_query(client: AsyncClient, **variables):
    return await client.post(
        "/graphql",
        json={"query": PAGINATED_CARDS_QUERY, "variables": variables},
    )


async def test_health(client: AsyncClient) -> None:
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


async def test_readiness_checks_database(client: AsyncClient) -> None:
    response = await client.get("/health/ready")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


async def test_walk_all_pages_over_http(client: AsyncClient) -> None:
    seen: list[str] = []
    after = None
    while True:
        response = await post_query(client, first=2, after=after)
        assert response.status_code == 200
        body = response.json()
        assert "errors" not in body

        page = body["data"]["paginatedCards"]
        seen.extend(edge["node"]["CardID"] for edge in page["edges"])
        if not page["pageInfo"]["hasNextPage"]:
            break
        after = page["pageInfo"]["lastCursor"]

    assert seen == ["1", "2", "3", "4", "5"]


async def test_cursor_wire_format(client: AsyncClient) -> None:
    response = await post_query(client, first=1)

    page = response.json()["data"]["paginatedCards"]
    assert page["pageInfo"]["lastCursor"] == CursorCodec.encode(1) == "MQ=="


async def test_error_code_over_http(client: AsyncClient) -> None:
    response = await post_query(client, first=2, after="%%%")

    body = response.json()
    assert body["data"] == {"paginatedCards": None}
    assert body["errors"][0]["extensions"]["code"] == "MALFORMED_CURSOR"


async def test_request_id_is_echoed(client: AsyncClient) -> None:
    response = await client.post(
        "/graphql",
        json={"query": PAGINATED_CARDS_QUERY, "variables": {"first": 1}},
        headers={"X-Request-ID": "req-42"},
    )

    assert response.headers["X-Request-ID"] == "req-42"


async def test_metrics_endpoint_counts_requests(client: AsyncClient) -> None:
    await post_query(client, first=1)

    response = await client.get("/metrics")

    assert response.status_code == 200
    assert 'pagination_requests_total{outcome="ok"}' in response.text
    assert 'application_info{version="0.1.0",service="cardgraph",environment="test"} 1.0' in response.text


async def test_lifespan_wires_pagination_service(app: FastAPI) -> None:
    service = app.state.card_pagination

    assert service.name == "paginated_cards"
    assert service.default_limit == 2
    assert service.max_limit is None
