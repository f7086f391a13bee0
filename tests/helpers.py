"""Test helper functions for common HTTP flows."""

from httpx import AsyncClient

from tests.factories import DEFAULT_TEST_PASSWORD


async def register_user(
    client: AsyncClient,
    email: str,
    display_name: str = "Test User",
    password: str = DEFAULT_TEST_PASSWORD,
) -> dict:
    """Register through the API and return the response body.

    Returns:
        Dict with access_token, token_type and user.
    """
    response = await client.post(
        "/api/v1/auth/register",
        json={"email": email, "password": password, "display_name": display_name},
    )
    assert response.status_code == 201, response.text
    return response.json()


def auth_headers(token: str) -> dict[str, str]:
    """Authorization header for a bearer token."""
    return {"Authorization": f"Bearer {token}"}


async def create_project(client: AsyncClient, token: str, title: str, **fields) -> dict:
    response = await client.post(
        "/api/v1/projects",
        json={"title": title, **fields},
        headers=auth_headers(token),
    )
    assert response.status_code == 201, response.text
    return response.json()


async def create_task(
    client: AsyncClient, token: str, project_id: str, title: str, **fields
) -> dict:
    response = await client.post(
        f"/api/v1/projects/{project_id}/tasks",
        json={"title": title, **fields},
        headers=auth_headers(token),
    )
    assert response.status_code == 201, response.text
    return response.json()
