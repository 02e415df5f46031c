"""
Shared dependencies for API endpoints.
"""
import httpx
from fastapi import Depends, Request

from devnet.github.service import GithubReposService


async def get_http_client(request: Request) -> httpx.AsyncClient:
    """
    Outbound HTTP client created once by the application lifespan.
    """
    return request.app.state.http_client


async def get_github_service(client: httpx.AsyncClient = Depends(get_http_client)) -> GithubReposService:
    return GithubReposService(client)
