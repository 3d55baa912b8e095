#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Pytest fixtures for Newsroom tests.
The engine is pure, so only the HTTP tests need an application instance.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from newsroom.main import create_app
from newsroom.schemas import GalleryImage


# -----------------------------------------------------------------------------

@pytest.fixture
def gallery() -> list[GalleryImage]:
    """Three images: A, B and C, in gallery order."""
    return [
        GalleryImage(url="https://cdn.example.com/a.jpg", alt="Alpha", caption="Courtesy: Jane Doe"),
        GalleryImage(url="https://cdn.example.com/b.jpg", alt="", caption=""),
        GalleryImage(url="https://cdn.example.com/c.jpg", alt="Gamma", caption="Reuters"),
    ]


# -----------------------------------------------------------------------------

@pytest_asyncio.fixture(scope="function")
async def client():
    """HTTP test client wired to a fresh application."""
    app = create_app()
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac


# -----------------------------------------------------------------------------
