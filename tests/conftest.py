import asyncio
from pathlib import Path

import pytest

from api_doc_agent.console import Logger
from api_doc_agent.parser.base import Operation
from api_doc_agent.providers.base import EnrichmentProvider

FIXTURES = Path(__file__).parent / "fixtures"
ROUTES_DIR = FIXTURES / "app" / "api"


class FakeProvider(EnrichmentProvider):
    """Provider stub that records calls and how many files are in flight."""

    name = "fake"

    def __init__(self, fail_routes=(), delay=0.0):
        self.fail_routes = set(fail_routes)
        self.delay = delay
        self.calls = []
        self.in_flight = {}
        self.peak_files = 0

    async def generate(self, file_path, http_method, route):
        key = str(file_path)
        self.calls.append(route)
        self.in_flight[key] = self.in_flight.get(key, 0) + 1
        self.peak_files = max(self.peak_files, len(self.in_flight))
        try:
            await asyncio.sleep(self.delay)
            if route in self.fail_routes:
                raise RuntimeError(f"rate limited: {route}")
            return Operation(summary=route, description=f"Handles {route}")
        finally:
            self.in_flight[key] -= 1
            if not self.in_flight[key]:
                del self.in_flight[key]


@pytest.fixture
def routes_dir():
    return ROUTES_DIR


@pytest.fixture
def make_provider():
    return FakeProvider


@pytest.fixture
def quiet_logger():
    return Logger(silent=True)


def write_route(root: Path, relative: str, methods: list[str]) -> Path:
    path = root / relative
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(
        "\n\n".join(f"export async function {m.upper()}(request) {{\n  return null\n}}" for m in methods),
        encoding="utf-8",
    )
    return path


@pytest.fixture
def route_writer():
    return write_route
