"""Concurrency-bounded route processing.

Each route file is read once, its exported HTTP methods are extracted, and
one provider call per method is launched. At most ``pool.limit`` files are
in flight at a time; a file's methods all run concurrently once the file
holds a slot. Slots are refilled as soon as a file finishes.

Provider failures are isolated to the (file, method) pair that failed: they
are logged, recorded in the result and never retried.

When two files map to the same API path (``route.ts`` next to ``route.js``), the
first one wins and the other is recorded as a failure.
"""

import asyncio
from contextlib import asynccontextmanager
from pathlib import Path

from pydantic import BaseModel

from api_doc_agent.console import Logger
from api_doc_agent.parser.base import Operation, ResultMap
from api_doc_agent.parser.methods import extract_http_methods, sort_methods
from api_doc_agent.parser.routes import to_api_path
from api_doc_agent.providers.base import EnrichmentProvider

MAX_CONCURRENCY = 5


class RouteFailure(BaseModel):
    """A route (or whole file) that produced no operation."""

    route: str
    file: str
    error: str


class ProcessResult(BaseModel):
    """Operations, failures and skipped files of one processing run."""

    paths: ResultMap = {}
    failures: list[RouteFailure] = []
    succeeded: int = 0
    skipped: list[str] = []

    @property
    def failed(self) -> int:
        return len(self.failures)


class TaskPool:
    """Bounded pool of concurrent task slots.

    ``active`` is the number of slots currently held and ``peak`` the
    highest value it reached.
    """

    def __init__(self, limit: int = MAX_CONCURRENCY):
        if limit < 1:
            raise ValueError(f"Concurrency limit must be at least 1, got {limit}")
        self.limit = limit
        self.active = 0
        self.peak = 0
        self._semaphore = None
        self._loop = None

    @asynccontextmanager
    async def slot(self):
        async with self._loop_semaphore():
            self.active += 1
            self.peak = max(self.peak, self.active)
            try:
                yield
            finally:
                self.active -= 1

    def _loop_semaphore(self) -> asyncio.Semaphore:
        # A semaphore binds to the loop that first waits on it; each loop gets its own.
        loop = asyncio.get_running_loop()
        if self._loop is not loop:
            self._semaphore = asyncio.Semaphore(self.limit)
            self._loop = loop
        return self._semaphore

    async def run(self, coroutines) -> list:
        """Await all coroutines, at most ``limit`` at a time, results in input order."""

        async def _guarded(coro):
            async with self.slot():
                return await coro

        return await asyncio.gather(*(_guarded(c) for c in coroutines))


class RouteProcessor:
    """Runs the enrichment provider over a set of route files."""

    def __init__(
        self,
        provider: EnrichmentProvider,
        pool: TaskPool | None = None,
        logger: Logger | None = None,
    ):
        self.provider = provider
        self.pool = pool or TaskPool()
        self.logger = logger or Logger()

    async def process(self, root_dir: Path, route_files: list[str]) -> ProcessResult:
        """Describe every method of every route file.

        Returns the accumulated result; an empty ``paths`` map is a valid
        outcome when every file was skipped or every call failed.
        """
        result = ProcessResult()
        self.logger.info(f"Routes found: {len(route_files)}")

        route_files = self._claim_paths(route_files, result)
        total = len(route_files)
        await self.pool.run(
            self._process_file(Path(root_dir), route_file, index, total, result)
            for index, route_file in enumerate(route_files, start=1)
        )

        result.paths = _ordered(result.paths)
        return result

    def _claim_paths(self, route_files: list[str], result: ProcessResult) -> list[str]:
        """Keep the first file for each API path; later ones are recorded as failures."""
        owners: dict[str, str] = {}
        claimed = []
        for route_file in route_files:
            api_path = to_api_path(route_file)
            owner = owners.setdefault(api_path, route_file)
            if owner != route_file:
                self.logger.warn(f'Skipping "{route_file}": {api_path} is already handled by "{owner}"')
                result.failures.append(RouteFailure(
                    route=api_path, file=route_file, error=f'duplicate of "{owner}"'
                ))
                continue
            claimed.append(route_file)
        return claimed

    async def _process_file(
        self, root_dir: Path, route_file: str, index: int, total: int, result: ProcessResult
    ) -> None:
        full_path = root_dir / route_file
        api_path = to_api_path(route_file)

        try:
            content = await asyncio.to_thread(full_path.read_text, encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            self.logger.error(f'Cannot read "{route_file}": {e}')
            result.failures.append(RouteFailure(route=api_path, file=route_file, error=str(e)))
            return

        methods = sort_methods(extract_http_methods(content))
        if not methods:
            self.logger.warn(f"No HTTP methods found for {api_path}")
            result.skipped.append(route_file)
            return

        self.logger.debug(f"Processing {route_file}", {"path": api_path, "methods": ", ".join(methods)})

        await asyncio.gather(
            *(self._enrich(full_path, route_file, api_path, method, result) for method in methods)
        )

        self.logger.log(f"[{index}/{total}] {api_path} ({', '.join(m.upper() for m in methods)})")

    async def _enrich(
        self, full_path: Path, route_file: str, api_path: str, method: str, result: ProcessResult
    ) -> None:
        route = f"{method.upper()} {api_path}"
        try:
            operation = await self.provider.generate(full_path, method, route)
        except Exception as e:
            self.logger.error(f'Error processing "{route}" with {self.provider.name or "provider"}: {e}')
            result.failures.append(RouteFailure(route=route, file=route_file, error=str(e)))
            return

        _merge(result.paths, api_path, method, operation)
        result.succeeded += 1


def _merge(paths: ResultMap, api_path: str, method: str, operation: Operation) -> None:
    """Add one operation without touching sibling methods of the same path."""
    paths.setdefault(api_path, {})[method] = operation


def _ordered(paths: ResultMap) -> ResultMap:
    return {
        path: {method: paths[path][method] for method in sort_methods(paths[path])}
        for path in sorted(paths)
    }
