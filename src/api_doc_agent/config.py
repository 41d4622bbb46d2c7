"""Generator options and environment loading."""

from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel

from api_doc_agent.parser.base import Info, Server
from api_doc_agent.providers.registry import provider_api_key

ENV_FILES = (".env", ".env.local", ".env.development", ".env.dev")

DEFAULT_PROVIDER = "anthropic"
DEFAULT_SERVERS = [Server(url="http://localhost:3000/api", description="Development server")]


class GeneratorOptions(BaseModel):
    """Everything one generation run needs."""

    dir: Path = Path("./app/api")
    output_file: Path = Path("openapi")
    format: str = "yaml"
    provider: str = DEFAULT_PROVIDER
    model: str | None = None
    api_key: str | None = None
    routes: list[str] | None = None
    info: Info | None = None
    servers: list[Server] | None = None
    concurrency: int = 5


def load_env_files(directory: Path | None = None) -> list[Path]:
    """Load the usual .env files from ``directory`` (default: cwd).

    Variables already set in the process environment are never overridden.
    Returns the files that were found.
    """
    directory = Path(directory or Path.cwd())
    loaded = []
    for name in ENV_FILES:
        path = directory / name
        if path.is_file():
            load_dotenv(dotenv_path=path, override=False)
            loaded.append(path)
    return loaded


def resolve_api_key(provider: str, api_key: str | None = None) -> str | None:
    """Explicit key first, then the provider's own environment variable."""
    return api_key or provider_api_key(provider)

