"""CLI entry point for api-doc-agent."""

import asyncio
from pathlib import Path

import click

from api_doc_agent.config import DEFAULT_PROVIDER, DEFAULT_SERVERS, GeneratorOptions, load_env_files, resolve_api_key
from api_doc_agent.console import Logger
from api_doc_agent.errors import ApiDocAgentError
from api_doc_agent.generator.assembler import OUTPUT_FORMATS
from api_doc_agent.generator.pipeline import generate_openapi_spec
from api_doc_agent.parser.base import Info, Server
from api_doc_agent.parser.methods import extract_http_methods, sort_methods
from api_doc_agent.parser.routes import filter_route_files, locate_route_files, parse_route_patterns, to_api_path
from api_doc_agent.providers.registry import available_providers


def parse_servers(value: str | None) -> list[Server]:
    """Parse ``url|description,url2|description2`` into servers.

    Raises ValueError when the value contains no usable URL.
    """
    servers = []
    for item in (value or "").split(","):
        url, _, description = item.partition("|")
        if not url.strip():
            continue
        servers.append(Server(url=url.strip(), description=description.strip() or None))

    if not servers:
        raise ValueError(
            "No valid servers provided. Expected format: "
            '--servers "https://api.example.com|Production,https://staging.example.com|Staging"'
        )
    return servers


@click.group()
def main():
    """API Doc Agent - generate OpenAPI specs from Next.js API routes using LLM models."""
    load_env_files()


@main.command()
@click.option("--dir", "route_dir", default="./app/api", type=click.Path(path_type=Path), help="Directory containing API routes.")
@click.option("-o", "--output-file", default="openapi", type=click.Path(path_type=Path), help="Output file path without extension.")
@click.option("-f", "--format", "fmt", default="yaml", help=f"Output format ({', '.join(OUTPUT_FORMATS)}).")
@click.option("--routes", default=None, help="Comma-separated routes to process (e.g. /users,/products/*).")
@click.option("-t", "--title", default=None, help="Title for the OpenAPI spec.")
@click.option("-v", "--version", "api_version", default=None, help="Version for the OpenAPI spec.")
@click.option("-d", "--description", default=None, help="Description for the OpenAPI spec.")
@click.option("--servers", default=None, help="Comma-separated servers as url|description pairs. Default: http://localhost:3000/api.")
@click.option("-p", "--provider", default=DEFAULT_PROVIDER, envvar="LLM_PROVIDER", help=f"LLM provider ({', '.join(available_providers())}).")
@click.option("-m", "--model", default=None, envvar="LLM_MODEL", help="LLM model (defaults to the provider's default model).")
@click.option("-k", "--api-key", default=None, help="LLM provider API key (defaults to the provider's environment variable).")
@click.option("-c", "--concurrency", default=5, type=click.IntRange(min=1), help="Maximum number of route files processed at once.")
@click.option("--verbose", is_flag=True, help="Show debug output.")
def generate(
    route_dir: Path,
    output_file: Path,
    fmt: str,
    routes: str | None,
    title: str | None,
    api_version: str | None,
    description: str | None,
    servers: str | None,
    provider: str,
    model: str | None,
    api_key: str | None,
    concurrency: int,
    verbose: bool,
):
    """Generate an OpenAPI spec from the route files in --dir."""
    try:
        server_list = parse_servers(servers) if servers is not None else list(DEFAULT_SERVERS)
    except ValueError as e:
        raise click.ClickException(str(e)) from e

    options = GeneratorOptions(
        dir=route_dir.resolve(),
        output_file=output_file.resolve(),
        format=fmt.lower(),
        provider=provider,
        model=model,
        api_key=resolve_api_key(provider, api_key),
        routes=parse_route_patterns(routes) or None,
        info=Info(title=title, version=api_version, description=description),
        servers=server_list,
        concurrency=concurrency,
    )

    logger = Logger(level="debug" if verbose else "info")
    try:
        asyncio.run(generate_openapi_spec(options, logger=logger))
    except (ApiDocAgentError, OSError) as e:
        raise click.ClickException(str(e)) from e


@main.command("list-routes")
@click.option("--dir", "route_dir", default="./app/api", type=click.Path(path_type=Path), help="Directory containing API routes.")
@click.option("--routes", default=None, help="Comma-separated routes to include (e.g. /users,/products/*).")
def list_routes(route_dir: Path, routes: str | None):
    """List discovered routes and their HTTP methods without calling an LLM."""
    try:
        route_files = locate_route_files(route_dir)
    except ApiDocAgentError as e:
        raise click.ClickException(str(e)) from e

    route_files = filter_route_files(route_files, parse_route_patterns(routes))
    if not route_files:
        click.echo("No matching route files found.")
        return

    logger = Logger()
    rows = []
    for route_file in route_files:
        try:
            content = (route_dir / route_file).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.warn(f'Cannot read "{route_file}": {e}')
            methods_label = "(unreadable)"
        else:
            methods = sort_methods(extract_http_methods(content))
            methods_label = ", ".join(m.upper() for m in methods) or "-"
        rows.append({"path": to_api_path(route_file), "methods": methods_label, "file": route_file})

    logger.table(["path", "methods", "file"], rows)
    click.echo(f"Found {len(rows)} route files.")
