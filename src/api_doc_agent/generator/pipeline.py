"""End-to-end generation: discover, filter, enrich, assemble, write."""

from pathlib import Path

from api_doc_agent.config import GeneratorOptions
from api_doc_agent.console import Logger
from api_doc_agent.generator.assembler import assemble_document, validate_options
from api_doc_agent.generator.processor import RouteProcessor, TaskPool
from api_doc_agent.generator.writer import write_document
from api_doc_agent.parser.methods import sort_methods
from api_doc_agent.parser.routes import filter_route_files, locate_route_files
from api_doc_agent.providers.base import EnrichmentProvider
from api_doc_agent.providers.registry import create_provider, default_model


async def generate_openapi_spec(
    options: GeneratorOptions,
    provider: EnrichmentProvider | None = None,
    pool: TaskPool | None = None,
    logger: Logger | None = None,
) -> Path | None:
    """Generate and write the OpenAPI document described by ``options``.

    Returns the written file, or None when there was nothing to write
    (no route files, nothing matched the filter, or no operation could be
    generated). Configuration and discovery errors propagate.
    """
    logger = logger or Logger()
    validate_options(options)

    logger.header("Generating OpenAPI specs...")
    logger.info("Configuration:", {
        "provider": options.provider,
        "model": options.model or default_model(options.provider),
        "format": options.format,
    })
    logger.separator()

    route_files = locate_route_files(options.dir)
    if not route_files:
        logger.warn(f'No route files found in directory "{options.dir}"')
        return None

    route_files = filter_route_files(route_files, options.routes)
    if not route_files:
        logger.error(f"No matching route files found for routes: {', '.join(options.routes or [])}")
        return None

    provider = provider or create_provider(options.provider, options.api_key, options.model)
    processor = RouteProcessor(provider, pool=pool or TaskPool(options.concurrency), logger=logger)

    logger.start_timer()
    result = await processor.process(options.dir, route_files)
    logger.separator()
    logger.end_timer("Generation completed")

    if not result.paths:
        if result.failed:
            logger.error(
                f"Failed to generate OpenAPI specs: {result.failed} route(s) failed. "
                "Please check the logs for details."
            )
        else:
            logger.warn("No HTTP method handlers found in the selected route files")
        return None

    logger.separator()
    logger.log("Routes processed:")
    logger.table(["path", "methods"], [
        {"path": path, "methods": ", ".join(sort_methods(methods))}
        for path, methods in result.paths.items()
    ])

    document = assemble_document(result.paths, info=options.info, servers=options.servers)
    path = write_document(document, options.output_file, options.format)

    logger.separator()
    if result.failed:
        logger.error(f"{result.failed} route(s) failed, {result.succeeded} succeeded")
        logger.warn(
            "The OpenAPI spec may be incomplete. Please check the logs for details.",
            str(path),
        )
    else:
        logger.success("SUCCESS! OpenAPI specs generated at")
        logger.highlight(str(path))

    return path
