"""OpenAPI document assembly and up-front option validation."""

from api_doc_agent.errors import ConfigurationError
from api_doc_agent.parser.base import Info, OpenApiDocument, ResultMap, Server
from api_doc_agent.providers.registry import api_key_env_var, available_providers

OPENAPI_VERSION = "3.0.0"

DEFAULT_INFO = Info(
    title="Next.js API",
    version="1.0.0",
    description="Automatically generated API documentation for Next.js routes",
)

OUTPUT_FORMATS = ("yaml", "json", "html")


def validate_options(options) -> None:
    """Check provider, API key and output format before any work starts.

    ``options`` needs ``provider``, ``api_key`` and ``format`` attributes.
    Raises ConfigurationError describing the first problem found.
    """
    providers = available_providers()
    if options.provider not in providers:
        raise ConfigurationError(
            f'Invalid provider "{options.provider}". Available providers: "{" | ".join(providers)}"'
        )

    if not options.api_key:
        raise ConfigurationError(
            f"API key is required. Please set the {api_key_env_var(options.provider)} "
            "environment variable or use the --api-key option."
        )

    if options.format not in OUTPUT_FORMATS:
        raise ConfigurationError(
            f'Invalid format "{options.format}". Available formats: '
            + " | ".join(f'"{fmt}"' for fmt in OUTPUT_FORMATS)
        )


def assemble_document(
    paths: ResultMap,
    info: Info | None = None,
    servers: list[Server] | None = None,
) -> OpenApiDocument:
    """Wrap the collected paths into a complete OpenAPI document."""
    info = info or Info()
    return OpenApiDocument(
        openapi=OPENAPI_VERSION,
        info=Info(
            title=info.title or DEFAULT_INFO.title,
            version=info.version or DEFAULT_INFO.version,
            description=info.description or DEFAULT_INFO.description,
        ),
        servers=servers or [],
        paths=paths,
    )
