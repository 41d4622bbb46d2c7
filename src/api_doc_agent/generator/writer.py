"""Serialize an OpenAPI document and write it to disk."""

import json
from pathlib import Path

import yaml

from api_doc_agent.generator.ui_page import render_swagger_ui_page
from api_doc_agent.parser.base import OpenApiDocument


def output_path(base: Path, fmt: str) -> Path:
    """``openapi`` + ``yaml`` -> ``openapi.yaml``."""
    return Path(f"{base}.{fmt}")


def render_document(document: OpenApiDocument, fmt: str) -> str:
    if fmt == "yaml":
        return yaml.safe_dump(document.to_dict(), sort_keys=False, allow_unicode=True)
    elif fmt == "json":
        return json.dumps(document.to_dict(), indent=2, ensure_ascii=False)
    elif fmt == "html":
        return render_swagger_ui_page(document)
    raise ValueError(f"Unsupported output format: {fmt}")


def write_document(document: OpenApiDocument, base: Path, fmt: str) -> Path:
    """Write the document next to ``base`` with the format's extension, creating directories."""
    path = output_path(base, fmt)
    content = render_document(document, fmt)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path
