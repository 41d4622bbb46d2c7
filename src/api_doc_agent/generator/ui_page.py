"""Self-contained Swagger UI page for a generated document."""

import html
import json
from pathlib import Path

from api_doc_agent.parser.base import OpenApiDocument

TEMPLATES_DIR = Path(__file__).parent.parent / "templates"


def render_swagger_ui_page(document: OpenApiDocument) -> str:
    """Render the HTML viewer with the document embedded as JSON."""
    template = (TEMPLATES_DIR / "swagger_ui.html").read_text(encoding="utf-8")
    # "</" inside a <script> block would end it early
    spec_json = json.dumps(document.to_dict(), indent=2, ensure_ascii=False).replace("</", "<\\/")
    return (
        template
        .replace("{{TITLE}}", html.escape(document.info.title or ""))
        .replace("{{SPEC_JSON}}", spec_json)
    )
