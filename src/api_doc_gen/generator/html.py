"""HTML generator — renders an ApiDocumentation model as a self-contained HTML page.

The page has an inline stylesheet and no external resources, so it can be
shown inside a sandboxed iframe. Rendering is deterministic: the only
time-dependent value is the ``generated_at`` argument.
"""

import json
from datetime import date

from api_doc_gen.parser.base import ApiDocumentation, Endpoint, Parameter
from api_doc_gen.parser.responses import to_json

DEFAULT_GENERATOR_NAME = "API Documentation Generator"

REQUIRED_BADGE = '<span class="required">Required</span>'

_ESCAPES = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&#039;"),
)


def escape_html(text: str) -> str:
    """Escape markup characters; ``&`` goes first so entities are not double-escaped."""
    for char, entity in _ESCAPES:
        text = text.replace(char, entity)
    return text


def format_json(text: str) -> str:
    """Pretty-print JSON text with 2-space indentation.

    Text that is not valid JSON is returned HTML-escaped instead.
    """
    pretty = _pretty_json(text)
    return escape_html(text) if pretty is None else pretty


def _pretty_json(text: str) -> str | None:
    try:
        parsed = json.loads(text, parse_constant=_reject_constant)
    except (json.JSONDecodeError, ValueError):
        return None
    return to_json(parsed)


def _reject_constant(name: str):
    # json.loads accepts NaN/Infinity/-Infinity, which are not JSON
    raise ValueError(f"{name} is not valid JSON")


def generate_html(
    doc: ApiDocumentation,
    generated_at: date,
    generator_name: str = DEFAULT_GENERATOR_NAME,
) -> str:
    """Render the full documentation page."""
    name = escape_html(doc.api_name)
    generated_on = generated_at.strftime("%Y-%m-%d")
    endpoints = "\n".join(_render_endpoint(i, ep) for i, ep in enumerate(doc.endpoints))
    if not doc.endpoints:
        endpoints = '<p class="empty">No endpoints defined.</p>'

    return f"""<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="UTF-8">
<meta name="viewport" content="width=device-width, initial-scale=1.0">
<title>{name} Documentation</title>
<style>
{_render_styles()}
</style>
</head>
<body>
<div class="container">
{_render_header(doc)}
{_render_toc(doc.endpoints)}
<main class="endpoints">
{endpoints}
</main>
<footer>
<p>Generated on {generated_on} using {escape_html(generator_name)}</p>
</footer>
</div>
</body>
</html>
"""


def _render_header(doc: ApiDocumentation) -> str:
    description = escape_html(doc.description) if doc.description else "No description provided."
    base_url = f'<div class="base-url">{escape_html(doc.base_url)}</div>' if doc.base_url else ""
    return f"""<header>
<h1>{escape_html(doc.api_name)}</h1>
<div class="version">Version: {escape_html(doc.version)}</div>
{base_url}
<div class="description">{description}</div>
</header>"""


def _render_toc(endpoints: tuple[Endpoint, ...]) -> str:
    if not endpoints:
        return """<nav class="toc">
<h2>Endpoints</h2>
<p class="empty">No endpoints defined.</p>
</nav>"""

    items = "\n".join(
        f'<li><a href="#endpoint-{i}">{_method_badge(ep.method)} '
        f'<span class="path">{escape_html(ep.path)}</span> '
        f'<span class="toc-title">{escape_html(ep.title)}</span></a></li>'
        for i, ep in enumerate(endpoints)
    )
    return f"""<nav class="toc">
<h2>Endpoints</h2>
<ul>
{items}
</ul>
</nav>"""


def _render_endpoint(index: int, endpoint: Endpoint) -> str:
    title = escape_html(endpoint.title) if endpoint.title else "Untitled Endpoint"
    description = escape_html(endpoint.description) if endpoint.description else "No description available."
    auth = '<div class="auth-required">Requires Authentication</div>\n' if endpoint.requires_auth else ""

    return f"""<section class="endpoint" id="endpoint-{index}">
<div class="endpoint-header">
{_method_badge(endpoint.method)}
<div class="path">{escape_html(endpoint.path)}</div>
</div>
<div class="endpoint-content">
<h2 class="endpoint-title">{title}</h2>
<div class="endpoint-description">{description}</div>
{auth}<h3 class="parameters-title">Parameters</h3>
{_render_parameters(endpoint.parameters)}
<h3 class="response-title">Response Example</h3>
{_render_response(endpoint.response_example)}
</div>
</section>"""


def _render_parameters(parameters: tuple[Parameter, ...]) -> str:
    if not parameters:
        return '<p class="empty">No parameters required.</p>'

    rows = "\n".join(
        f"<tr><td>{escape_html(p.name)}</td><td>{escape_html(p.type)}</td>"
        f"<td>{escape_html(p.description)}</td>"
        f"<td>{REQUIRED_BADGE if p.required else 'Optional'}</td></tr>"
        for p in parameters
    )
    return f"""<table>
<thead>
<tr><th>Name</th><th>Type</th><th>Description</th><th>Required</th></tr>
</thead>
<tbody>
{rows}
</tbody>
</table>"""


def _render_response(example: str) -> str:
    if not example:
        return '<p class="empty">No response example available.</p>'

    # string values inside valid JSON may still contain markup
    pretty = _pretty_json(example)
    formatted = format_json(example) if pretty is None else escape_html(pretty)
    return f'<pre class="response-example">{formatted}</pre>'


def _method_badge(method: str) -> str:
    return f'<span class="method {method.lower()}">{escape_html(method)}</span>'


def _render_styles() -> str:
    return """:root { --primary: #0f172a; --secondary: #1e293b; --accent: #3b82f6; --text: #f8fafc; --muted: #94a3b8; --border: #334155; --radius: 0.5rem; }
* { margin: 0; padding: 0; box-sizing: border-box; }
body { font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif; line-height: 1.6; color: var(--text); background-color: var(--primary); padding: 2rem; }
.container { max-width: 1200px; margin: 0 auto; }
header { margin-bottom: 2rem; }
h1 { font-size: 2.5rem; margin-bottom: 0.5rem; }
.version, .description, .endpoint-description, .empty { color: var(--muted); }
.base-url { background-color: var(--secondary); padding: 1rem; border-radius: var(--radius); font-family: monospace; margin: 1rem 0; }
.toc { background-color: var(--secondary); border-radius: var(--radius); padding: 1rem; margin-bottom: 2rem; }
.toc ul { list-style: none; }
.toc a { color: var(--text); text-decoration: none; display: block; padding: 0.25rem 0; }
.toc-title { color: var(--muted); }
.endpoints { display: flex; flex-direction: column; gap: 2rem; }
.endpoint { background-color: var(--secondary); border-radius: var(--radius); overflow: hidden; }
.endpoint-header { padding: 1rem; display: flex; align-items: center; gap: 1rem; border-bottom: 1px solid var(--border); }
.endpoint-content { padding: 1rem; }
.method { display: inline-block; padding: 0.25rem 0.5rem; border-radius: var(--radius); font-weight: bold; font-size: 0.875rem; min-width: 60px; text-align: center; }
.method.get { background-color: #10b981; color: #064e3b; }
.method.post { background-color: #3b82f6; color: #1e3a8a; }
.method.put { background-color: #f59e0b; color: #78350f; }
.method.delete { background-color: #ef4444; color: #7f1d1d; }
.path { font-family: monospace; }
.auth-required { display: inline-block; background-color: var(--border); padding: 0.25rem 0.5rem; border-radius: var(--radius); font-size: 0.75rem; margin-bottom: 1rem; }
.parameters-title, .response-title { font-size: 1.125rem; margin: 1rem 0 0.5rem; }
table { width: 100%; border-collapse: collapse; margin-bottom: 1.5rem; }
th, td { text-align: left; padding: 0.75rem; border-bottom: 1px solid var(--border); }
th { color: var(--muted); font-weight: normal; }
.required { color: #ef4444; }
.response-example { background-color: var(--primary); padding: 1rem; border-radius: var(--radius); font-family: monospace; white-space: pre-wrap; overflow-x: auto; }
footer { margin-top: 3rem; text-align: center; color: var(--muted); font-size: 0.875rem; }
@media (max-width: 768px) { body { padding: 1rem; } .endpoint-header { flex-direction: column; align-items: flex-start; } }"""
