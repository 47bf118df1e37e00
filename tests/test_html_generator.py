import json
import re
from datetime import date

from api_doc_gen.generator.html import escape_html, format_json, generate_html
from api_doc_gen.parser.base import ApiDocumentation, Endpoint, Parameter

GENERATED_AT = date(2024, 5, 17)


def _doc(**kwargs) -> ApiDocumentation:
    endpoints = [
        Endpoint(
            method="GET",
            path="/pets",
            title="List pets",
            description="Returns every pet.",
            parameters=[Parameter(name="limit", type="integer", description="Max items")],
            response_example='[{"id": 1}]',
        ),
        Endpoint(
            method="POST",
            path="/pets",
            title="Create pet",
            requires_auth=True,
            parameters=[Parameter(name="name", type="string", required=True)],
        ),
    ]
    defaults = dict(api_name="Petstore", base_url="https://api.example.com", version="2.0", endpoints=endpoints)
    defaults.update(kwargs)
    return ApiDocumentation(**defaults)


class TestFormatJson:
    def test_reindents_valid_json(self):
        assert format_json('{"a":1,"b":[true]}') == '{\n  "a": 1,\n  "b": [\n    true\n  ]\n}'

    def test_round_trip(self):
        value = {"id": 0, "tags": ["string"], "nested": {"x": None}}
        assert format_json(json.dumps(value)) == json.dumps(value, indent=2)

    def test_invalid_json_is_escaped(self):
        assert format_json("<script>") == "&lt;script&gt;"

    def test_escape_order(self):
        assert format_json("a & <b> \"c\" 'd'") == "a &amp; &lt;b&gt; &quot;c&quot; &#039;d&#039;"
        assert escape_html("&lt;") == "&amp;lt;"

    def test_non_json_constants_are_escaped_passthrough(self):
        assert format_json("[NaN]") == "[NaN]"
        assert format_json("Infinity") == "Infinity"
        assert format_json('{"a": -Infinity}') == "{&quot;a&quot;: -Infinity}"


class TestGenerateHtml:
    def test_document_structure(self):
        html = generate_html(_doc(), GENERATED_AT)
        assert html.startswith("<!DOCTYPE html>")
        assert "<style>" in html
        assert "<h1>Petstore</h1>" in html
        assert "Version: 2.0" in html
        assert "https://api.example.com" in html
        assert "Generated on 2024-05-17 using API Documentation Generator" in html

    def test_no_external_resources(self):
        html = generate_html(_doc(), GENERATED_AT)
        assert "<script" not in html
        assert "<link" not in html
        assert not re.search(r'src="', html)

    def test_toc_and_section_anchors(self):
        html = generate_html(_doc(), GENERATED_AT)
        assert '<a href="#endpoint-0">' in html
        assert '<a href="#endpoint-1">' in html
        assert '<section class="endpoint" id="endpoint-0">' in html
        assert '<section class="endpoint" id="endpoint-1">' in html
        assert html.index('id="endpoint-0"') < html.index('id="endpoint-1"')

    def test_method_badges(self):
        html = generate_html(_doc(), GENERATED_AT)
        assert '<span class="method get">GET</span>' in html
        assert '<span class="method post">POST</span>' in html

    def test_auth_badge_only_when_required(self):
        html = generate_html(_doc(), GENERATED_AT)
        assert html.count("Requires Authentication") == 1

    def test_parameter_table(self):
        html = generate_html(_doc(), GENERATED_AT)
        assert "<td>limit</td><td>integer</td><td>Max items</td><td>Optional</td>" in html
        assert '<td>name</td><td>string</td><td></td><td><span class="required">Required</span></td>' in html

    def test_fallback_texts(self):
        doc = ApiDocumentation(
            endpoints=[Endpoint(method="DELETE", path="/pets/{id}")],
        )
        html = generate_html(doc, GENERATED_AT)
        assert "No description provided." in html
        assert "Untitled Endpoint" in html
        assert "No description available." in html
        assert "No parameters required." in html
        assert "No response example available." in html

    def test_zero_endpoints(self):
        html = generate_html(ApiDocumentation(), GENERATED_AT)
        assert "No endpoints defined." in html
        assert "endpoint-0" not in html

    def test_response_example_pretty_printed_and_escaped(self):
        html = generate_html(_doc(), GENERATED_AT)
        assert '<pre class="response-example">[\n  {\n    &quot;id&quot;: 1\n  }\n]</pre>' in html

    def test_markup_in_text_is_escaped(self):
        doc = ApiDocumentation(
            api_name="<b>API</b>",
            endpoints=[
                Endpoint(
                    method="GET",
                    path="/x",
                    title="<img src=x>",
                    response_example='{"html": "<script>alert(1)</script>"}',
                )
            ],
        )
        html = generate_html(doc, GENERATED_AT)
        assert "<b>API</b>" not in html
        assert "<img" not in html
        assert "<script>" not in html
        assert "&lt;script&gt;alert(1)&lt;/script&gt;" in html

    def test_invalid_json_example_escaped_once(self):
        doc = ApiDocumentation(endpoints=[Endpoint(method="GET", path="/x", response_example="<not json & more>")])
        html = generate_html(doc, GENERATED_AT)
        assert '<pre class="response-example">&lt;not json &amp; more&gt;</pre>' in html

    def test_deterministic(self):
        assert generate_html(_doc(), GENERATED_AT) == generate_html(_doc(), GENERATED_AT)

    def test_generator_name(self):
        html = generate_html(_doc(), GENERATED_AT, generator_name="Docs & Co")
        assert "using Docs &amp; Co" in html
