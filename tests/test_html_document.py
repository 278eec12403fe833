"""
Tests for adapters.html_document - BeautifulSoup-backed DocumentNode.
"""

from adapters.html_document import SoupNode, parse_html
from core.interfaces.document import DocumentNode

HTML = """
<div id="search-results">
  <div class="search-title">Primeira <b>Empresa</b></div>
  <div class="search-title">Segunda</div>
</div>
<span class="big-nif">500960046</span>
"""


class TestSoupNode:

    def test_satisfies_protocol(self):
        assert isinstance(parse_html(HTML), DocumentNode)

    def test_select_first_returns_first_match(self):
        node = parse_html(HTML).select_first(".search-title")
        assert isinstance(node, SoupNode)
        assert node.text() == "Primeira Empresa"

    def test_select_first_missing(self):
        assert parse_html(HTML).select_first(".alert-message") is None

    def test_nested_select(self):
        results = parse_html(HTML).select_first("#search-results")
        assert results.select_first(".big-nif") is None
        assert results.select_first(".search-title") is not None

    def test_compound_class_selector(self):
        doc = parse_html('<div class="block-message error alert-message">x</div>')
        assert doc.select_first(".alert-message.error.block-message") is not None
        assert doc.select_first(".alert-message.success.block-message") is None

    def test_text_includes_descendants(self):
        doc = parse_html("<p>O NIF <em>indicado</em> é válido</p>")
        assert doc.text() == "O NIF indicado é válido"

    def test_empty_and_malformed_input(self):
        assert parse_html("").select_first("div") is None
        assert parse_html("<div><p>unclosed").select_first("p").text() == "unclosed"
