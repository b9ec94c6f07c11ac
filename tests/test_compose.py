"""Template substitution."""

from mdserver.compose import compose_page
from mdserver.render import RenderedDocument
from mdserver.template import PageTemplate

DOC = RenderedDocument(html="<h2>Summary</h2>", title="Report")


class TestComposePage:
    def test_no_template_returns_fragment(self):
        assert compose_page(DOC, PageTemplate.NOT_LOADED) == "<h2>Summary</h2>"

    def test_placeholders_replaced(self):
        template = PageTemplate(loaded=True, content="<title>{{title}}</title>{{content}}")
        assert compose_page(DOC, template) == "<title>Report</title><h2>Summary</h2>"

    def test_only_first_occurrence_replaced(self):
        template = PageTemplate(
            loaded=True,
            content="{{title}}|{{content}}|{{title}}|{{content}}",
        )
        assert compose_page(DOC, template) == "Report|<h2>Summary</h2>|{{title}}|{{content}}"

    def test_template_without_placeholders_unchanged(self):
        template = PageTemplate(loaded=True, content="<html><body>static</body></html>")
        assert compose_page(DOC, template) == "<html><body>static</body></html>"

    def test_empty_loaded_template(self):
        assert compose_page(DOC, PageTemplate(loaded=True, content="")) == ""

    def test_content_order_independent(self):
        template = PageTemplate(loaded=True, content="{{content}}<footer>{{title}}</footer>")
        assert compose_page(DOC, template) == "<h2>Summary</h2><footer>Report</footer>"

    def test_substituted_values_not_rescanned(self):
        """A document that talks about placeholders keeps them literally."""
        doc = RenderedDocument(html="<p>use {{title}} here</p>", title="{{content}}")
        template = PageTemplate(loaded=True, content="<title>{{title}}</title>{{content}}")
        assert compose_page(doc, template) == (
            "<title>{{content}}</title><p>use {{title}} here</p>"
        )

    def test_title_inserted_unchanged(self):
        doc = RenderedDocument(html="<p>x</p>", title='Q&A "notes"')
        template = PageTemplate(loaded=True, content="<title>{{title}}</title>")
        assert compose_page(doc, template) == '<title>Q&A "notes"</title>'
