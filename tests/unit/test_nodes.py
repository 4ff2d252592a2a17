from bs4 import BeautifulSoup, Comment, Doctype, NavigableString
from faleproxy.rewrite.nodes import NodeKind, body_scope, classify, find_titles, iter_text_nodes

class TestNodeKinds:
    """Unit tests for node classification and traversal"""

    def test_classify_element_and_text(self):
        soup = BeautifulSoup("<p>hello</p>", "html.parser")
        assert classify(soup.p) is NodeKind.ELEMENT
        assert classify(soup.p.contents[0]) is NodeKind.TEXT

    def test_classify_markup_strings_as_other(self):
        soup = BeautifulSoup("<!DOCTYPE html><p><!-- note -->x</p>", "html.parser")
        doctype = soup.contents[0]
        comment = soup.p.contents[0]
        assert isinstance(doctype, Doctype)
        assert isinstance(comment, Comment)
        assert classify(doctype) is NodeKind.OTHER
        assert classify(comment) is NodeKind.OTHER
        assert classify(NavigableString("plain")) is NodeKind.TEXT

    def test_iter_text_nodes_document_order(self):
        soup = BeautifulSoup("<body><p>one <b>two</b> three</p><p>four</p></body>", "html.parser")
        texts = [str(node) for node in iter_text_nodes(body_scope(soup))]
        assert texts == ["one ", "two", " three", "four"]

    def test_iter_text_nodes_skips_script_style_template(self):
        html = (
            "<body><script>var a = 1;</script><style>p {}</style>"
            "<template><p>hidden</p></template><p>shown</p></body>"
        )
        soup = BeautifulSoup(html, "html.parser")
        texts = [str(node) for node in iter_text_nodes(body_scope(soup))]
        assert texts == ["shown"]

    def test_body_scope_falls_back_to_document(self):
        soup = BeautifulSoup("<head><title>t</title></head><p>text</p>", "html.parser")
        assert body_scope(soup) is soup
        texts = [str(node) for node in iter_text_nodes(body_scope(soup))]
        assert texts == ["text"]

    def test_body_scope_excludes_head(self):
        soup = BeautifulSoup("<html><head><title>t</title></head><body>b</body></html>", "html.parser")
        assert body_scope(soup) is soup.body
        assert [str(node) for node in iter_text_nodes(body_scope(soup))] == ["b"]

    def test_ruby_strings_are_text(self):
        soup = BeautifulSoup("<body><ruby>X<rt>Yale</rt><rp>(Yale)</rp></ruby></body>", "html.parser")
        assert classify(soup.rt.contents[0]) is NodeKind.TEXT
        assert classify(soup.rp.contents[0]) is NodeKind.TEXT
        texts = [str(node) for node in iter_text_nodes(body_scope(soup))]
        assert texts == ["X", "Yale", "(Yale)"]

    def test_svg_title_is_walked(self):
        soup = BeautifulSoup("<body><svg><title>Yale logo</title></svg></body>", "html.parser")
        assert [str(node) for node in iter_text_nodes(body_scope(soup))] == ["Yale logo"]

    def test_excluded_subtree_is_skipped(self):
        soup = BeautifulSoup("<body><p>keep</p><div><p>skip</p></div></body>", "html.parser")
        texts = [str(node) for node in iter_text_nodes(body_scope(soup), exclude=[soup.div])]
        assert texts == ["keep"]

    def test_find_titles(self):
        soup = BeautifulSoup("<html><head><title>Page</title></head><body><svg><title>Icon</title></svg></body></html>", "html.parser")
        assert [tag.get_text() for tag in find_titles(soup)] == ["Page", "Icon"]
        assert find_titles(BeautifulSoup("<p>no title</p>", "html.parser")) == []
