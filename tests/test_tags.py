"""Tests for tag definitions."""

import pytest

from headtags import (
    Link,
    Meta,
    Script,
    Style,
    Tag,
    TagInterface,
    Title,
    ValidationError,
)


class TestTag:
    """Tests for custom tags."""

    def test_render_with_content(self) -> None:
        """Test rendering an element with escaped content."""
        tag = Tag("noscript", {"class": "x"}, content="<img> & more")
        assert tag.to_html() == '<noscript class="x">&lt;img&gt; &amp; more</noscript>'

    def test_self_closing(self) -> None:
        """Test rendering a void element."""
        tag = Tag("base", {"href": "/"}, self_closing=True)
        assert tag.to_html() == '<base href="/">'

    def test_default_placement_is_head(self) -> None:
        """Test that tags belong to the head unless routed elsewhere."""
        assert Tag("base", {"href": "/"}).placement() == "head"

    def test_custom_placement(self) -> None:
        """Test that a tag reports the placement it was given."""
        tag = Tag("div", {"id": "app"}, placement="footer")
        assert tag.placement() == "footer"

    def test_kind_is_custom(self) -> None:
        """Test that plain tags are of the custom kind."""
        assert Tag("base", {"href": "/"}).kind == "custom"

    def test_empty_attributes_rejected(self) -> None:
        """Test that a tag without attributes or content is rejected."""
        with pytest.raises(ValidationError):
            Tag("div", {})

    def test_invalid_tag_name_rejected(self) -> None:
        """Test that markup in the element name is rejected."""
        with pytest.raises(ValidationError):
            Tag("<script>", {"a": "b"})

    def test_invalid_attribute_name_rejected(self) -> None:
        """Test that quotes in an attribute name are rejected."""
        with pytest.raises(ValidationError):
            Tag("div", {'on"click': "x"})

    def test_attributes_are_copied(self) -> None:
        """Test that mutating the returned attributes does not affect the tag."""
        tag = Tag("base", {"href": "/"})
        tag.get_attributes()["href"] = "/other"
        assert tag.get_attributes() == {"href": "/"}

    def test_numbers_are_stringified(self) -> None:
        """Test that numeric attribute values are stored as strings."""
        tag = Tag("img", {"width": 100}, self_closing=True)
        assert tag.get_attributes() == {"width": "100"}

    def test_str_and_html_protocol(self) -> None:
        """Test that str() and __html__ both return the markup."""
        tag = Tag("base", {"href": "/"}, self_closing=True)
        assert str(tag) == tag.__html__() == tag.to_html()

    def test_to_dict(self) -> None:
        """Test serializing a tag with content to a dict."""
        tag = Tag("noscript", {"id": "n"}, content="hi")
        assert tag.to_dict() == {"tag": "noscript", "id": "n", "content": "hi"}

    def test_satisfies_tag_interface(self) -> None:
        """Test that Tag satisfies the TagInterface protocol."""
        assert isinstance(Tag("base", {"href": "/"}), TagInterface)


class TestMeta:
    """Tests for meta tags."""

    def test_name_content(self) -> None:
        """Test rendering a name/content meta tag."""
        meta = Meta({"name": "description", "content": "A page"})
        assert meta.to_html() == '<meta name="description" content="A page">'
        assert meta.kind == "meta"

    def test_http_equiv(self) -> None:
        """Test that http-equiv with content is accepted."""
        meta = Meta({"http-equiv": "refresh", "content": "5"})
        assert meta.get_attributes() == {"http-equiv": "refresh", "content": "5"}

    def test_charset_alone(self) -> None:
        """Test that a lone charset attribute is accepted."""
        assert Meta({"charset": "utf-8"}).to_html() == '<meta charset="utf-8">'

    def test_property(self) -> None:
        """Test that property metas (OpenGraph style) are accepted."""
        meta = Meta({"property": "og:title", "content": "T"})
        assert meta.to_html() == '<meta property="og:title" content="T">'

    def test_content_escaped(self) -> None:
        """Test that attribute values are escaped on render."""
        meta = Meta({"name": "description", "content": 'Say "hi" <now>'})
        assert 'content="Say &quot;hi&quot; &lt;now&gt;"' in meta.to_html()

    def test_missing_content_rejected(self) -> None:
        """Test that a name without content is rejected."""
        with pytest.raises(ValidationError):
            Meta({"name": "description"})

    def test_missing_key_rejected(self) -> None:
        """Test that content without a name-like key is rejected."""
        with pytest.raises(ValidationError):
            Meta({"content": "orphan"})

    def test_empty_rejected(self) -> None:
        """Test that an empty attribute set is rejected."""
        with pytest.raises(ValidationError):
            Meta({})


class TestLink:
    """Tests for link tags."""

    def test_render(self) -> None:
        """Test rendering a canonical link."""
        link = Link({"rel": "canonical", "href": "https://example.com/"})
        assert link.to_html() == '<link rel="canonical" href="https://example.com/">'
        assert link.kind == "link"

    def test_missing_href_rejected(self) -> None:
        """Test that a link without href is rejected."""
        with pytest.raises(ValidationError, match="href"):
            Link({"rel": "canonical"})

    def test_missing_rel_rejected(self) -> None:
        """Test that a link without rel is rejected."""
        with pytest.raises(ValidationError, match="rel"):
            Link({"href": "/"})


class TestScriptAndStyle:
    """Tests for script and style helpers."""

    def test_script_defaults_to_footer(self) -> None:
        """Test that scripts go to the footer and render a closing tag."""
        script = Script("/app.js", {"defer": True})
        assert script.placement() == "footer"
        assert script.to_html() == '<script src="/app.js" defer></script>'

    def test_script_in_head(self) -> None:
        """Test that a script can be routed to the head."""
        assert Script("/app.js", placement="head").placement() == "head"

    def test_style(self) -> None:
        """Test that a style renders as a stylesheet link in the head."""
        style = Style("/app.css", {"media": "print"})
        assert style.placement() == "head"
        assert style.to_html() == '<link rel="stylesheet" href="/app.css" media="print">'


class TestTitle:
    """Tests for title composition."""

    def test_compose_with_prepends(self) -> None:
        """Test prepends are applied left-to-right before the title."""
        title = Title("Home")
        title.prepend("Site")
        title.prepend("Section")
        title.set_separator(" - ")
        assert title.compose() == "Site - Section - Home"

    def test_default_separator(self) -> None:
        """Test that the default separator is a pipe."""
        title = Title("Home")
        title.prepend("Site")
        assert title.compose() == "Site | Home"

    def test_render(self) -> None:
        """Test that the title text is escaped on render."""
        assert Title("Tom & Jerry").to_html() == "<title>Tom &amp; Jerry</title>"

    def test_empty_title_renders_nothing(self) -> None:
        """Test that an unset title renders as an empty string."""
        assert Title().to_html() == ""

    def test_max_length(self) -> None:
        """Test that only the main title is truncated."""
        title = Title("A very long title", max_length=6)
        title.prepend("Site")
        assert title.compose() == "Site | A very..."

    def test_invalid_max_length(self) -> None:
        """Test that a non-positive max length is rejected."""
        with pytest.raises(ValueError):
            Title("x", max_length=0)

    def test_kind_and_attributes(self) -> None:
        """Test that the title has no attributes and lives in the head."""
        title = Title("x")
        assert title.kind == "title"
        assert title.get_attributes() == {}
        assert title.placement() == "head"

    def test_satisfies_tag_interface(self) -> None:
        """Test that Title satisfies the TagInterface protocol."""
        assert isinstance(Title("x"), TagInterface)
