"""Test the callout container builders."""

from bs4 import BeautifulSoup

from mkdocs_admonitions.callout import build_callout_container, render_callout_html
from mkdocs_admonitions.models import AdmonitionMeta


def test_plain_container_with_title():
    container = build_callout_container(AdmonitionMeta("warning", "Heads up"))
    root = container.root

    assert root.name == "div"
    assert root["class"] == ["callout", "mkdocs-admonition"]
    assert root["data-callout"] == "warning"
    assert not root.has_attr("open")

    title = root.find(class_="callout-title")
    assert title.name == "div"
    assert title.find(class_="callout-title-inner").string == "Heads up"
    assert root.contents[-1] is container.content
    assert container.content["class"] == ["callout-content"]


def test_plain_container_without_title_has_no_title_region():
    container = build_callout_container(AdmonitionMeta("note", None))

    assert container.root.find(class_="callout-title") is None
    assert container.root.contents == [container.content]


def test_collapsible_always_has_summary():
    container = build_callout_container(AdmonitionMeta("tip", None, collapsible=True, open=False))
    root = container.root

    assert root.name == "details"
    assert not root.has_attr("open")
    summary = root.find("summary")
    assert summary["class"] == ["callout-title"]
    inner = summary.find("span")
    assert inner["class"] == ["callout-title-inner"]
    assert inner.get_text() == ""


def test_collapsible_open():
    container = build_callout_container(AdmonitionMeta("tip", "T", collapsible=True, open=True))

    assert container.root.has_attr("open")


def test_title_text_is_not_parsed_as_markup():
    container = build_callout_container(AdmonitionMeta("note", "<em>x</em>"))

    assert container.root.find("em") is None
    assert "&lt;em&gt;x&lt;/em&gt;" in str(container.root)


def test_tags_belong_to_given_soup():
    soup = BeautifulSoup("<main></main>", "html.parser")
    container = build_callout_container(AdmonitionMeta("note", "T"), soup)

    soup.main.append(container.root)
    assert soup.main.find(class_="callout-content") is container.content


def test_string_and_tag_renditions_agree():
    meta = AdmonitionMeta("danger", "Title")
    container = build_callout_container(meta)
    container.content.append(BeautifulSoup("<p>Body</p>", "html.parser").p)

    from_string = BeautifulSoup(render_callout_html(meta, "<p>Body</p>"), "html.parser")
    assert str(from_string) == str(container.root)


def test_render_html_collapsed():
    html = render_callout_html(AdmonitionMeta("bug", None, collapsible=True, open=False), "")

    assert html == (
        '<details class="callout mkdocs-admonition" data-callout="bug">'
        '<summary class="callout-title"><span class="callout-title-inner"></span></summary>'
        '<div class="callout-content"></div></details>'
    )
