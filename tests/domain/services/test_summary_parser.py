from yourel.domain.services.summary_parser import parse_summary


def test_parse_summary_splits_bold_headings() -> None:
    text = """**Keywords**
portfolio

**Overview**
Found 3 free sources hosted on developer platforms.

**Recommended (Free Tools Only - Ranked by Popularity)**
- https://a.vercel.app — portfolio template
- https://b.netlify.app — resume builder

**Sources:** a.vercel.app, b.netlify.app
"""

    sections = parse_summary(text)

    assert [s.title for s in sections] == [
        "Keywords",
        "Overview",
        "Recommended (Free Tools Only - Ranked by Popularity)",
        "Sources",
    ]
    assert sections[0].lines == ["portfolio"]
    assert sections[2].lines == [
        "https://a.vercel.app — portfolio template",
        "https://b.netlify.app — resume builder",
    ]
    assert sections[3].lines == ["a.vercel.app, b.netlify.app"]


def test_parse_summary_supports_markdown_headings() -> None:
    sections = parse_summary("Intro line\n## Overview\n1. first\n2. second")

    assert sections[0].title is None
    assert sections[0].lines == ["Intro line"]
    assert sections[1].title == "Overview"
    assert sections[1].lines == ["first", "second"]


def test_parse_summary_falls_back_to_raw_text() -> None:
    text = "Currently, no fully free tools were found for this query.\nTry **another** search."

    sections = parse_summary(text)

    assert len(sections) == 1
    assert sections[0].title is None
    assert sections[0].lines == [text]


def test_parse_summary_empty_text() -> None:
    assert parse_summary(None) == []
    assert parse_summary("   \n") == []
