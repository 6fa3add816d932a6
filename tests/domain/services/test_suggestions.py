from yourel.domain.services.suggestions import MAX_SUGGESTIONS, fallback_suggestions


def test_short_query_has_no_suggestions() -> None:
    assert fallback_suggestions("") == []
    assert fallback_suggestions(" p ") == []


def test_matching_terms_are_suggested_alongside_query_variations() -> None:
    assert fallback_suggestions("port") == [
        "portfolio",
        "port portfolio",
        "port dashboard",
        "port landing page",
        "port blog",
        "port e-commerce",
        "port saas",
        "port template",
    ]


def test_suggestions_keep_query_case_and_are_unique() -> None:
    suggestions = fallback_suggestions("Blog")

    assert suggestions[0] == "Blog portfolio"
    assert "blog" in suggestions
    assert len(suggestions) == MAX_SUGGESTIONS
    assert len(set(suggestions)) == len(suggestions)
