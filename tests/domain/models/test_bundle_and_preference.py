from yourel.domain.models.bundle import Bundle, BundleWebsite
from yourel.domain.models.preference import UserPreference


def test_bundle_site_filters() -> None:
    bundle = Bundle(
        name="Design",
        websites=[
            BundleWebsite(url="https://dribbble-clone.vercel.app/"),
            BundleWebsite(url="colors.netlify.app"),
        ],
    )

    assert bundle.site_filters() == "site:dribbble-clone.vercel.app OR site:colors.netlify.app"


def test_empty_bundle_has_no_site_filters() -> None:
    assert Bundle(name="Empty").site_filters() is None


def test_like_and_dislike_are_exclusive() -> None:
    preference = UserPreference(user_id="u1")

    preference = preference.like("https://a.vercel.app")
    assert preference.liked_sites == ["https://a.vercel.app"]

    preference = preference.dislike("https://a.vercel.app")
    assert preference.liked_sites == []
    assert preference.disliked_sites == ["https://a.vercel.app"]


def test_favorites_have_no_duplicates() -> None:
    preference = UserPreference(user_id="u1")
    preference = preference.add_favorite("a").add_favorite("b").add_favorite("a")

    assert preference.favorites == ["b", "a"]
    assert preference.remove_favorite("b").favorites == ["a"]
