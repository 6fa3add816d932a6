from yourel.domain.models.platform import UNKNOWN_PLATFORM, Platform, detect_platform


def test_platform_site_filters() -> None:
    assert Platform.ALL.site_filter is None
    assert Platform.GITHUB.site_filter == "site:github.io"
    assert Platform.FLY.label == "Fly.io"
    assert all(p.site_filter for p in Platform if p is not Platform.ALL)


def test_detect_platform_from_host() -> None:
    assert detect_platform("https://my-app.vercel.app/about") == "vercel"
    assert detect_platform("https://someone.github.io/project") == "github"
    assert detect_platform("https://demo.fly.dev") == "fly"


def test_detect_platform_unknown_host() -> None:
    assert detect_platform("https://example.com") == UNKNOWN_PLATFORM
    assert detect_platform("https://vercel.app.evil.com") == UNKNOWN_PLATFORM
    assert detect_platform("not a url") == UNKNOWN_PLATFORM
