from prolific.config import get_api_url, get_application_url


def test_application_url():
    assert get_application_url() == "https://app.prolific.com"


def test_api_url():
    assert get_api_url() == "https://api.prolific.com"


def test_urls_have_no_trailing_slash():
    for url in (get_application_url(), get_api_url()):
        assert not url.endswith("/")
    assert get_application_url() != get_api_url()