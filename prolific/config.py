"""Application settings: service locations and build information."""

GIT_COMMIT = "dev"
"""The commit the running build was made from."""

_APPLICATION_URL = "https://app.prolific.com"
_API_URL = "https://api.prolific.com"


def get_application_url() -> str:
    """Return the base URL of the web application."""
    return _APPLICATION_URL


def get_api_url() -> str:
    """Return the default base URL of the API."""
    return _API_URL