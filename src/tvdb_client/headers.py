"""Request header construction."""

from tvdb_client.auth.state import CredentialState

CONTENT_TYPE = "application/json"
VERSION_MEDIA_TYPE = "application/vnd.thetvdb.v{version}"


def build_request_headers(state: CredentialState) -> dict[str, str]:
    """Compute the headers sent with every request.

    The API version is negotiated through the ``Accept`` media type and the
    languages are sent in preference order. ``Authorization`` is omitted until
    a token is set; the service will then answer 401.

    Args:
        state: Credential state of the client

    Returns:
        Mapping of header name to value
    """
    headers = {
        "Content-Type": CONTENT_TYPE,
        "Accept": VERSION_MEDIA_TYPE.format(version=state.version),
    }

    languages = state.get_accepted_languages()
    if languages:
        headers["Accept-Language"] = ", ".join(languages)

    if state.token is not None:
        headers["Authorization"] = f"Bearer {state.token}"

    return headers
