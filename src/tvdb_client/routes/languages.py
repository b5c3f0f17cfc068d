"""Language endpoints."""

from typing import Any

from tvdb_client.routes.base import BaseRoute


class LanguagesRoute(BaseRoute):
    def all(self) -> list[dict[str, Any]]:
        """All languages the service knows about."""
        return self.parent.perform_api_call_with_json_response("GET", "/languages")

    def by_id(self, language_id: int) -> dict[str, Any]:
        return self.parent.perform_api_call_with_json_response("GET", f"/languages/{int(language_id)}")
