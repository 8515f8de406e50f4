"""Request paths for the client API of an application."""

from __future__ import annotations

from dataclasses import dataclass, field

BASE_ROUTE = "/api/client/v2.0"


def app_route(client_app_id: str) -> str:
    """Return the root path of an application's client API."""
    return f"{BASE_ROUTE}/app/{client_app_id}"


@dataclass(frozen=True)
class ServiceRoutes:
    """Paths for function and service calls of one application.

    Attributes:
        client_app_id: Application identifier the paths are derived from
        function_call_route: Path that accepts function call documents
    """

    client_app_id: str
    function_call_route: str = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "function_call_route", f"{app_route(self.client_app_id)}/functions/call"
        )

    def service_call_route(self, service_name: str) -> str:
        """Return the generic call path of a named service."""
        return f"{app_route(self.client_app_id)}/services/{service_name}/call"


@dataclass(frozen=True)
class AppRoutes:
    """All client API paths of one application."""

    client_app_id: str
    service_routes: ServiceRoutes = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "service_routes", ServiceRoutes(self.client_app_id))
