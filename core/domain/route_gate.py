"""
Route gate.

Each REST route carries a short code. The general settings option holds a
map of those codes to on/off flags, so individual endpoints can be switched
off at runtime without a deploy.
"""
from typing import Any, Dict, Iterable, Mapping, Union

from core.domain.exceptions import RouteDisabledError
from core.domain.value_objects import RouteCode

ENABLED_ROUTES_KEY = "enabled_api_routes"


def _is_truthy(flag: Any) -> bool:
    # Older settings screens store flags as "1" / "0" strings.
    if isinstance(flag, str):
        return flag.strip() not in ("", "0")
    return bool(flag)


def is_route_enabled(settings: Mapping[str, Any], route_id: Union[str, RouteCode]) -> bool:
    """
    Check whether a route is switched on.

    Args:
        settings: General settings mapping
        route_id: Route code (e.g. "006")

    Returns:
        True only if the route's flag is present and truthy
    """
    routes = (settings or {}).get(ENABLED_ROUTES_KEY)
    if not isinstance(routes, Mapping):
        return False
    return _is_truthy(routes.get(str(route_id)))


class RouteGate:
    """Route gate bound to one snapshot of the general settings."""

    def __init__(self, settings: Mapping[str, Any]):
        self.settings = dict(settings or {})

    def is_enabled(self, route_id: Union[str, RouteCode]) -> bool:
        return is_route_enabled(self.settings, route_id)

    def ensure_enabled(self, route_id: Union[str, RouteCode]) -> None:
        """
        Raise if the route is disabled.

        Raises:
            RouteDisabledError: If the route flag is absent or falsy
        """
        if not self.is_enabled(route_id):
            raise RouteDisabledError(route_id=str(route_id))


def with_route_flags(
    settings: Mapping[str, Any], route_ids: Iterable[Union[str, RouteCode]], enabled: bool
) -> Dict[str, Any]:
    """
    Return a copy of the settings with the given route flags set.

    Flags are stored as "1" / "0" strings, like the settings screen writes them.
    """
    updated = dict(settings or {})
    routes = updated.get(ENABLED_ROUTES_KEY)
    routes = dict(routes) if isinstance(routes, Mapping) else {}
    for route_id in route_ids:
        routes[str(route_id)] = "1" if enabled else "0"
    updated[ENABLED_ROUTES_KEY] = routes
    return updated
