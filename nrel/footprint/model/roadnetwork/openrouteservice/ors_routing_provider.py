from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Tuple

import requests
from returns.result import Failure, ResultE, Success

from nrel.footprint.config.routing import Routing
from nrel.footprint.model.roadnetwork.place import Place, PlaceSearchResult
from nrel.footprint.model.roadnetwork.route_segment import RouteSegment
from nrel.footprint.model.roadnetwork.routing_provider import RoutingProvider
from nrel.footprint.util.exception import ExternalServiceError, RouteNotFoundError
from nrel.footprint.util.units import kmph, meters_to_kilometers

log = logging.getLogger(__name__)

SERVICE_NAME = "openrouteservice"

# openrouteservice error codes reported when no path exists between the points
# 2009: route could not be found, 2010: point is not near a routable road
NO_ROUTE_ERROR_CODES = frozenset({2009, 2010})


@dataclass(frozen=True)
class OpenRouteServiceProvider(RoutingProvider):
    """
    routes cars and searches places using the openrouteservice api. each call opens its own
    session for a single round trip.
    """

    routing: Routing
    session_factory: Callable[[], requests.Session] = field(default=requests.Session)

    def route(self, start: Place, destination: Place) -> Tuple[RouteSegment, ...]:
        url = f"{self.routing.base_url}/v2/directions/{self.routing.profile}/json"
        body = {"coordinates": [list(start.to_coordinate()), list(destination.to_coordinate())]}
        headers = {
            "Authorization": self.routing.api_key or "",
            "Accept": "application/json",
        }
        log.info(f"requesting {self.routing.profile} route from {start} to {destination}")

        with self.session_factory() as session:
            try:
                response = session.post(
                    url, json=body, headers=headers, timeout=self.routing.timeout_seconds
                )
            except requests.RequestException as e:
                raise ExternalServiceError(f"route request failed: {e}", SERVICE_NAME) from e
            payload = _decode(response)

        if response.status_code != 200:
            code, message = _error_of(payload)
            if code in NO_ROUTE_ERROR_CODES:
                raise RouteNotFoundError(
                    f"no route found from {start} to {destination}: {message}"
                )
            raise ExternalServiceError(
                f"route request returned status {response.status_code}: {message}",
                SERVICE_NAME,
            )

        result = unpack_directions(payload)
        if isinstance(result, Failure):
            error = result.failure()
            if isinstance(error, RouteNotFoundError):
                raise error
            raise ExternalServiceError(str(error), SERVICE_NAME) from error
        return result.unwrap()

    def search_place(self, query: str) -> Tuple[PlaceSearchResult, ...]:
        url = f"{self.routing.base_url}/geocode/search"
        params = {"api_key": self.routing.api_key or "", "text": query}
        log.info(f"searching places for '{query}'")

        with self.session_factory() as session:
            try:
                response = session.get(url, params=params, timeout=self.routing.timeout_seconds)
            except requests.RequestException as e:
                raise ExternalServiceError(f"place search failed: {e}", SERVICE_NAME) from e
            payload = _decode(response)

        if response.status_code != 200:
            _, message = _error_of(payload)
            raise ExternalServiceError(
                f"place search returned status {response.status_code}: {message}",
                SERVICE_NAME,
            )

        result = unpack_geocode(payload)
        if isinstance(result, Failure):
            error = result.failure()
            raise ExternalServiceError(str(error), SERVICE_NAME) from error
        return result.unwrap()


def _decode(response: requests.Response) -> Any:
    try:
        return response.json()
    except ValueError as e:
        raise ExternalServiceError(
            f"response with status {response.status_code} is not valid json", SERVICE_NAME
        ) from e


def _error_of(payload: Any) -> Tuple[Any, str]:
    """
    reads the code and message of an openrouteservice error payload, which is either
    {"error": {"code": int, "message": str}} or {"error": str}
    """
    error = payload.get("error") if isinstance(payload, dict) else None
    if isinstance(error, dict):
        return error.get("code"), str(error.get("message", ""))
    return None, str(error)


def unpack_directions(payload: Dict) -> ResultE[Tuple[RouteSegment, ...]]:
    """
    converts an openrouteservice directions response into speed-tagged route segments. every
    step of the route becomes one segment, with its speed taken as the average speed over the step.

    :param payload: the decoded directions response
    :return: either the segments of the first route or an error while reading them
    """
    routes = payload.get("routes") if isinstance(payload, dict) else None
    if routes is None:
        return Failure(Exception("no 'routes' attribute on directions response"))
    elif len(routes) == 0:
        return Failure(RouteNotFoundError("directions response contains no routes"))

    segments: List[RouteSegment] = []
    try:
        for ors_segment in routes[0].get("segments", []):
            for step in ors_segment.get("steps", []):
                distance_m = step.get("distance")
                duration_s = step.get("duration")
                if distance_m is None or duration_s is None:
                    return Failure(
                        Exception(
                            f"unable to compute speed with missing distance or duration: {step}"
                        )
                    )
                distance_km = meters_to_kilometers(float(distance_m))
                if distance_km == 0:
                    continue
                segments.append(RouteSegment(distance_km, kmph(distance_km, float(duration_s))))
    except (AttributeError, IndexError, KeyError, TypeError, ValueError) as e:
        return Failure(e)

    return Success(tuple(segments))


def unpack_geocode(payload: Dict) -> ResultE[Tuple[PlaceSearchResult, ...]]:
    """
    converts an openrouteservice geocode response (GeoJSON) into place search results

    :param payload: the decoded geocode response
    :return: either the places found or an error while reading them
    """
    features = payload.get("features") if isinstance(payload, dict) else None
    if features is None:
        return Failure(Exception("no 'features' attribute on geocode response"))

    places: List[PlaceSearchResult] = []
    try:
        for feature in features:
            coordinates = (feature.get("geometry") or {}).get("coordinates") or []
            if len(coordinates) < 2:
                return Failure(
                    TypeError(f"geocode feature must have a point geometry: {feature}")
                )
            lon, lat = coordinates[0], coordinates[1]
            label = (feature.get("properties") or {}).get("label", "")
            places.append(
                PlaceSearchResult(label=str(label), latitude=float(lat), longitude=float(lon))
            )
    except (AttributeError, IndexError, KeyError, TypeError, ValueError) as e:
        return Failure(e)

    return Success(tuple(places))
