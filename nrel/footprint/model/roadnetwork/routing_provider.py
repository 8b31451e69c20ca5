from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Tuple

from nrel.footprint.model.roadnetwork.place import Place, PlaceSearchResult
from nrel.footprint.model.roadnetwork.route_segment import RouteSegment


class RoutingProvider(ABC):
    """
    a service that routes cars between places and finds places by name
    """

    @abstractmethod
    def route(self, start: Place, destination: Place) -> Tuple[RouteSegment, ...]:
        """
        computes the route between two places

        :param start: where the trip begins
        :param destination: where the trip ends
        :return: the speed-tagged segments of the route, in travel order
        :raises RouteNotFoundError: if there is no path between the places
        :raises ExternalServiceError: if the provider could not be queried
        """

    @abstractmethod
    def search_place(self, query: str) -> Tuple[PlaceSearchResult, ...]:
        """
        searches for places by address or venue name

        :param query: the search text
        :return: the matching places, best match first
        :raises ExternalServiceError: if the provider could not be queried
        """
