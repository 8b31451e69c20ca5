from nrel.footprint.model.roadnetwork.car_route import CarRoute
from nrel.footprint.model.roadnetwork.place import Place, PlaceSearchResult
from nrel.footprint.model.roadnetwork.public_transport_route import PublicTransportRoute
from nrel.footprint.model.roadnetwork.road_type import RoadType
from nrel.footprint.model.roadnetwork.route_segment import RouteSegment
from nrel.footprint.model.roadnetwork.routing_provider import RoutingProvider
