from nrel.footprint.model.roadnetwork.openrouteservice.ors_routing_provider import (
    OpenRouteServiceProvider,
)
