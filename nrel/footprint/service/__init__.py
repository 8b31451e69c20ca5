from nrel.footprint.service.footprint_service import FootprintService, TripEmissions
