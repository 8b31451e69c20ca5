from nrel.footprint.model.vehicle.vehicle import Vehicle
from nrel.footprint.model.vehicle.vehicle_catalog import VehicleCatalog, build_generic_vehicles
from nrel.footprint.model.vehicle.vehicle_store import CsvVehicleStore, VehicleStore
