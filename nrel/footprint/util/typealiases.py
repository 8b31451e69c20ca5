from typing import Tuple

# MODEL ID TYPES
VehicleId = str
MixId = str
Brand = str
Model = str

# labels as found in the external vehicle dataset
NativeFuelLabel = str
CanonicalFuelLabel = str

# POSITIONAL
Latitude = float
Longitude = float
Coordinate = Tuple[Longitude, Latitude]  # [lon, lat] as exchanged with openrouteservice
