from nrel.footprint.util.exception import (
    FootprintError,
    InvalidDistanceError,
    VehicleNotFoundError,
    RouteNotFoundError,
    MissingParameterError,
    UnknownMixError,
    ExternalServiceError,
)
from nrel.footprint.util.typealiases import (
    VehicleId,
    MixId,
    Brand,
    Model,
    NativeFuelLabel,
    CanonicalFuelLabel,
)
from nrel.footprint.util.units import (
    Kilometers,
    Kmph,
    Seconds,
    GramsCO2,
    GramsCO2PerKm,
    Consumption,
)
