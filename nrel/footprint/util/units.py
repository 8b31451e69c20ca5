## TYPE ALIAS
# Distance
Meters = float  # meters
Kilometers = float  # kilometers

# Speed
Kmph = float  # kilometers per hour

# Time
Seconds = float  # seconds
Hours = float  # hours

# Consumption, per 100 km of travel
LitersPer100Km = float
KwHPer100Km = float
Consumption = float  # either of the above, depending on the fuel type

# Emissions
GramsCO2 = float
GramsCO2PerKm = float
GramsCO2PerLiter = float
GramsCO2PerKwH = float

## CONVERSIONS
#    Time
SECONDS_IN_HOUR = 3600
SECONDS_TO_HOURS = 1 / 3600

#    Distance
M_TO_KM = 1 / 1000
KM_TO_M = 1000

#    Consumption
CONSUMPTION_DISTANCE_KM = 100  # consumption figures are given per 100 km


def meters_to_kilometers(meters: Meters) -> Kilometers:
    return meters * M_TO_KM


def kmph(distance_km: Kilometers, time_seconds: Seconds) -> Kmph:
    """
    average speed over a distance; a zero (or negative) duration has no speed

    :param distance_km: the distance traveled
    :param time_seconds: the time it took
    :return: the speed in kilometers per hour
    """
    if time_seconds <= 0:
        return 0.0
    return distance_km / (time_seconds * SECONDS_TO_HOURS)
