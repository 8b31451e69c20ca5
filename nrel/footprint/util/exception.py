from typing import Dict, Optional


def report_error(error: Exception) -> Dict:
    """
    helper to enforce standardization of errors reported back to a client of the footprint service

    :param error: the error that occurred during a calculation
    :return: packaged as a report
    """
    data = {
        "report_type": "error",
        "error_type": error.__class__.__name__,
        "message": getattr(error, "message", str(error)),
    }
    return data


class FootprintError(Exception):
    """
    parent of all errors raised by a footprint calculation
    """

    def __init__(self, msg: str):
        super().__init__(msg)
        self.message = msg

    def __str__(self):
        return repr(self.message)


class InvalidDistanceError(FootprintError):
    """
    a route distance was negative or not a number
    """


class InvalidCoordinateError(FootprintError, ValueError):
    """
    a latitude or longitude was outside of its valid range
    """


class VehicleNotFoundError(FootprintError):
    """
    no generic vehicle, store entry or dataset record matched the requested vehicle
    """

    def __init__(self, msg: str, vehicle_id: Optional[str] = None):
        super().__init__(msg)
        self.vehicle_id = vehicle_id


class RouteNotFoundError(FootprintError):
    """
    the routing provider could not find a path between two places
    """


class MissingParameterError(FootprintError):
    """
    a parameter required for this calculation was not provided, such as the
    electricity mix for an electric vehicle
    """


class UnknownMixError(FootprintError):
    """
    the electricity mix id is not one of the configured mixes
    """

    def __init__(self, mix_id: str, known: Optional[str] = None):
        msg = f"unknown electricity mix '{mix_id}'"
        if known:
            msg += f", must be one of {{{known}}}"
        super().__init__(msg)
        self.mix_id = mix_id


class ExternalServiceError(FootprintError):
    """
    transport, status or parsing failure while talking to the vehicle dataset
    or the routing provider
    """

    def __init__(self, msg: str, service: Optional[str] = None):
        if service:
            msg = f"{service}: {msg}"
        super().__init__(msg)
        self.service = service
