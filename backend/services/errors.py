class DetectorError(Exception):
    """Base class for failures surfaced to callers of the detector."""


class InvalidInput(DetectorError):
    pass


class ComputationError(DetectorError):
    pass
