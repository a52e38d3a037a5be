# npmojo/exceptions.py

class NpMojoError(ValueError):
    pass


class ConfigurationError(NpMojoError):
    pass


class InvalidParameterError(NpMojoError):
    pass


class InvalidBandwidthError(NpMojoError):
    pass


class InvalidLagError(NpMojoError):
    pass


class DimensionMismatchError(NpMojoError):
    pass
