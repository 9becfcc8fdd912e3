"""Error kinds raised by the order models and the aggregator."""


class SieMarketError(Exception):
    """Base class for all order reporting errors"""
    pass


class InvalidArgument(SieMarketError, ValueError):
    """Raised when a line item or order is built from invalid input"""
    pass


class EmptyInput(SieMarketError, ValueError):
    """Raised when an aggregation needs at least one order and got none"""
    pass
