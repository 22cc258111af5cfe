"""mWHO 2.0 pregnancy cardiovascular risk calculator."""

__version__ = "1.0.0"
