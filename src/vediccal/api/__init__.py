"""API components for the Vedic calendar."""

from .rest import VedicRestAPI

__all__ = [
    "VedicRestAPI",
]
