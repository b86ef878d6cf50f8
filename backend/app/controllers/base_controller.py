"""
Base controller class.
Controllers wrap one service per request and hand Pydantic schemas back
to the endpoints.
"""

from abc import ABC


class BaseController(ABC):
    """Base controller class for all controllers."""
    pass
