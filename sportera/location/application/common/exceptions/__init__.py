"""Application Exceptions."""

from sportera.location.application.common.exceptions.base import ApplicationError
from sportera.location.application.common.exceptions.gateway import DataMapperError, GatewayError

__all__ = ["ApplicationError", "GatewayError", "DataMapperError"]
