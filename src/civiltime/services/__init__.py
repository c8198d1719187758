"""Service layer: civil operations returning ServiceResult."""

from civiltime.services.civil import CivilService
from civiltime.services.result import ErrorCode, ServiceError, ServiceResult

__all__ = ["CivilService", "ErrorCode", "ServiceError", "ServiceResult"]
