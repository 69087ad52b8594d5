"""
Services - comparison engine, documents and guidance
"""

from standards_compare.services.base_service import BaseService
from standards_compare.services.service_factory import ServiceContainer, ServiceFactory

__all__ = [
    'BaseService',
    'ServiceContainer',
    'ServiceFactory',
]
