from fastapi import Depends, Request

from standards_compare.core.config import Settings
from standards_compare.services import ServiceContainer
from standards_compare.services.comparison_service import ComparisonService
from standards_compare.services.document_view import DocumentRegistry


def get_services(request: Request) -> ServiceContainer:
    """Service container built by the app factory"""
    return request.app.state.services


def get_settings_dep(services: ServiceContainer = Depends(get_services)) -> Settings:
    return services.settings


def get_document_registry(services: ServiceContainer = Depends(get_services)) -> DocumentRegistry:
    return services.documents


def get_comparison_service(services: ServiceContainer = Depends(get_services)) -> ComparisonService:
    return services.comparisons
