"""
Base service - shared plumbing for every service

Services receive their Settings from the composition root.
"""
from typing import Optional

from standards_compare.core.config import Settings, get_settings
from standards_compare.core.logging import get_logger


class BaseService:
    """
    Base class for services

    Features:
    - logger named after the concrete service module
    - settings access
    """

    def __init__(self, settings: Optional[Settings] = None):
        self.logger = get_logger(self.__class__.__module__)
        self.settings = settings or get_settings()

    def __repr__(self):
        return f"<{self.__class__.__name__}>"
