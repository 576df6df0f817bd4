"""BaseService — shared foundation for punctfix services.

Every service receives the resolved :class:`PunctfixSettings` at
construction time and reads its section config from there.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from punctfix.config.settings import PunctfixSettings


class BaseService:
    """Base for all service-layer classes."""

    def __init__(self, settings: PunctfixSettings) -> None:
        self._settings = settings
