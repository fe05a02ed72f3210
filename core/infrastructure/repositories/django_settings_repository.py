"""
Django implementation of SettingsRepository port.
"""
import logging
from typing import Any, Dict

from asgiref.sync import sync_to_async

from core.infrastructure.models import Option as OptionModel
from core.ports.settings_repository import SettingsRepository

logger = logging.getLogger(__name__)


class DjangoSettingsRepository(SettingsRepository):
    """Django ORM implementation of SettingsRepository."""

    @sync_to_async
    def load(self, name: str) -> Dict[str, Any]:
        """
        Load an option.

        Args:
            name: Option name

        Returns:
            Option value, or an empty dict if the option is missing or not a mapping
        """
        try:
            model = OptionModel.objects.get(name=name)
        except OptionModel.DoesNotExist:
            logger.debug("Option %s is not stored, using empty settings", name)
            return {}

        if not isinstance(model.value, dict):
            logger.warning("Option %s does not hold a mapping, ignoring it", name)
            return {}
        return dict(model.value)

    @sync_to_async
    def store(self, name: str, value: Dict[str, Any]) -> Dict[str, Any]:
        """
        Create or replace an option.

        Args:
            name: Option name
            value: Option value

        Returns:
            Stored option value
        """
        model, _ = OptionModel.objects.update_or_create(name=name, defaults={"value": value})
        return dict(model.value)
