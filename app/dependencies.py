from typing import Annotated

from fastapi import Depends

from app.core.config import Settings, get_settings
from app.core.exceptions import TextTooLongError
from app.services.engines.registry import EngineRegistry


# Settings dependency
SettingsDep = Annotated[Settings, Depends(get_settings)]


def get_registry() -> EngineRegistry:
    """Get the engine registry."""
    return EngineRegistry()

RegistryDep = Annotated[EngineRegistry, Depends(get_registry)]


def check_text_length(text: str, settings: Settings) -> None:
    """Reject text longer than the configured maximum."""
    if len(text) > settings.max_text_length:
        raise TextTooLongError(len(text), settings.max_text_length)
