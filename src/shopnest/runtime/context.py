from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, replace

from pydantic import BaseModel

from src.shopnest.runtime.config.config_data import ConfigData


@dataclass
class AppContext:
    """Application context containing configuration."""

    config: ConfigData


_app_context: ContextVar[AppContext] = ContextVar(
    "app_context", default=AppContext(config=ConfigData())
)


def get_context() -> AppContext:
    """Get the current application context."""
    return _app_context.get()


def set_context(context: AppContext) -> Token[AppContext]:
    """Set the current application context.

    Args:
        context: AppContext instance to set as current.
    """
    return _app_context.set(context)


def _explicit_fields(model: BaseModel) -> dict:
    """Dump only the fields that were explicitly set, at every nesting level.

    A nested model passed explicitly is dumped whole, defaults included, so
    ``ConfigData(storefront=StorefrontConfig())`` resets that section. A
    nested model that was not passed contributes only its own explicit fields.
    """
    result = {}
    for field_name in type(model).model_fields:
        value = getattr(model, field_name)
        if isinstance(value, BaseModel):
            if field_name in model.model_fields_set:
                result[field_name] = value.model_dump()
            elif nested := _explicit_fields(value):
                result[field_name] = nested
        elif field_name in model.model_fields_set:
            result[field_name] = value
    return result


def _deep_merge(base: dict, override: dict) -> dict:
    result = base.copy()
    for key, value in override.items():
        if isinstance(result.get(key), dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def merge_configs(base_config: ConfigData, override_config: ConfigData) -> ConfigData:
    """Merge override_config into base_config.

    Only fields explicitly set on the override win; everything else is
    inherited from the base.
    """
    merged = _deep_merge(base_config.model_dump(), _explicit_fields(override_config))
    return ConfigData.model_validate(merged)


@contextmanager
def with_context(config_override: ConfigData | None = None):
    """Temporarily override the application configuration.

    Example:
        override = ConfigData(storefront=StorefrontConfig(language="es"))
        with with_context(override):
            assert get_config().storefront.language == "es"
    """
    if config_override is None:
        yield
        return

    if not isinstance(config_override, ConfigData):
        raise ValueError(
            f"config_override must be ConfigData, or None, got {type(config_override)}"
        )

    merged_config = merge_configs(get_config(), config_override)
    token = set_context(replace(get_context(), config=merged_config))
    try:
        yield
    finally:
        _app_context.reset(token)


def set_config(config: ConfigData) -> None:
    """Replace the current application configuration."""
    set_context(replace(get_context(), config=config))


def get_config() -> ConfigData:
    """Convenience function to get the current configuration."""
    return get_context().config
