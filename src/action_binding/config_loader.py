"""
Configuration loader with validation.
"""
import logging
from typing import Optional
from dotenv import load_dotenv
from .config import ActionBindingConfig
from .config_validator import get_required_env, get_optional_env, get_float_env, get_bool_env
from .exceptions import ConfigurationError

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def load_config_from_env(require_nlu: bool = False) -> ActionBindingConfig:
    """
    Load configuration from environment variables with validation.
    
    Usage:
        config = load_config_from_env(require_nlu=True)
        service = LuisHttpService.from_config(config)
    
    :param require_nlu: Fail unless endpoint, app id and key are all set
    :return: Validated ActionBindingConfig instance
    :raises: ConfigurationError if required configs are missing or invalid
    """
    # Load .env file if it exists (for local development)
    load_dotenv()
    
    if require_nlu:
        endpoint = get_required_env("NLU_ENDPOINT", "Base URL of the LUIS-compatible NLU service")
        app_id = get_required_env("NLU_APP_ID", "NLU application id")
        key = get_required_env("NLU_SUBSCRIPTION_KEY", "NLU subscription key")
    else:
        endpoint = get_optional_env("NLU_ENDPOINT")
        app_id = get_optional_env("NLU_APP_ID")
        key = get_optional_env("NLU_SUBSCRIPTION_KEY")
    
    config = ActionBindingConfig(
        nlu_endpoint=endpoint,
        nlu_app_id=app_id,
        nlu_subscription_key=key,
        nlu_timeout_seconds=get_float_env("NLU_TIMEOUT_SECONDS", 10.0),
        nlu_staging=get_bool_env("NLU_STAGING", False),
        none_intent_name=get_optional_env("NLU_NONE_INTENT", default="None"),
        builtin_type_prefix=get_optional_env("NLU_BUILTIN_PREFIX", default="builtin."),
        log_level=get_optional_env("LOG_LEVEL", default="INFO").upper(),
    )
    
    if config.nlu_timeout_seconds <= 0:
        raise ConfigurationError(
            f"NLU_TIMEOUT_SECONDS must be positive, got {config.nlu_timeout_seconds}"
        )
    
    _log_level(config.log_level)
    
    return config


def configure_logging(level: Optional[str] = None) -> None:
    """
    Setup root logging the way the dialog host expects.
    
    The library itself never installs handlers; hosts call this once at startup.
    
    :raises ConfigurationError: If level is not a logging level name
    """
    logging.basicConfig(
        level=_log_level((level or "INFO").upper()),
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler()],
    )


def _log_level(name: str) -> int:
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        raise ConfigurationError(f"LOG_LEVEL is not a logging level: {name}")
    return level
