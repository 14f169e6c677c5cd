from dataclasses import dataclass
from typing import Optional


@dataclass
class ActionBindingConfig:
    # NLU service
    nlu_endpoint: Optional[str] = None
    nlu_app_id: Optional[str] = None
    nlu_subscription_key: Optional[str] = None
    nlu_timeout_seconds: float = 10.0
    nlu_staging: bool = False

    # Intent / entity conventions
    none_intent_name: str = "None"
    builtin_type_prefix: str = "builtin."

    # Logging
    log_level: str = "INFO"
