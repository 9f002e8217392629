from .app_config import AppConfig, get_app_config  # noqa: F401
from .fishbowl_config import DEFAULT_HEADERS, SUBSCRIPTION_CREATE_URL  # noqa: F401
