from slowapi import Limiter
from slowapi.util import get_remote_address

from seo_auditor.core.config import get_settings

# Rate limiter shared by the app and the routes that hit the network
limiter = Limiter(
    key_func=get_remote_address,
    default_limits=[f"{get_settings().rate_limit_per_minute}/minute"],
)

NETWORK_LIMIT = f"{get_settings().rate_limit_per_minute}/minute"
