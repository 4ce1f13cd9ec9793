from loguru import logger
from slowapi import Limiter
from slowapi.util import get_remote_address

from eportal.core.config import settings


# ----------------------------------------------------------------
# 1. CLIENT IP BEHIND PROXIES
# ----------------------------------------------------------------
def get_real_ip(request):
    """
    X-Forwarded-For (load balancers, Vercel, Nginx) first, then X-Real-IP
    (Cloudflare), then the socket peer.
    """
    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded:
        # leftmost entry is the original client
        return forwarded.split(",")[0].strip()

    real_ip = request.headers.get("X-Real-IP")
    if real_ip:
        return real_ip

    return get_remote_address(request)


# ----------------------------------------------------------------
# 2. STORAGE
# ----------------------------------------------------------------
# Managed Redis (Upstash, DigitalOcean, AWS) wants 'rediss://' in production.
storage_uri = settings.REDIS_URL

if storage_uri and storage_uri.startswith("redis://") and settings.ENV == "prod":
    storage_uri = storage_uri.replace("redis://", "rediss://", 1)


# ----------------------------------------------------------------
# 3. LIMITER
# ----------------------------------------------------------------
if storage_uri:
    logger.info("⚡ Initializing Rate Limiter with Redis Storage")
    limiter = Limiter(
        key_func=get_real_ip,
        storage_uri=storage_uri,
        strategy="fixed-window",
        storage_options={"socket_connect_timeout": 5, "retry_on_timeout": True},
        enabled=settings.RATE_LIMIT_ENABLED,
    )
else:
    logger.warning("⚠️ REDIS_URL not set. Using in-memory rate limiting.")
    limiter = Limiter(key_func=get_real_ip, enabled=settings.RATE_LIMIT_ENABLED)

# Applied to sign-in, sign-up and password-reset routes
AUTH_RATE_LIMIT = settings.LOGIN_RATE_LIMIT
