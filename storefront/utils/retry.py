# storefront/utils/retry.py
import requests
import redis
from tenacity import (
    retry,
    retry_if_exception,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
    wait_fixed,
)

from storefront.utils.settings import HTTP_RETRY_ATTEMPTS, REDIS_RETRY_ATTEMPTS


def _transient_http(exc: BaseException) -> bool:
    # 4xx from PostgREST will not change on a second try
    if isinstance(exc, requests.HTTPError):
        return exc.response is not None and exc.response.status_code >= 500
    return isinstance(exc, (requests.ConnectionError, requests.Timeout))


#catalog and profile reads only, mirror writes are fire-and-forget and never retried
def http_retry():
    return retry(
        reraise=True,
        stop=stop_after_attempt(HTTP_RETRY_ATTEMPTS),
        wait=wait_exponential(multiplier=0.3, min=0.3, max=3),
        retry=retry_if_exception(_transient_http),
    )


#snapshot redis is local, a short pause is enough before giving up
def redis_retry():
    return retry(
        reraise=True,
        stop=stop_after_attempt(REDIS_RETRY_ATTEMPTS),
        wait=wait_fixed(0.05),
        retry=retry_if_exception_type((redis.ConnectionError, redis.TimeoutError)),
    )
