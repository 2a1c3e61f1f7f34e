"""Retry policies for outbound calls made by DIY Label services."""

from tenacity import (
    retry,
    stop_after_attempt,
    wait_exponential,
    retry_if_exception_type,
)

from packages.shared.errors import TransientError

# Store settings are read on the checkout path, so retries stay short.
RETRY_CONFIG = {
    "store_settings": {
        "max_attempts": 3,
        "initial_delay": 0.1,
        "max_delay": 1.0,
    },
    "default": {
        "max_attempts": 3,
        "initial_delay": 1.0,
        "max_delay": 10.0,
    },
}


def create_retry_decorator(
    policy: str = "default",
    retryable_exceptions: tuple = (TransientError,),
):
    """Create a retry decorator for the named policy."""
    config = RETRY_CONFIG.get(policy, RETRY_CONFIG["default"])
    return retry(
        stop=stop_after_attempt(config["max_attempts"]),
        wait=wait_exponential(
            multiplier=config["initial_delay"],
            min=config["initial_delay"],
            max=config["max_delay"],
        ),
        retry=retry_if_exception_type(retryable_exceptions),
        reraise=True,
    )
