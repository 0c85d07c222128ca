"""Async JSON GET shared by the Open-Meteo clients. One attempt, no retries."""

import logging
from typing import Any

import httpx

from weatherlookup.errors import MalformedResponse, NetworkError, ProviderError

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = "weatherlookup/0.1.0"


async def get_json(
    url: str,
    params: dict[str, Any],
    *,
    timeout: float,
    user_agent: str = DEFAULT_USER_AGENT,
    client: httpx.AsyncClient | None = None,
) -> dict:
    """GET a URL and return its decoded JSON object.

    A caller-owned client is reused and left open; without one, a client is
    opened and closed for this request only.
    """
    headers = {"User-Agent": user_agent, "Accept": "application/json"}
    try:
        if client is not None:
            resp = await client.get(url, params=params, headers=headers, timeout=timeout)
        else:
            async with httpx.AsyncClient(timeout=timeout) as own_client:
                resp = await own_client.get(url, params=params, headers=headers)
    except httpx.TimeoutException as e:
        logger.error("Request to %s timed out: %s", url, e)
        raise NetworkError(f"Timed out contacting {url}") from e
    except httpx.RequestError as e:
        logger.error("Request to %s failed: %s", url, e)
        raise NetworkError(f"Request to {url} failed: {e}") from e

    if not resp.is_success:
        reason = _error_reason(resp)
        logger.error("Provider %s returned %d: %s", url, resp.status_code, reason)
        raise ProviderError(f"HTTP {resp.status_code}: {reason}", resp.status_code)

    try:
        data = resp.json()
    except ValueError as e:
        logger.error("Provider %s returned invalid JSON", url)
        raise MalformedResponse(f"Invalid JSON from {url}") from e

    if not isinstance(data, dict):
        raise MalformedResponse(f"Expected a JSON object from {url}, got {type(data).__name__}")
    # Open-Meteo flags errors in the body as {"error": true, "reason": "..."}
    if data.get("error") is True:
        reason = data.get("reason", "unknown error")
        logger.error("Provider %s reported an error: %s", url, reason)
        raise ProviderError(reason, resp.status_code)
    return data


def _error_reason(resp: httpx.Response) -> str:
    try:
        body = resp.json()
    except ValueError:
        return resp.text or resp.reason_phrase
    if isinstance(body, dict) and body.get("reason"):
        return str(body["reason"])
    return resp.text or resp.reason_phrase
