"""WeChat Official Account API client."""

import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

import requests

from ..config import WeChatConfig
from ..core.message import Message, endpoint_kind
from ..errors import DecodeError, NetworkError, ProviderError

logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json; charset=utf-8"


@dataclass(frozen=True)
class AccessToken:
    """Short-lived credential required on every send call."""

    access_token: str
    expires_in: int = 0


@dataclass(frozen=True)
class ProviderResponse:
    """Envelope returned by the message APIs."""

    errcode: int = 0
    errmsg: str = ""

    @property
    def ok(self) -> bool:
        return self.errcode == 0


def _decode(response) -> Dict[str, Any]:
    """Decode a response body into a JSON object."""
    try:
        data = response.json()
    except ValueError as e:
        raise DecodeError(f"invalid JSON response: {e}") from e
    if not isinstance(data, dict):
        raise DecodeError(f"unexpected JSON response: {data!r}")
    return data


def _envelope(data: Dict[str, Any]) -> ProviderResponse:
    code = data.get("errcode", 0)
    message = data.get("errmsg", "")
    if not isinstance(code, int) or isinstance(code, bool):
        raise DecodeError(f"unexpected errcode: {code!r}")
    return ProviderResponse(errcode=code, errmsg=str(message))


class WeChatClient:
    """
    Minimal client for the token and message APIs.

    A new access token is fetched for every send; nothing is cached.
    """

    def __init__(
        self,
        config: WeChatConfig,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize the client.

        Args:
            config: Credentials and endpoints.
            session: HTTP session to use (a new one if not given).
        """
        self.config = config
        self._session = session or requests.Session()

    def fetch_token(self) -> AccessToken:
        """
        Get an access token with the client credential grant.

        Raises:
            NetworkError: on transport failure.
            DecodeError: if the body is not a token object.
            ProviderError: if WeChat rejected the credentials.
        """
        url = f"{self.config.api_host}/token"
        params = {
            "grant_type": "client_credential",
            "appid": self.config.app_id,
            "secret": self.config.secret,
        }
        logger.debug(f"GET {url} appid={self.config.app_id}")
        try:
            response = self._session.get(url, params=params, timeout=self.config.timeout)
        except requests.RequestException as e:
            raise NetworkError(str(e)) from e

        data = _decode(response)
        envelope = _envelope(data)
        if not envelope.ok:
            logger.info(f"Token request failed: {data}")
            raise ProviderError(envelope.errcode, envelope.errmsg)

        token = data.get("access_token")
        if not isinstance(token, str) or not token:
            raise DecodeError("access_token missing from token response")

        expires_in = data.get("expires_in", 0)
        return AccessToken(
            access_token=token,
            expires_in=expires_in if isinstance(expires_in, int) else 0,
        )

    def send(self, message: Message) -> ProviderResponse:
        """
        Post a message to its API.

        Args:
            message: TextMessage or TemplateMessage.

        Returns:
            The successful provider response.

        Raises:
            NetworkError: on transport failure.
            DecodeError: on a malformed response.
            ProviderError: if errcode is nonzero.
        """
        token = self.fetch_token()

        kind = endpoint_kind(message)
        url = f"{self.config.api_host}/message/{kind}/send"
        body = json.dumps(message.to_dict(), ensure_ascii=False).encode("utf-8")

        logger.debug(f"POST {url} touser={message.touser}")
        try:
            response = self._session.post(
                url,
                params={"access_token": token.access_token},
                data=body,
                headers={"Content-Type": JSON_CONTENT_TYPE},
                timeout=self.config.timeout,
            )
        except requests.RequestException as e:
            raise NetworkError(str(e)) from e

        data = _decode(response)
        envelope = _envelope(data)
        if not envelope.ok:
            logger.info(f"Send to {message.touser} failed: {data}")
            raise ProviderError(envelope.errcode, envelope.errmsg)

        logger.debug(f"Sent {kind} message to {message.touser}")
        return envelope

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self._session.close()
