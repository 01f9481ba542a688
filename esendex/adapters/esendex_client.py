"""Client for the Esendex REST API.

Every operation is a single blocking round trip:

    build request (path + options + XML body, headers, basic auth)
      -> send through a requests.Session
      -> non-2xx: ClientError, nothing decoded
      -> 2xx: parse XML into the domain dataclasses

Nothing is retried. Transport errors are the ``requests`` exceptions;
``ClientError`` / ``DecodeError`` / ``InvalidURLError`` cover the rest.

Usage:
    client = Client("user@example.com", "secret")
    for m in client.sent(page(0, 20)).messages:
        print(m.submitted_at, m.to, m.summary)

    account = client.account("EX0000000")
    account.send([Message(to="447700900000", body="Hello")])
"""

from __future__ import annotations

from datetime import datetime
from typing import Callable, Collection, Iterable, Optional, Sequence, TypeVar, Union
from urllib.parse import quote, unquote, urljoin, urlsplit
from xml.etree import ElementTree as ET

import requests
from requests.auth import HTTPBasicAuth

from ..common.config import Settings, settings
from ..common.errors import ClientError, InvalidURLError
from ..common.http_client import get_session
from ..common.logging import logger
from ..common.logging_utils import mask_phone, mask_reference, shorten_body
from ..common.timing import timed
from ..domain.models import (
    AccountsResponse,
    Batch,
    BatchesResponse,
    BodyRef,
    HasBody,
    Message,
    MessageBody,
    MessageHeader,
    ReceivedMessagesResponse,
    SendResponse,
    SentMessagesResponse,
)
from . import xml_codec
from .account_client import AccountClient
from .options import Option, apply_options

T = TypeVar("T")

XML_CONTENT_TYPE = "application/xml"

ACCOUNTS_PATH = "/v1.0/accounts"
MESSAGE_HEADERS_PATH = "/v1.0/messageheaders"
INBOX_PATH = "/v1.0/inbox/messages"
DISPATCHER_PATH = "/v1.0/messagedispatcher"
BATCHES_PATH = "/v1.1/messagebatches"

RequestBody = Union[str, bytes, ET.Element]


def _segment(value: str) -> str:
    return quote(str(value), safe="")


class Client:
    """Entry point for the API. Configuration is fixed at construction."""

    def __init__(
        self,
        username: str | None = None,
        password: str | None = None,
        *,
        base_url: str | None = None,
        user_agent: str | None = None,
        timeout_s: float | None = None,
        session: requests.Session | None = None,
    ) -> None:
        self.username = username if username is not None else settings.username
        self.password = password if password is not None else settings.password
        self.base_url = (base_url or settings.base_url).strip()
        self.user_agent = (user_agent or settings.user_agent).strip()
        self.timeout_s = timeout_s if timeout_s is not None else settings.timeout_s
        self.session = session or get_session()

    @classmethod
    def from_settings(cls, cfg: Settings | None = None, **kwargs) -> "Client":
        cfg = cfg or settings
        return cls(
            cfg.username,
            cfg.password,
            base_url=cfg.base_url,
            user_agent=cfg.user_agent,
            timeout_s=cfg.timeout_s,
            **kwargs,
        )

    def account(self, reference: str) -> AccountClient:
        """A view of this client scoped to one account reference."""
        return AccountClient(self, reference)

    # ------------------------------------------------------------------ #
    # Request building / transport
    # ------------------------------------------------------------------ #

    def resolve(self, path: str) -> str:
        try:
            base = urlsplit(self.base_url)
        except ValueError as e:
            raise InvalidURLError(f"invalid base URL: {self.base_url!r}: {e}") from e
        if base.scheme not in ("http", "https") or not base.netloc:
            raise InvalidURLError(f"invalid base URL: {self.base_url!r}")

        try:
            url = urljoin(self.base_url, path)
            resolved = urlsplit(url)
        except ValueError as e:
            raise InvalidURLError(f"cannot resolve {path!r} against {self.base_url!r}: {e}") from e

        if resolved.scheme not in ("http", "https") or not resolved.netloc:
            raise InvalidURLError(f"cannot resolve {path!r} against {self.base_url!r}")
        return url

    def new_request(
        self,
        method: str,
        path: str,
        body: RequestBody | None = None,
        options: Iterable[Option] = (),
    ) -> requests.PreparedRequest:
        url = self.resolve(path)

        data: bytes | None = None
        if body is not None:
            if isinstance(body, ET.Element):
                body = ET.tostring(body, encoding="unicode")
            data = body.encode("utf-8") if isinstance(body, str) else body

        req = requests.Request(
            method=method.upper(),
            url=url,
            params=apply_options(options),
            data=data,
            headers={
                "Content-Type": XML_CONTENT_TYPE,
                "User-Agent": self.user_agent,
            },
            auth=HTTPBasicAuth(self.username, self.password),
        )
        return req.prepare()

    def do(
        self,
        req: requests.PreparedRequest,
        decode: Optional[Callable[[bytes], T]] = None,
        *,
        expected: Collection[int] | None = None,
    ) -> Optional[T]:
        """Send ``req``; check the status; decode the body when asked to.

        ``expected`` narrows the accepted statuses (default: any 2xx).

        Raises:
            ClientError: on any other status. The body is not decoded.
            DecodeError: when the body is not the expected XML document.
        """
        path = unquote(urlsplit(req.url).path)
        method = req.method or ""

        with timed(
            "esendex_request",
            logger=logger,
            component="esendex",
            extra={"method": method, "path": path},
        ):
            resp = self.session.send(req, timeout=self.timeout_s)

        try:
            code = resp.status_code
            ok = code in expected if expected is not None else 200 <= code < 300
            if not ok:
                logger.warning(
                    {"esendex": "unexpected_status", "method": method, "path": path, "status": code}
                )
                raise ClientError(method, path, code)

            logger.info({"esendex": "request_ok", "method": method, "path": path, "status": code})

            if decode is None:
                return None
            return decode(resp.content)
        finally:
            resp.close()

    def _get(self, path: str, decode: Callable[[bytes], T], options: Sequence[Option] = ()) -> T:
        return self.do(self.new_request("GET", path, options=options), decode)

    # ------------------------------------------------------------------ #
    # Accounts
    # ------------------------------------------------------------------ #

    def accounts(self) -> AccountsResponse:
        """GET /v1.0/accounts"""
        return self._get(ACCOUNTS_PATH, xml_codec.decode_accounts)

    # ------------------------------------------------------------------ #
    # Messages
    # ------------------------------------------------------------------ #

    def sent(self, *options: Option) -> SentMessagesResponse:
        """Messages sent by the user. Accepts ``page``/``between`` options."""
        return self._get(MESSAGE_HEADERS_PATH, xml_codec.decode_sent_messages, options)

    def received(self, *options: Option) -> ReceivedMessagesResponse:
        """Messages received by any of the user's accounts."""
        return self.received_at(INBOX_PATH, *options)

    def received_at(self, path: str, *options: Option) -> ReceivedMessagesResponse:
        """Inbox listing against an explicit inbox path (global or per account)."""
        return self._get(path, xml_codec.decode_received_messages, options)

    def message(self, message_id: str) -> MessageHeader:
        return self._get(f"{MESSAGE_HEADERS_PATH}/{_segment(message_id)}", xml_codec.decode_message_header)

    def body(self, message: HasBody | BodyRef) -> MessageBody:
        """Fetch the full text of any message that carries a body reference.

        Only the path of the stored URI is requested, against the configured
        base URL.
        """
        ref = message if isinstance(message, BodyRef) else message.body_ref
        if ref is None or not ref.uri:
            raise ValueError("message has no body reference")
        return self._get(ref.path, xml_codec.decode_message_body)

    # ------------------------------------------------------------------ #
    # Sending
    # ------------------------------------------------------------------ #

    def dispatch(
        self,
        account_reference: str,
        messages: Iterable[Message],
        send_at: datetime | None = None,
    ) -> SendResponse:
        """POST /v1.0/messagedispatcher on behalf of ``account_reference``."""
        messages = list(messages)
        if not account_reference:
            raise ValueError("Missing required parameter: account_reference")
        if not messages:
            raise ValueError("At least one message is required")
        for m in messages:
            if not m.to or m.body is None:
                raise ValueError("Missing required parameters: to/body")

        payload = xml_codec.encode_dispatch(account_reference, messages, send_at=send_at)

        logger.info(
            {
                "esendex": "dispatch",
                "account": mask_reference(account_reference),
                "to": [mask_phone(m.to) for m in messages],
                "body": [shorten_body(m.body) for m in messages],
                "send_at": send_at,
            }
        )

        req = self.new_request("POST", DISPATCHER_PATH, body=payload)
        return self.do(req, xml_codec.decode_dispatch)

    # ------------------------------------------------------------------ #
    # Batches
    # ------------------------------------------------------------------ #

    def batches(self, *options: Option) -> BatchesResponse:
        return self._get(BATCHES_PATH, xml_codec.decode_batches, options)

    def batch(self, batch_id: str) -> Batch:
        return self._get(f"{BATCHES_PATH}/{_segment(batch_id)}", xml_codec.decode_batch)

    def cancel_batch(self, batch_id: str) -> None:
        """Cancel a scheduled batch. The API answers 204 and nothing else is accepted."""
        req = self.new_request("DELETE", f"{BATCHES_PATH}/{_segment(batch_id)}/schedule")
        self.do(req, expected=(204,))
        logger.info({"esendex": "batch_cancelled", "batch_id": batch_id})
