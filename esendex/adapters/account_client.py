from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Iterable
from urllib.parse import quote

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
from .options import Option, account_reference, filter_by_account

ACCOUNT_INBOX_PATH = "/v1.0/inbox/{reference}/messages"

if TYPE_CHECKING:
    from .esendex_client import Client


class AccountClient:
    """
    A ``Client`` scoped to one account reference.

    Listing calls add the account filter as the *last* option, so caller
    options cannot replace it; received messages use the per-account inbox
    path instead. Decoding is always the base client's.
    """

    def __init__(self, client: "Client", reference: str) -> None:
        self.client = client
        self.reference = reference

    def __repr__(self) -> str:
        return f"AccountClient(reference={self.reference!r})"

    def sent(self, *options: Option) -> SentMessagesResponse:
        return self.client.sent(*options, account_reference(self.reference))

    def received(self, *options: Option) -> ReceivedMessagesResponse:
        path = ACCOUNT_INBOX_PATH.format(reference=quote(self.reference, safe=""))
        return self.client.received_at(path, *options)

    def batches(self, *options: Option) -> BatchesResponse:
        return self.client.batches(*options, filter_by_account(self.reference))

    def send(self, messages: Iterable[Message]) -> SendResponse:
        return self.client.dispatch(self.reference, messages)

    def send_at(self, send_at: datetime, messages: Iterable[Message]) -> SendResponse:
        """Schedule ``messages`` for ``send_at`` (naive datetimes are UTC)."""
        return self.client.dispatch(self.reference, messages, send_at=send_at)

    # unscoped calls, forwarded as-is

    def accounts(self) -> AccountsResponse:
        return self.client.accounts()

    def message(self, message_id: str) -> MessageHeader:
        return self.client.message(message_id)

    def body(self, message: HasBody | BodyRef) -> MessageBody:
        return self.client.body(message)

    def batch(self, batch_id: str) -> Batch:
        return self.client.batch(batch_id)

    def cancel_batch(self, batch_id: str) -> None:
        self.client.cancel_batch(batch_id)
