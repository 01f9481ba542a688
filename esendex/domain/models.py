from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, List, Optional, Protocol
from urllib.parse import urlsplit


class MessageType:
    SMS = "SMS"
    VOICE = "Voice"


# --------------------------------------------------------------------------- #
# Outbound
# --------------------------------------------------------------------------- #

@dataclass
class Message:
    """A message to send. Optional fields left as None are not sent."""

    to: str
    body: str
    type: Optional[str] = None
    lang: Optional[str] = None
    validity: Optional[int] = None
    retries: Optional[int] = None
    character_set: Optional[str] = None


@dataclass
class SentMessageRef:
    id: str
    uri: str


@dataclass
class SendResponse:
    batch_id: str
    messages: List[SentMessageRef] = field(default_factory=list)


# --------------------------------------------------------------------------- #
# Read side
# --------------------------------------------------------------------------- #

@dataclass
class Paging:
    start_index: int = 0
    count: int = 0
    total_count: int = 0


@dataclass(frozen=True)
class BodyRef:
    """Where a message body lives; resolved with ``Client.body``."""

    uri: str

    @property
    def path(self) -> str:
        return urlsplit(self.uri).path


class HasBody(Protocol):
    """Anything carrying a body reference: sent, received and single messages."""

    body_ref: Optional[BodyRef]


@dataclass
class MessageBody:
    text: str
    character_set: str


@dataclass
class FailureReason:
    code: int
    description: str
    permanent_failure: bool


@dataclass
class SentMessage:
    id: str
    uri: str
    reference: str = ""
    status: str = ""
    last_status_at: Optional[datetime] = None
    submitted_at: Optional[datetime] = None
    type: str = ""
    to: str = ""
    from_: str = ""
    summary: str = ""
    body_ref: Optional[BodyRef] = None
    direction: str = ""
    parts: int = 0
    username: str = ""
    failure_reason: Optional[FailureReason] = None


@dataclass
class ReceivedMessage:
    id: str
    uri: str
    reference: str = ""
    status: str = ""
    received_at: Optional[datetime] = None
    type: str = ""
    to: str = ""
    from_: str = ""
    summary: str = ""
    body_ref: Optional[BodyRef] = None
    direction: str = ""
    parts: int = 0
    read_at: Optional[datetime] = None
    read_by: str = ""


@dataclass
class MessageHeader:
    """A single message fetched by id (either direction)."""

    id: str
    uri: str
    reference: str = ""
    status: str = ""
    last_status_at: Optional[datetime] = None
    submitted_at: Optional[datetime] = None
    received_at: Optional[datetime] = None
    type: str = ""
    to: str = ""
    from_: str = ""
    summary: str = ""
    body_ref: Optional[BodyRef] = None
    direction: str = ""
    read_at: Optional[datetime] = None
    sent_at: Optional[datetime] = None
    delivered_at: Optional[datetime] = None
    read_by: str = ""
    parts: int = 0
    username: str = ""
    failure_reason: Optional[FailureReason] = None


@dataclass
class SentMessagesResponse:
    paging: Paging
    messages: List[SentMessage] = field(default_factory=list)


@dataclass
class ReceivedMessagesResponse:
    paging: Paging
    messages: List[ReceivedMessage] = field(default_factory=list)


@dataclass
class Batch:
    id: str
    uri: str
    created_at: Optional[datetime] = None
    batch_size: int = 0
    persisted_batch_size: int = 0
    # only statuses with a non-zero count
    status: Dict[str, int] = field(default_factory=dict)
    account_reference: str = ""
    created_by: str = ""
    name: str = ""


@dataclass
class BatchesResponse:
    paging: Paging
    batches: List[Batch] = field(default_factory=list)


@dataclass
class Account:
    id: str
    uri: str
    reference: str = ""
    label: str = ""
    address: str = ""
    type: str = ""
    messages_remaining: int = 0
    expires_on: Optional[datetime] = None
    role: str = ""
    settings_uri: str = ""


@dataclass
class AccountsResponse:
    accounts: List[Account] = field(default_factory=list)
