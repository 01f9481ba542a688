"""XML payloads of the Esendex REST API.

Responses live in the ``http://api.esendex.com/ns/`` namespace. Child elements
are matched on their local name only, so a document that drops or changes the
default namespace on inner elements still decodes; the root element must
carry the expected name (and the API namespace, when it has one).

Decoders never invent data: paging attributes default to 0, absent text to
"", absent timestamps to None, and an absent ``failurereason`` to None.
Identifiers and numbers are stripped; message text (``summary``,
``bodytext``) is kept exactly as sent.
"""

from __future__ import annotations

from datetime import datetime
from typing import Callable, Iterable, Iterator, Optional, TypeVar
from xml.etree import ElementTree as ET

from ..common.errors import DecodeError
from ..common.timestamps import format_timestamp, parse_optional_timestamp
from ..domain.models import (
    Account,
    AccountsResponse,
    Batch,
    BatchesResponse,
    BodyRef,
    FailureReason,
    Message,
    MessageBody,
    MessageHeader,
    Paging,
    ReceivedMessage,
    ReceivedMessagesResponse,
    SendResponse,
    SentMessage,
    SentMessageRef,
    SentMessagesResponse,
)

NAMESPACE = "http://api.esendex.com/ns/"

T = TypeVar("T")


# --------------------------------------------------------------------------- #
# Element helpers
# --------------------------------------------------------------------------- #

def _split(tag: str) -> tuple[str, str]:
    if tag.startswith("{"):
        ns, _, local = tag[1:].partition("}")
        return ns, local
    return "", tag


def _local(tag: str) -> str:
    return _split(tag)[1]


def _children(el: ET.Element, name: str) -> Iterator[ET.Element]:
    for child in el:
        if _local(child.tag) == name:
            yield child


def _child(el: Optional[ET.Element], *path: str) -> Optional[ET.Element]:
    cur = el
    for name in path:
        if cur is None:
            return None
        cur = next(_children(cur, name), None)
    return cur


def _text(el: ET.Element, *path: str) -> str:
    found = _child(el, *path)
    if found is None or found.text is None:
        return ""
    return found.text.strip()


def _raw_text(el: ET.Element, *path: str) -> str:
    found = _child(el, *path)
    if found is None or found.text is None:
        return ""
    return found.text


def _int_value(raw: str, where: str) -> int:
    if raw == "":
        return 0
    try:
        return int(raw)
    except ValueError as e:
        raise DecodeError(f"{where}: expected an integer, got {raw!r}") from e


def _int(el: ET.Element, *path: str) -> int:
    return _int_value(_text(el, *path), "/".join(path))


def _int_attr(el: ET.Element, name: str) -> int:
    return _int_value((el.get(name) or "").strip(), f"@{name}")


def _time(el: ET.Element, *path: str) -> Optional[datetime]:
    found = _child(el, *path)
    if found is None:
        return None
    try:
        return parse_optional_timestamp(found.text)
    except ValueError as e:
        raise DecodeError(f"{'/'.join(path)}: {e}") from e


def _bool(el: ET.Element, *path: str) -> bool:
    return _text(el, *path).lower() in ("true", "1")


def _body_ref(el: ET.Element) -> Optional[BodyRef]:
    body = _child(el, "body")
    if body is None:
        return None
    uri = (body.get("uri") or "").strip()
    return BodyRef(uri) if uri else None


def _failure_reason(el: ET.Element) -> Optional[FailureReason]:
    reason = _child(el, "failurereason")
    if reason is None:
        return None
    return FailureReason(
        code=_int(reason, "code"),
        description=_text(reason, "description"),
        permanent_failure=_bool(reason, "permanentfailure"),
    )


def _paging(root: ET.Element) -> Paging:
    return Paging(
        start_index=_int_attr(root, "startindex"),
        count=_int_attr(root, "count"),
        total_count=_int_attr(root, "totalcount"),
    )


def parse_document(content: bytes | str, root_name: str) -> ET.Element:
    """Parse a response body and check its root element."""
    try:
        root = ET.fromstring(content)
    except ET.ParseError as e:
        raise DecodeError(f"malformed XML response (expected <{root_name}>): {e}") from e

    ns, local = _split(root.tag)
    if local != root_name or ns not in ("", NAMESPACE):
        raise DecodeError(f"expected <{root_name}> in {NAMESPACE}, got {root.tag}")
    return root


def decoder(root_name: str, fn: Callable[[ET.Element], T]) -> Callable[[bytes | str], T]:
    """Bind a root element name to an element mapper: bytes -> model."""

    def decode(content: bytes | str) -> T:
        return fn(parse_document(content, root_name))

    return decode


# --------------------------------------------------------------------------- #
# Accounts
# --------------------------------------------------------------------------- #

def _account(el: ET.Element) -> Account:
    settings_el = _child(el, "settings")
    return Account(
        id=el.get("id", ""),
        uri=el.get("uri", ""),
        reference=_text(el, "reference"),
        label=_text(el, "label"),
        address=_text(el, "address"),
        type=_text(el, "type"),
        messages_remaining=_int(el, "messagesremaining"),
        expires_on=_time(el, "expireson"),
        role=_text(el, "role"),
        settings_uri=(settings_el.get("uri", "") if settings_el is not None else ""),
    )


def _accounts(root: ET.Element) -> AccountsResponse:
    return AccountsResponse(accounts=[_account(a) for a in _children(root, "account")])


# --------------------------------------------------------------------------- #
# Message headers
# --------------------------------------------------------------------------- #

def _sent_message(el: ET.Element) -> SentMessage:
    return SentMessage(
        id=el.get("id", ""),
        uri=el.get("uri", ""),
        reference=_text(el, "reference"),
        status=_text(el, "status"),
        last_status_at=_time(el, "laststatusat"),
        submitted_at=_time(el, "submittedat"),
        type=_text(el, "type"),
        to=_text(el, "to", "phonenumber"),
        from_=_text(el, "from", "phonenumber"),
        summary=_raw_text(el, "summary"),
        body_ref=_body_ref(el),
        direction=_text(el, "direction"),
        parts=_int(el, "parts"),
        username=_text(el, "username"),
        failure_reason=_failure_reason(el),
    )


def _received_message(el: ET.Element) -> ReceivedMessage:
    return ReceivedMessage(
        id=el.get("id", ""),
        uri=el.get("uri", ""),
        reference=_text(el, "reference"),
        status=_text(el, "status"),
        received_at=_time(el, "receivedat"),
        type=_text(el, "type"),
        to=_text(el, "to", "phonenumber"),
        from_=_text(el, "from", "phonenumber"),
        summary=_raw_text(el, "summary"),
        body_ref=_body_ref(el),
        direction=_text(el, "direction"),
        parts=_int(el, "parts"),
        read_at=_time(el, "readat"),
        read_by=_text(el, "readby"),
    )


def _message_header(el: ET.Element) -> MessageHeader:
    return MessageHeader(
        id=el.get("id", ""),
        uri=el.get("uri", ""),
        reference=_text(el, "reference"),
        status=_text(el, "status"),
        last_status_at=_time(el, "laststatusat"),
        submitted_at=_time(el, "submittedat"),
        received_at=_time(el, "receivedat"),
        type=_text(el, "type"),
        to=_text(el, "to", "phonenumber"),
        from_=_text(el, "from", "phonenumber"),
        summary=_raw_text(el, "summary"),
        body_ref=_body_ref(el),
        direction=_text(el, "direction"),
        read_at=_time(el, "readat"),
        sent_at=_time(el, "sentat"),
        delivered_at=_time(el, "deliveredat"),
        read_by=_text(el, "readby"),
        parts=_int(el, "parts"),
        username=_text(el, "username"),
        failure_reason=_failure_reason(el),
    )


def _sent_messages(root: ET.Element) -> SentMessagesResponse:
    return SentMessagesResponse(
        paging=_paging(root),
        messages=[_sent_message(m) for m in _children(root, "messageheader")],
    )


def _received_messages(root: ET.Element) -> ReceivedMessagesResponse:
    return ReceivedMessagesResponse(
        paging=_paging(root),
        messages=[_received_message(m) for m in _children(root, "messageheader")],
    )


def _message_body(root: ET.Element) -> MessageBody:
    return MessageBody(
        text=_raw_text(root, "bodytext"),
        character_set=_text(root, "characterset"),
    )


# --------------------------------------------------------------------------- #
# Batches
# --------------------------------------------------------------------------- #

def _batch_status(el: Optional[ET.Element]) -> dict[str, int]:
    # The API lists every status, most of them 0; keep the ones that happened.
    status: dict[str, int] = {}
    if el is None:
        return status
    for s in el:
        name = _local(s.tag)
        value = _int_value((s.text or "").strip(), f"status/{name}")
        if value > 0:
            status[name] = value
    return status


def _batch(el: ET.Element) -> Batch:
    return Batch(
        id=el.get("id", ""),
        uri=el.get("uri", ""),
        created_at=_time(el, "createdat"),
        batch_size=_int(el, "batchsize"),
        persisted_batch_size=_int(el, "persistedbatchsize"),
        status=_batch_status(_child(el, "status")),
        account_reference=_text(el, "accountreference"),
        created_by=_text(el, "createdby"),
        name=_text(el, "name"),
    )


def _batches(root: ET.Element) -> BatchesResponse:
    return BatchesResponse(
        paging=_paging(root),
        batches=[_batch(b) for b in _children(root, "messagebatch")],
    )


# --------------------------------------------------------------------------- #
# Dispatch
# --------------------------------------------------------------------------- #

def _dispatch(root: ET.Element) -> SendResponse:
    return SendResponse(
        batch_id=root.get("batchid", ""),
        messages=[
            SentMessageRef(id=m.get("id", ""), uri=m.get("uri", ""))
            for m in _children(root, "messageheader")
        ],
    )


def _sub(parent: ET.Element, tag: str, value) -> None:
    if value is None:
        return
    ET.SubElement(parent, tag).text = str(value)


def encode_dispatch(
    account_reference: str,
    messages: Iterable[Message],
    send_at: Optional[datetime] = None,
) -> str:
    """Build the ``<messages>`` document posted to the message dispatcher.

    Element order is fixed by the API: accountreference, sendat, then per
    message to, type, lang, validity, characterset, retries, body.
    """
    root = ET.Element("messages")
    _sub(root, "accountreference", account_reference)
    if send_at is not None:
        _sub(root, "sendat", format_timestamp(send_at))

    for m in messages:
        el = ET.SubElement(root, "message")
        _sub(el, "to", m.to)
        _sub(el, "type", m.type)
        _sub(el, "lang", m.lang)
        _sub(el, "validity", m.validity)
        _sub(el, "characterset", m.character_set)
        _sub(el, "retries", m.retries)
        _sub(el, "body", m.body)

    return ET.tostring(root, encoding="unicode")


decode_accounts = decoder("accounts", _accounts)
decode_sent_messages = decoder("messageheaders", _sent_messages)
decode_received_messages = decoder("messageheaders", _received_messages)
decode_message_header = decoder("messageheader", _message_header)
decode_message_body = decoder("messagebody", _message_body)
decode_batches = decoder("messagebatches", _batches)
decode_batch = decoder("messagebatch", _batch)
decode_dispatch = decoder("messageheaders", _dispatch)
