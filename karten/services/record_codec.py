"""Conversion between words and flat records of the word file.

Record schema (one row per word)::

    origin        :: str
    translation   :: str
    last_seen_at  :: str[RFC 3339]
    score         :: int
    meta          :: str[JSON card] or empty
"""

import json
import logging
from datetime import datetime, timezone

from karten.exceptions import RecordError
from karten.models import Card, ColorClass, Syllable, Word, clamp_score

logger = logging.getLogger(__name__)

HEADER = ["origin", "translation", "last_seen_at", "score", "meta"]

ORIGIN, TRANSLATION, LAST_SEEN_AT, SCORE, META = range(len(HEADER))

# Written for words that were never reviewed
ZERO_TIMESTAMP = "0001-01-01T00:00:00Z"


def format_timestamp(moment: datetime | None) -> str:
    """Format a timestamp as RFC 3339 with second precision."""
    if moment is None:
        return ZERO_TIMESTAMP
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    text = moment.isoformat(timespec="seconds")
    if text.endswith("+00:00"):
        text = text[: -len("+00:00")] + "Z"
    return text


def parse_timestamp(text: str) -> datetime | None:
    """Parse an RFC 3339 timestamp leniently.

    Returns:
        The timestamp, or None for the zero timestamp and unparsable input
    """
    text = text.strip()
    if not text or text == ZERO_TIMESTAMP:
        return None
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        moment = datetime.fromisoformat(text)
    except ValueError:
        logger.debug(f"Unparsable timestamp {text!r}, treating as never seen")
        return None
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment


def parse_score(text: str) -> int:
    """Parse a score leniently: garbage becomes 0, range is clamped."""
    try:
        return clamp_score(int(text.strip()))
    except ValueError:
        logger.debug(f"Unparsable score {text!r}, treating as 0")
        return 0


def encode_card(card: Card | None) -> str:
    """Serialize a card into the compact JSON stored in the meta column.

    Cards without forms or translation are not worth keeping and encode
    as an empty string.
    """
    if card is None or not card.forms or not card.translation:
        return ""
    payload = {
        "origin": card.origin,
        "translation": card.translation,
        "forms": [{"val": s.value, "color": s.color_class.value} for s in card.forms],
    }
    return json.dumps(payload, ensure_ascii=False, separators=(",", ":"))


def decode_card(meta: str) -> Card | None:
    """Deserialize the meta column back into a card.

    Raises:
        RecordError: If the meta column is not a valid card encoding
    """
    if not meta:
        return None
    try:
        payload = json.loads(meta)
        return Card(
            origin=list(payload.get("origin") or []),
            translation=list(payload.get("translation") or []),
            forms=[
                Syllable(item["val"], ColorClass(item.get("color", 0)))
                for item in payload.get("forms") or []
            ],
        )
    except (json.JSONDecodeError, AttributeError, KeyError, TypeError, ValueError) as e:
        raise RecordError(f"Invalid card metadata: {e}") from e


def word_to_record(word: Word) -> list[str]:
    """Serialize a word into a record with all five fields."""
    return [
        word.origin,
        word.translation,
        format_timestamp(word.last_seen_at),
        str(word.score),
        encode_card(word.card),
    ]


def word_from_record(row: list[str]) -> Word:
    """Deserialize a record into a word.

    Broken timestamps and scores fall back to defaults.

    Raises:
        RecordError: If the record has fewer than five fields or broken metadata
    """
    if len(row) < len(HEADER):
        raise RecordError(f"Expected {len(HEADER)} fields, got {len(row)}: {row!r}")

    return Word(
        origin=row[ORIGIN],
        translation=row[TRANSLATION],
        last_seen_at=parse_timestamp(row[LAST_SEEN_AT]),
        score=parse_score(row[SCORE]),
        card=decode_card(row[META]),
    )
