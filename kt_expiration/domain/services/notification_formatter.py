"""Rendering of key expiration results for display."""

from collections.abc import Sequence

from ..entities import KeyInfo
from ..value_objects import KeyStatus

NO_KEYS_MESSAGE = "No keys found"

ROTATION_NOTICE = (
    "\nPlease rotate any keys that are expired or will expire soon.\n"
    "Use 'keytransparency-client authorized-keys create-keyset' to create new keys.\n"
)


def _format_line(info: KeyInfo) -> str:
    match info.status:
        case KeyStatus.EXPIRED:
            return f"⚠️ KEY EXPIRED: Key ID {info.key_id} expired on {info.expire_date}"
        case KeyStatus.WARNING:
            return (
                f"⚠️ WARNING: Key ID {info.key_id} will expire in "
                f"{info.days_left} days (on {info.expire_date})"
            )
        case _:
            return (
                f"✅ Key ID {info.key_id} is valid "
                f"(expires in {info.days_left} days on {info.expire_date})"
            )


def format_notification(key_infos: Sequence[KeyInfo]) -> str:
    """
    Format key expiration results as a user-facing notification.

    Args:
        key_infos: Results of a key expiration check.

    Returns:
        One line per key, followed by a rotation notice when any key
        is expired or about to expire.
    """
    if not key_infos:
        return NO_KEYS_MESSAGE

    result = "".join(f"{_format_line(info)}\n" for info in key_infos)

    if any(info.status.requires_attention for info in key_infos):
        result += ROTATION_NOTICE

    return result


def summarize(key_infos: Sequence[KeyInfo]) -> str:
    """Generate a one-line summary of key expiration results."""
    if not key_infos:
        return NO_KEYS_MESSAGE

    counts = {status: 0 for status in KeyStatus}
    for info in key_infos:
        counts[info.status] += 1

    parts: list[str] = []
    if counts[KeyStatus.EXPIRED]:
        parts.append(f"{counts[KeyStatus.EXPIRED]} expired")
    if counts[KeyStatus.WARNING]:
        parts.append(f"{counts[KeyStatus.WARNING]} warning")
    if counts[KeyStatus.VALID]:
        parts.append(f"{counts[KeyStatus.VALID]} valid")

    total_attention = counts[KeyStatus.EXPIRED] + counts[KeyStatus.WARNING]
    if not total_attention:
        if len(key_infos) == 1:
            return "The only key is valid"
        return f"All {len(key_infos)} keys are valid"

    noun = "key" if total_attention == 1 else "keys"
    return f"{total_attention} {noun} requiring attention: {', '.join(parts)}"
