"""QR payloads for attendance logging.

A section's attendance code is the literal text ``attend:<sectionId>``.
"""

from __future__ import annotations

import io
from datetime import datetime, timedelta
from typing import BinaryIO, Iterable, Optional

import qrcode
from PIL import Image

from ..core.constants import QR_ATTENDANCE_PREFIX, SCHEDULE_BUFFER_MINUTES
from ..core.exceptions import InvalidQrCodeError
from ..schedules.model import Schedule

INVALID_QR_MESSAGE = "Invalid QR code"


def build_qr_payload(section_id: int) -> str:
    return f"{QR_ATTENDANCE_PREFIX}{int(section_id)}"


def parse_qr_payload(text: Optional[str]) -> int:
    """Return the section id encoded in a scanned payload."""

    raw = (text or "").strip()
    if not raw.startswith(QR_ATTENDANCE_PREFIX):
        raise InvalidQrCodeError(INVALID_QR_MESSAGE)
    suffix = raw[len(QR_ATTENDANCE_PREFIX):]
    if not (suffix.isascii() and suffix.isdigit()):
        raise InvalidQrCodeError(INVALID_QR_MESSAGE)
    return int(suffix)


def render_qr_png(payload: str, *, box_size: int = 10, border: int = 2) -> bytes:
    qr = qrcode.QRCode(
        version=1,
        error_correction=qrcode.constants.ERROR_CORRECT_L,
        box_size=box_size,
        border=border,
    )
    qr.add_data(payload)
    qr.make(fit=True)

    img = qr.make_image(fill_color="black", back_color="white")
    buf = io.BytesIO()
    img.save(buf, format="PNG")
    return buf.getvalue()


def decode_qr_image(stream: BinaryIO) -> str:
    """Read the first QR code in an uploaded camera frame."""

    # pyzbar loads the native zbar library on import.
    from pyzbar.pyzbar import decode as pyzbar_decode

    try:
        img = Image.open(stream)
    except (OSError, ValueError) as e:
        raise InvalidQrCodeError(INVALID_QR_MESSAGE) from e

    decoded = pyzbar_decode(img)
    if not decoded:
        raise InvalidQrCodeError("No QR code found in image")
    return decoded[0].data.decode("utf-8", errors="replace")


def is_within_class_schedule(
    schedules: Iterable[Schedule],
    now: datetime,
    *,
    buffer_minutes: int = SCHEDULE_BUFFER_MINUTES,
) -> bool:
    """True when `now` falls in a class slot, opening `buffer_minutes` early."""

    day = now.isoweekday()
    for s in schedules:
        if s.day_of_week != day:
            continue
        start = datetime.combine(now.date(), s.time_start) - timedelta(minutes=buffer_minutes)
        end = datetime.combine(now.date(), s.time_end)
        if start <= now.replace(tzinfo=None) <= end:
            return True
    return False
