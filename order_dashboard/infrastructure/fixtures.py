"""Sample ``Orders`` rows served when no Supabase project is configured."""

from datetime import UTC, datetime


def sample_rows(now: datetime | None = None) -> list[dict]:
    """Return six rows across three subscribers; the last two are stamped ``now``."""
    stamp = (now or datetime.now(UTC)).isoformat()
    return [
        {"id": 21, "subscriber_name": "little_toes_baheer", "order_id": "7496366882903",
         "phone": "201114344604", "status": "ESCALATED", "created_at": "2025-11-28T10:26:51.059Z"},
        {"id": 25, "subscriber_name": "little_toes_baheer", "order_id": "7497019916375",
         "phone": "201001030020", "status": "CONFIRMED", "created_at": "2025-11-28T14:35:11.896Z"},
        {"id": 32, "subscriber_name": "little_toes_baheer", "order_id": "7499213111383",
         "phone": "201223130974", "status": "REMINDED", "created_at": "2025-11-28T20:45:44.866Z"},
        {"id": 35, "subscriber_name": "netaq_aljamal", "order_id": "6208391577782",
         "phone": "201111035622", "status": "PENDING", "created_at": "2025-11-28T21:45:00.000Z"},
        {"id": 36, "subscriber_name": "little_toes_baheer", "order_id": "7499213111999",
         "phone": "201223130999", "status": "PENDING", "created_at": stamp},
        {"id": 37, "subscriber_name": "different_store", "order_id": "7499213555555",
         "phone": "201005555555", "status": "CANCELLED", "created_at": stamp},
    ]
