from __future__ import annotations

from enum import StrEnum


class DeliveryOutcome(StrEnum):
    ACKNOWLEDGED = "acknowledged"
    ALREADY_ACKNOWLEDGED = "already_acknowledged"
    PROCESSING_FAILED = "processing_failed"
    ACK_FAILED = "ack_failed"
