"""Identifier helpers."""

import uuid


def generate_id(prefix: str) -> str:
    """Short prefixed id such as ``order-1a2b3c4d``."""
    return f"{prefix}-{uuid.uuid4().hex[:8]}"


def generate_tx_hash() -> str:
    """Synthetic transaction hash; nothing is ever broadcast."""
    return f"0x{uuid.uuid4().hex}{uuid.uuid4().hex}"
