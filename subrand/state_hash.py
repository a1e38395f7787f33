"""State fingerprint used to correlate override telemetry."""
import hashlib

from subrand.logic.models import StateSnapshot


def get_state_hash(snapshot: StateSnapshot) -> str:
    """
    Fingerprint a generator state.

    Returns 16-char hex hash of the 232-byte state layout.
    """
    return hashlib.sha256(snapshot.to_bytes()).hexdigest()[:16]
