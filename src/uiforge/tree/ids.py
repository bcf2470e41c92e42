"""Node id generation."""

import time
import uuid


def generate_id() -> str:
    """
    Fresh node id: el_<epoch-ms>_<9 hex chars>.

    The random suffix keeps ids unique when many nodes are created in the same
    millisecond (deep clones).
    """
    return f"el_{int(time.time() * 1000)}_{uuid.uuid4().hex[:9]}"
