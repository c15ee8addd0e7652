"""Track event naming.

Every track event this project emits is prefixed with the product tag so it
can be told apart from events other producers send to the same Segment
workspace. Apply ``event_name`` exactly once per call site: it is not
idempotent.
"""

PRODUCT_TAG = "[OSH]"
SEPARATOR = " "


def event_name(label: str) -> str:
    """Return *label* namespaced with the product tag."""
    return f"{PRODUCT_TAG}{SEPARATOR}{label}"
