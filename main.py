"""Cloud Functions source entrypoint.

The runtime loads functions by name from ``main.py`` at the source root.
See README.md for the deploy command of each trigger.
"""

from oshub.functions import (  # noqa: F401
    profile_created,
    profile_updated,
    user_created,
    user_deleted,
    user_document_created,
    user_document_updated,
)
