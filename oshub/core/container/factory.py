"""Container Factory.

All construction logic lives here. The factory reads settings and builds
the container. Broken configuration (a missing Segment write key) raises
here, before any event is dispatched.
"""

from oshub.adapters.analytics.segment import SegmentTracker
from oshub.adapters.analytics.subscriber import AnalyticsEventSubscriber
from oshub.adapters.firestore.user_repository import FirestoreUserRepository
from oshub.core.config import Settings
from oshub.core.container.container import Container
from oshub.core.logging import logger


def create_container(settings: Settings) -> Container:
    """Build the container from settings.

    Args:
        settings: Application settings (from core/config)

    Returns:
        Fully constructed Container ready for use

    Raises:
        ConfigurationError: If analytics is enabled without a write key.
    """
    tracker = SegmentTracker(settings)

    users = FirestoreUserRepository(
        project=settings.FIRESTORE_PROJECT,
        database=settings.FIRESTORE_DATABASE,
    )

    analytics_subscriber = AnalyticsEventSubscriber(
        tracker=tracker,
        users=users,
        group_id=settings.ANALYTICS_GROUP_ID,
    )

    logger.debug("Container built")
    return Container(
        tracker=tracker,
        users=users,
        analytics_subscriber=analytics_subscriber,
    )
