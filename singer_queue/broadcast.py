import logging

from django.core.cache import cache
from django.dispatch import Signal
from django.utils import timezone

from karaoke.utils import format_lineup

logger = logging.getLogger(__name__)

QUEUE_CACHE_KEY = 'singer_queue:snapshot'

# Sent with `singers` (rotation order) and `version` after every change to the queue
queue_updated = Signal()


def latest_snapshot():
    return cache.get(QUEUE_CACHE_KEY) or {'version': 0, 'singers': [], 'updated_at': None}


class QueueBroadcaster:
    """
    Queue observer that publishes each new rotation order to whoever is listening.

    Clients poll the latest snapshot (see the `updates` view) and compare versions, while in-process listeners connect
    to the queue_updated signal. A failing receiver is logged and doesn't affect the queue or other receivers.
    """
    def __init__(self, cache_key=QUEUE_CACHE_KEY):
        self.cache_key = cache_key

    def __call__(self, singers):
        previous = cache.get(self.cache_key)
        version = previous['version'] + 1 if previous else 1
        snapshot = {'version': version, 'singers': list(singers), 'updated_at': timezone.now().isoformat()}
        cache.set(self.cache_key, snapshot, timeout=None)

        logger.info(f"Queue update #{version}: {format_lineup(singers)}")

        for receiver, response in queue_updated.send_robust(sender=self.__class__, singers=list(singers),
                                                            version=version):
            if isinstance(response, Exception):
                logger.exception(f"Receiver {receiver} failed on queue update #{version}", exc_info=response)

        return snapshot
