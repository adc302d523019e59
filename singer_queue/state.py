import threading
from contextlib import contextmanager

from .rotation import RotatingQueue

# One lineup per process. The queue itself isn't thread safe, so every caller goes through locked_queue().
karaoke_queue = RotatingQueue()
queue_lock = threading.RLock()


@contextmanager
def locked_queue():
    with queue_lock:
        yield karaoke_queue
