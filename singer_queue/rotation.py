import logging
from dataclasses import dataclass
from typing import Callable, List, Optional, Type

logger = logging.getLogger(__name__)

Observer = Callable[[List[str]], None]


class QueueError(Exception):
    pass


class DuplicateNameError(QueueError):
    pass


class NotFoundError(QueueError):
    pass


class EmptyQueueError(QueueError):
    def __init__(self, message="The queue is empty."):
        super().__init__(message)


@dataclass(frozen=True)
class QueueResult:
    """
    Outcome of an operation on a single singer. Unpacks as (success, message).
    """
    success: bool
    message: str
    error: Optional[Type[QueueError]] = None

    def __iter__(self):
        return iter((self.success, self.message))

    def __bool__(self):
        return self.success

    @classmethod
    def failed(cls, error: Type[QueueError], message: str):
        return cls(False, message, error)


def _exists_message(name):
    return f"A singer with the name '{name}' already exists."


def _missing_message(name):
    return f"A singer with the name '{name}' does not exist."


def relocate_cursor(singers: List[str], name: str) -> int:
    """
    Find the cursor for `name` after the list has shifted under it.
    Names are unique, so the name is a stable key where the index isn't.
    """
    return singers.index(name)


class RotatingQueue:
    """
    Round-robin lineup of singers for one karaoke session.

    Singers are kept in join order, and a cursor marks the one currently on stage. The order shown to the room
    (show_singers) always starts at the cursor and wraps around, so a singer who finishes goes to the back of the line
    simply by moving the cursor forward.

    Whenever the list changes shape, the cursor is re-derived from the name of whoever was on stage before the change.
    That keeps the same person on stage no matter where the insertion landed.
    """
    def __init__(self, broadcaster: Optional[Observer] = None):
        self._singers: List[str] = []
        self._cursor = 0
        self._observers: List[Observer] = []
        if broadcaster is not None:
            self.subscribe(broadcaster)

    def __len__(self):
        return len(self._singers)

    def __contains__(self, name):
        return name in self._singers

    def __bool__(self):
        return bool(self._singers)

    def __repr__(self):
        return f"<RotatingQueue {self.show_singers()}>"

    @property
    def cursor(self):
        return self._cursor

    @property
    def observers(self):
        return tuple(self._observers)

    # Observers

    def subscribe(self, observer: Observer) -> Observer:
        if observer not in self._observers:
            self._observers.append(observer)
        return observer

    def unsubscribe(self, observer: Observer):
        if observer in self._observers:
            self._observers.remove(observer)

    def _notify(self):
        for observer in list(self._observers):
            observer(self.show_singers())

    # Queries

    def current_singer(self) -> str:
        if not self._singers:
            raise EmptyQueueError()
        return self._singers[self._cursor]

    def show_singers(self) -> List[str]:
        return self._singers[self._cursor:] + self._singers[:self._cursor]

    def up_next(self, count: int) -> List[str]:
        """
        The singers waiting after the current one, in the order they'll go on stage
        """
        return self.show_singers()[1:count + 1] if count > 0 else []

    # Mutations

    def reset(self):
        self._singers = []
        self._cursor = 0
        logger.info("Queue was reset")
        self._notify()

    def add_singer(self, name: str) -> QueueResult:
        if name in self._singers:
            logger.warning(f"Rejected adding {name}: already in the queue")
            return QueueResult.failed(DuplicateNameError, _exists_message(name))

        if self._cursor == 0:
            self._singers.append(name)
        else:
            # Slot right before whoever is on stage is the last one in the rotation
            current = self._singers[self._cursor]
            self._singers.insert(self._cursor, name)
            self._cursor = relocate_cursor(self._singers, current)

        logger.info(f"Added {name} to the queue")
        self._notify()
        return QueueResult(True, f"Singer '{name}' has been added.")

    def add_priority_singer(self, name: str) -> QueueResult:
        if name in self._singers:
            logger.warning(f"Rejected priority add of {name}: already in the queue")
            return QueueResult.failed(DuplicateNameError, _exists_message(name))

        self._singers, self._cursor = self._with_priority(self._singers, self._cursor, name)

        logger.info(f"Added {name} to the queue with priority")
        self._notify()
        return QueueResult(True, f"Priority singer '{name}' has been added.")

    def next_singer(self) -> str:
        if not self._singers:
            raise EmptyQueueError()

        self._cursor = (self._cursor + 1) % len(self._singers)
        logger.info(f"{self._singers[self._cursor]} is now on stage")
        self._notify()
        return self.current_singer()

    def previous_singer(self) -> str:
        if not self._singers:
            raise EmptyQueueError()

        self._cursor = (self._cursor - 1 + len(self._singers)) % len(self._singers)
        logger.info(f"Went back to {self._singers[self._cursor]}")
        self._notify()
        return self.current_singer()

    def remove_singer(self, name: str) -> QueueResult:
        if name not in self._singers:
            logger.warning(f"Rejected removing {name}: not in the queue")
            return QueueResult.failed(NotFoundError, _missing_message(name))

        self._singers, self._cursor = self._without(self._singers, self._cursor, name)

        logger.info(f"Removed {name} from the queue")
        self._notify()
        return QueueResult(True, f"Singer '{name}' has been removed.")

    def bump_singer(self, name: str) -> QueueResult:
        """
        Move an existing singer into the priority slot (the one after the next singer).
        Both steps are computed on a copy of the lineup and committed together.
        """
        if name not in self._singers:
            logger.warning(f"Rejected bumping {name}: not in the queue")
            return QueueResult.failed(NotFoundError, _missing_message(name))

        singers, cursor = self._without(self._singers, self._cursor, name)
        singers, cursor = self._with_priority(singers, cursor, name)

        self._singers, self._cursor = singers, cursor
        logger.info(f"Bumped {name}")
        self._notify()
        return QueueResult(True, f"Singer '{name}' has been bumped.")

    # Index arithmetic

    @staticmethod
    def _with_priority(singers, cursor, name):
        singers = list(singers)
        if not singers:
            return [name], 0

        current = singers[cursor]
        singers.insert((cursor + 2) % len(singers), name)
        return singers, relocate_cursor(singers, current)

    @staticmethod
    def _without(singers, cursor, name):
        singers = list(singers)
        index = singers.index(name)
        del singers[index]

        if not singers:
            cursor = 0
        elif index < cursor:
            cursor -= 1
        elif index == cursor:
            # Whoever followed the removed singer slid into their slot
            cursor %= len(singers)

        return singers, cursor
