from typing import List

from django.urls import reverse

from singer_queue.rotation import RotatingQueue
from singer_queue.state import karaoke_queue, queue_lock

BEATLES = ['John', 'Paul', 'George', 'Ringo']


class RecordingObserver:
    """
    Queue observer that remembers every rotation order it was sent
    """
    def __init__(self):
        self.calls: List[List[str]] = []

    def __call__(self, singers):
        self.calls.append(singers)

    @property
    def last(self):
        return self.calls[-1] if self.calls else None


def create_queue(names=None, observer=None):
    queue = RotatingQueue(broadcaster=observer)
    for name in names or []:
        queue.add_singer(name)
    return queue


def assert_consistent(test_case, queue):
    singers = queue.show_singers()
    test_case.assertEqual(len(singers), len(set(singers)))
    if singers:
        test_case.assertTrue(0 <= queue.cursor < len(singers))
        test_case.assertEqual(singers[0], queue.current_singer())
    else:
        test_case.assertEqual(queue.cursor, 0)


def reset_shared_queue():
    with queue_lock:
        karaoke_queue.reset()


def post_name(test_case, url_name, name):
    return test_case.client.post(reverse(url_name), {'name': name}, format='json')


def add_singers_via_api(test_case, names):
    for name in names:
        response = post_name(test_case, 'add_singer', name)
        test_case.assertEqual(response.status_code, 200)


def get_singers_via_api(test_case):
    return test_case.client.get(reverse('show_singers')).json()['singers']
