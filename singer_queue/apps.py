from django.apps import AppConfig


class SingerQueueConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'singer_queue'
    verbose_name = 'Singer Queue'

    def ready(self):
        from .broadcast import QueueBroadcaster
        from .state import karaoke_queue

        if not any(isinstance(observer, QueueBroadcaster) for observer in karaoke_queue.observers):
            karaoke_queue.subscribe(QueueBroadcaster())
