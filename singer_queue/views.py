import logging
from functools import wraps

from constance import config
from flags.state import enable_flag, disable_flag, flag_enabled
from rest_framework import status
from rest_framework.decorators import api_view
from rest_framework.response import Response

from .broadcast import latest_snapshot
from .rotation import DuplicateNameError, EmptyQueueError, NotFoundError
from .serializers import NewSingerNameSerializer, SingerNameSerializer
from .state import locked_queue

logger = logging.getLogger(__name__)

ERROR_STATUS = {
    DuplicateNameError: status.HTTP_409_CONFLICT,
    NotFoundError: status.HTTP_404_NOT_FOUND,
}


def _error(message, status_code):
    return Response({'error': message}, status=status_code)


def signup_required(view_func):
    @wraps(view_func)
    def wrapper(request, *args, **kwargs):
        if flag_enabled('SIGNUP_CLOSED'):
            logger.warning("Rejected signup while signup is closed")
            return _error("Signup is closed.", status.HTTP_403_FORBIDDEN)

        return view_func(request, *args, **kwargs)

    return wrapper


def _singer_name(request, serializer_class=SingerNameSerializer):
    """
    Returns (name, error_response). Exactly one of them is None.
    """
    if not isinstance(request.data, dict) or not isinstance(request.data.get('name', ''), str):
        return None, _error("Invalid request body.", status.HTTP_400_BAD_REQUEST)

    serializer = serializer_class(data=request.data)
    if not serializer.is_valid():
        return None, _error(serializer.first_error, status.HTTP_400_BAD_REQUEST)

    return serializer.validated_data['name'], None


def _name_operation(request, operation, serializer_class=SingerNameSerializer):
    name, error_response = _singer_name(request, serializer_class)
    if error_response:
        return error_response

    with locked_queue() as queue:
        result = getattr(queue, operation)(name)

    if not result.success:
        return _error(result.message, ERROR_STATUS[result.error])

    return Response({'message': result.message}, status=status.HTTP_200_OK)


@api_view(["POST"])
def reset(request):
    with locked_queue() as queue:
        queue.reset()
    return Response({}, status=status.HTTP_200_OK)


@api_view(["GET"])
def current_singer(request):
    try:
        with locked_queue() as queue:
            name = queue.current_singer()
    except EmptyQueueError as e:
        return _error(str(e), status.HTTP_404_NOT_FOUND)

    return Response({'currentSinger': name}, status=status.HTTP_200_OK)


@api_view(["POST"])
def next_singer(request):
    try:
        with locked_queue() as queue:
            name = queue.next_singer()
    except EmptyQueueError as e:
        return _error(str(e), status.HTTP_404_NOT_FOUND)

    return Response({'nextSinger': name}, status=status.HTTP_200_OK)


@api_view(["POST"])
def previous_singer(request):
    try:
        with locked_queue() as queue:
            name = queue.previous_singer()
    except EmptyQueueError as e:
        return _error(str(e), status.HTTP_404_NOT_FOUND)

    return Response({'previousSinger': name}, status=status.HTTP_200_OK)


@api_view(["GET"])
def show_singers(request):
    with locked_queue() as queue:
        singers = queue.show_singers()
    return Response({'singers': singers}, status=status.HTTP_200_OK)


@api_view(["GET"])
def spotlight(request):
    """
    Who's on stage and who's getting ready, for the screen next to the stage
    """
    with locked_queue() as queue:
        current = queue.current_singer() if queue else None
        up_next = queue.up_next(config.UP_NEXT_COUNT)

    return Response({'currentSinger': current, 'upNext': up_next}, status=status.HTTP_200_OK)


@api_view(["GET"])
def updates(request):
    """
    Latest rotation order for polling clients. Pass ?since=<version> to get a 204 while that is still the
    latest version. Any other version gets the snapshot: the counter starts over when the cache is cleared.
    """
    snapshot = latest_snapshot()
    since = request.query_params.get('since')

    if since is not None:
        try:
            since = int(since)
        except ValueError:
            return _error("'since' must be a number.", status.HTTP_400_BAD_REQUEST)

        if snapshot['version'] == since:
            return Response(status=status.HTTP_204_NO_CONTENT)

    return Response(snapshot, status=status.HTTP_200_OK)


@api_view(["POST"])
@signup_required
def add_singer(request):
    return _name_operation(request, 'add_singer', NewSingerNameSerializer)


@api_view(["POST"])
@signup_required
def add_priority_singer(request):
    return _name_operation(request, 'add_priority_singer', NewSingerNameSerializer)


@api_view(["POST"])
def remove_singer(request):
    return _name_operation(request, 'remove_singer')


@api_view(["POST"])
def bump_singer(request):
    return _name_operation(request, 'bump_singer')


@api_view(["GET"])
def signup_disabled(request):
    return Response({'result': flag_enabled('SIGNUP_CLOSED')}, status=status.HTTP_200_OK)


@api_view(["POST"])
def enable_signup(request):
    disable_flag('SIGNUP_CLOSED')
    logger.info("Signup opened")
    return Response({'result': flag_enabled('SIGNUP_CLOSED')}, status=status.HTTP_200_OK)


@api_view(["POST"])
def disable_signup(request):
    enable_flag('SIGNUP_CLOSED')
    logger.info("Signup closed")
    return Response({'result': flag_enabled('SIGNUP_CLOSED')}, status=status.HTTP_200_OK)
