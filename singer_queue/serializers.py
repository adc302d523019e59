from constance import config
from rest_framework import serializers

from karaoke.utils import sanitize_name


class SingerNameSerializer(serializers.Serializer):
    name = serializers.CharField(trim_whitespace=True, allow_blank=True, required=False)

    def validate_name(self, value):
        name = sanitize_name(value)
        if not name:
            raise serializers.ValidationError("Name is required.")
        return name

    def validate(self, attrs):
        if 'name' not in attrs:
            raise serializers.ValidationError({'name': "Name is required."})
        return attrs

    @property
    def first_error(self):
        for messages in self.errors.values():
            return str(messages[0])


class NewSingerNameSerializer(SingerNameSerializer):
    """
    Name of a singer joining the lineup. Only new names are held to the length limit, so lowering it mid-evening
    doesn't lock out singers who are already queued.
    """
    def validate_name(self, value):
        name = super().validate_name(value)
        if len(name) > config.MAX_NAME_LENGTH:
            raise serializers.ValidationError(f"Name can't be longer than {config.MAX_NAME_LENGTH} characters.")
        return name
