"""
Serializers shared between the relay apps.
"""

from rest_framework.serializers import *  # pylint: disable=wildcard-import; this module extends DRF serializers


class CoordinatorValidationException(Exception):
    """
    Carries a DRF ValidationError out of a serializer with all of its original information intact.

    Webhook views catch this and answer with a 400 of their own choosing.
    """

    innerException: Exception = None

    def __init__(self, inner: Exception) -> None:
        """
        Initialize a new CoordinatorValidationException without losing data from the original Exception

        Args:
            inner: Exception, the exception we intend to wrap to ensure delivery.
        """
        super().__init__(*inner.args)
        self.innerException = inner

    @property
    def detail(self):
        return getattr(self.innerException, 'detail', None)


class CoordinatorSerializer(Serializer):
    """
    A model-less serializer used purely for validating inbound payloads.

    - Suppress lint messages about lack of create() or update().
    - Catch ValidationErrors and pass back CoordinatorValidationException
    """

    # create() and update() are optional. See:
    # https://www.django-rest-framework.org/api-guide/serializers/#saving-instances

    type_error = TypeError(
        'CoordinatorSerializer is for model-less validation only.'
    )

    def create(self, validated_data):
        raise self.type_error

    def update(self, instance, validated_data):
        raise self.type_error

    def is_valid(self, *, raise_exception=False):
        try:
            return super().is_valid(raise_exception=raise_exception)
        except ValidationError as inner:
            raise CoordinatorValidationException(inner) from inner
