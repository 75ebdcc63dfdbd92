"""
Reads the resource properties of a request into a ValidatedContext
"""
import logging
from typing import Any, Mapping, Optional

from .errors import ValidationFault
from .models import DEFAULT_ALPHABET, DEFAULT_NAME, DEFAULT_PASSWORD_LENGTH, ValidatedContext

LOG = logging.getLogger(__name__)


def validate_properties(properties: Optional[Mapping[str, Any]]) -> ValidatedContext:
    """
    Extracts and type-checks the resource properties, applying defaults.

    Never raises. A missing `Name` is recorded on the context as a ValidationFault and replaced with "Unknown" so
    the physical resource id can still be built. Generators return the recorded fault without doing any work.

    :param properties: ResourceProperties from the CloudFormation event
    :return ValidatedContext:
    """
    if not isinstance(properties, Mapping):
        properties = {}
    error = None

    name = properties.get("Name")
    if not isinstance(name, str):
        LOG.debug("Name property missing or not a string: %r", type(name))
        error = ValidationFault.missing("Name")
        name = DEFAULT_NAME

    public_key = properties.get("PublicKey")
    if not isinstance(public_key, str):
        public_key = None

    alphabet = properties.get("Alphabet")
    if not isinstance(alphabet, str):
        alphabet = DEFAULT_ALPHABET

    length = properties.get("Length")
    if not isinstance(length, int) or isinstance(length, bool):
        length = DEFAULT_PASSWORD_LENGTH

    return ValidatedContext(
        name=name,
        public_key=public_key,
        alphabet=alphabet,
        password_length=length,
        validation_error=error,
    )
