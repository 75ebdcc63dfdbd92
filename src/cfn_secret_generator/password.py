"""
Handles Custom::Password resources
"""
import logging
import secrets

from botocore.exceptions import BotoCoreError, ClientError

from .base import Generator
from .clients import ParameterStore
from .errors import ValidationFault
from .models import GenerationResult, ResponseSecret, ValidatedContext

LOG = logging.getLogger(__name__)

DESCRIPTION = "Password"


def generate_password(length: int, alphabet: str) -> str:
    """
    Maps `length` random bytes onto `alphabet` by modulo.

    The distribution is slightly biased whenever len(alphabet) does not divide 256.
    """
    size = len(alphabet)
    return ''.join(alphabet[b % size] for b in secrets.token_bytes(length))


class PasswordGenerator(Generator):
    resource_type = "Custom::Password"
    short_name = "Password"

    def __init__(self, parameter_store: ParameterStore):
        self.parameter_store = parameter_store

    def generate(self, context: ValidatedContext) -> GenerationResult:
        if context.validation_error is not None:
            return GenerationResult(error=context.validation_error)
        if not context.alphabet:
            return GenerationResult(error=ValidationFault("property 'Alphabet' must not be empty"))
        if context.password_length < 0:
            return GenerationResult(error=ValidationFault("property 'Length' must not be negative"))

        LOG.info('[Password] Generating %s character password for %s', context.password_length, context.name)
        try:
            password = generate_password(context.password_length, context.alphabet)
        except OSError as e:
            LOG.error('[Password] Could not read random bytes: %s', e)
            return GenerationResult(error=e)

        response = ResponseSecret(password=password)
        LOG.info('[Password] Saving password as SSM Parameter %s', context.name)
        try:
            self.parameter_store.put_secret(context.name, password, DESCRIPTION, overwrite=False)
        except (ClientError, BotoCoreError) as e:
            LOG.error('[Password] Failed to save SSM Parameter %s: %s', context.name, e)
            return GenerationResult(response=response, error=e)
        return GenerationResult(response=response)
