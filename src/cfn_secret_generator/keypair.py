"""
Handles Custom::KeyPair resources
"""
import logging

from botocore.exceptions import BotoCoreError, ClientError

from .base import Generator
from .clients import KeyPairImporter
from .errors import ValidationFault
from .models import GenerationResult, ValidatedContext

LOG = logging.getLogger(__name__)


class KeyPairGenerator(Generator):
    """
    Imports the `PublicKey` property as an EC2 KeyPair. Produces no response data.
    """
    resource_type = "Custom::KeyPair"
    short_name = "KeyPair"

    def __init__(self, importer: KeyPairImporter):
        self.importer = importer

    def generate(self, context: ValidatedContext) -> GenerationResult:
        if context.validation_error is not None:
            return GenerationResult(error=context.validation_error)
        if context.public_key is None:
            return GenerationResult(error=ValidationFault.missing("PublicKey"))

        LOG.info('[KeyPair] Importing public key as EC2 KeyPair %s', context.name)
        try:
            self.importer.import_public_key(context.name, context.public_key.encode('utf-8'))
        except (ClientError, BotoCoreError) as e:
            LOG.error('[KeyPair] Failed to import KeyPair %s: %s', context.name, e)
            return GenerationResult(error=e)
        return GenerationResult()
