"""
Handles Custom::RSAKey resources
"""
import logging
from typing import Tuple

from botocore.exceptions import BotoCoreError, ClientError
from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa

from .base import Generator
from .clients import ParameterStore
from .models import GenerationResult, ResponseSecret, ValidatedContext

LOG = logging.getLogger(__name__)

KEY_SIZE = 2048
PUBLIC_EXPONENT = 65537
DESCRIPTION = "RSA private key"


def generate_pem(keysize: int) -> Tuple[str, str]:
    """
    Generates an RSA keypair and checks its consistency before handing it out

    :param keysize: Modulus size in bits
    :return: PKCS#1 PEM private key, OpenSSH authorized_keys public key
    """
    key = rsa.generate_private_key(public_exponent=PUBLIC_EXPONENT, key_size=keysize)
    pem = key.private_bytes(encoding=serialization.Encoding.PEM,
                            format=serialization.PrivateFormat.TraditionalOpenSSL,
                            encryption_algorithm=serialization.NoEncryption())
    # Loading runs the OpenSSL RSA key check and raises ValueError on a malformed key
    loaded = serialization.load_pem_private_key(pem, password=None)
    if loaded.key_size != keysize:
        raise ValueError(f'Generated RSA key is {loaded.key_size} bits, expected {keysize}')
    pub = key.public_key().public_bytes(serialization.Encoding.OpenSSH,
                                        serialization.PublicFormat.OpenSSH)
    private = pem.decode('utf-8')
    public = pub.decode('utf-8') + '\n'
    return private, public


class RSAKeyGenerator(Generator):
    resource_type = "Custom::RSAKey"
    short_name = "RSAKey"

    def __init__(self, parameter_store: ParameterStore):
        self.parameter_store = parameter_store

    def generate(self, context: ValidatedContext) -> GenerationResult:
        if context.validation_error is not None:
            return GenerationResult(error=context.validation_error)

        LOG.info('[RSAKey] Generating %s bit RSA key for %s', KEY_SIZE, context.name)
        try:
            private_key, public_key = generate_pem(KEY_SIZE)
        except (ValueError, UnsupportedAlgorithm, OSError) as e:
            LOG.error('[RSAKey] Key generation failed: %s', e)
            return GenerationResult(error=e)

        response = ResponseSecret(key_length=KEY_SIZE, private_key=private_key, public_key=public_key)
        LOG.info('[RSAKey] Saving private key as SSM Parameter %s', context.name)
        try:
            self.parameter_store.put_secret(context.name, private_key, DESCRIPTION, overwrite=False)
        except (ClientError, BotoCoreError) as e:
            LOG.error('[RSAKey] Failed to save SSM Parameter %s: %s', context.name, e)
            return GenerationResult(response=response, error=e)
        return GenerationResult(response=response)
