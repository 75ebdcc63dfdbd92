"""
Thin wrappers around the boto3 clients the generators write to
"""
import logging

LOG = logging.getLogger(__name__)


class ParameterStore:
    """
    Stores secrets as SSM SecureString Parameters

    :param ssm_client: boto3 ``ssm`` client
    """

    def __init__(self, ssm_client):
        self._ssm = ssm_client

    def put_secret(self, name: str, value: str, description: str, overwrite: bool = False) -> None:
        """
        Raises botocore ClientError (ParameterAlreadyExists when `overwrite` is False and the name is taken)
        """
        LOG.debug('Saving SSM Parameter %s (overwrite=%s)', name, overwrite)
        self._ssm.put_parameter(
            Name=name,
            Description=description,
            Value=value,
            Type='SecureString',
            Overwrite=overwrite
        )
        LOG.debug('SSM Parameter %s saved', name)


class KeyPairImporter:
    """
    Registers public keys as EC2 KeyPairs

    :param ec2_client: boto3 ``ec2`` client
    """

    def __init__(self, ec2_client):
        self._ec2 = ec2_client

    def import_public_key(self, name: str, public_key_material: bytes) -> None:
        LOG.debug('Importing EC2 KeyPair %s', name)
        response = self._ec2.import_key_pair(KeyName=name, PublicKeyMaterial=public_key_material)
        LOG.debug('Imported KeyPair %s with fingerprint %s', name, response.get('KeyFingerprint'))
