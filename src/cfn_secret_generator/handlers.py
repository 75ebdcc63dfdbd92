"""
Main entry-points for the Custom::* secret generator

* `handler` - Lambda handler for CloudFormation custom resource events
* `SecretGenerator` - Validates a request and dispatches it to the generator for its ResourceType

"""
import logging
from typing import Any, Dict, Mapping, Optional

import boto3
import cfnresponse

from .base import Generator
from .clients import KeyPairImporter, ParameterStore
from .config import Config
from .errors import UnknownResourceTypeError
from .keypair import KeyPairGenerator
from .models import DEFAULT_NAME, RESPONSE_KEY, ProcessResult
from .password import PasswordGenerator
from .rsakey import RSAKeyGenerator
from .validate import validate_properties

# Use this logger to forward log messages to CloudWatch Logs.
# All loggers in this package inherit from `cfn_secret_generator`
LOG = logging.getLogger("cfn_secret_generator")

UNKNOWN_PHYSICAL_ID = f'{DEFAULT_NAME}:{DEFAULT_NAME}'


class SecretGenerator:
    """
    Dispatches resource requests to one generator per ResourceType

    :param ec2_client: boto3 ``ec2`` client used to import KeyPairs
    :param ssm_client: boto3 ``ssm`` client used to store secrets
    """

    def __init__(self, ec2_client, ssm_client):
        parameter_store = ParameterStore(ssm_client)
        self.generators: Dict[str, Generator] = {
            g.resource_type: g for g in (
                RSAKeyGenerator(parameter_store),
                KeyPairGenerator(KeyPairImporter(ec2_client)),
                PasswordGenerator(parameter_store),
            )
        }

    def process(self, resource_type: str, properties: Optional[Mapping[str, Any]]) -> ProcessResult:
        """
        Validates the resource properties and runs the generator for `resource_type`

        Errors are returned rather than raised. The PhysicalResourceId is always set, falling back to
        ``Unknown:Unknown`` for an unrecognized ResourceType.

        :param resource_type: CloudFormation ResourceType, e.g. ``Custom::RSAKey``
        :param properties: ResourceProperties of the event
        :return ProcessResult: PhysicalResourceId, response data, error
        """
        context = validate_properties(properties)
        generator = self.generators.get(resource_type)
        if generator is None:
            LOG.error('ResourceType %s is not supported', resource_type)
            return ProcessResult(UNKNOWN_PHYSICAL_ID, {RESPONSE_KEY: None}, UnknownResourceTypeError())

        response, error = generator.generate(context)
        data = {RESPONSE_KEY: response.to_dict() if response is not None else None}
        return ProcessResult(generator.physical_resource_id(context.name), data, error)


_secret_generator: Optional[SecretGenerator] = None


def get_secret_generator() -> SecretGenerator:
    """
    Builds the boto3 clients on first use and reuses them on warm invocations
    """
    global _secret_generator
    if _secret_generator is None:
        session = boto3.session.Session()
        _secret_generator = SecretGenerator(session.client('ec2'), session.client('ssm'))
    return _secret_generator


def handler(event, context):
    """
    The main Lambda handler

    Create and Update requests generate the secret for the event's ResourceType. Delete requests leave the stored
    secrets in place and report success for the existing PhysicalResourceId.
    """
    config = Config.from_env()
    LOG.setLevel(config.log_level)
    request_type = event.get('RequestType')
    LOG.info('[%s] Received %s request for %s', request_type, event.get('ResourceType'),
             event.get('LogicalResourceId'))

    status = cfnresponse.SUCCESS
    physical_resource_id = event.get('PhysicalResourceId')
    data = {}
    reason = None
    try:
        if request_type == 'Delete':
            LOG.info('[DELETE] Retaining secret for %s', physical_resource_id)
        else:
            physical_resource_id, data, error = get_secret_generator().process(
                event.get('ResourceType'), event.get('ResourceProperties'))
            if error is not None:
                LOG.error('[%s] %s failed: %s', request_type, physical_resource_id, error)
                status = cfnresponse.FAILED
                reason = str(error)
            else:
                LOG.info('[%s] Completed %s', request_type, physical_resource_id)
    except Exception as e:
        LOG.error('Exception: %s', e, exc_info=True)
        status = cfnresponse.FAILED
        reason = str(e)
    finally:
        cfnresponse.send(event, context, status, data, physical_resource_id, noEcho=config.no_echo,
                         reason=reason)
