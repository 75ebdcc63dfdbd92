"""
Errors reported back to CloudFormation by the secret generator

Errors raised by AWS (botocore ``ClientError``) or by ``cryptography`` are passed through unwrapped.
"""

MISSING_PROPERTY = "missing required property '{}'"


class SecretGeneratorError(Exception):
    pass


class ValidationFault(SecretGeneratorError):
    """
    A resource property is missing or has the wrong type.

    Recorded while validating the request and returned instead of raised.
    """

    @classmethod
    def missing(cls, prop: str) -> "ValidationFault":
        return cls(MISSING_PROPERTY.format(prop))


class UnknownResourceTypeError(SecretGeneratorError):
    def __init__(self, message: str = "Unknown ResourceType"):
        super().__init__(message)
