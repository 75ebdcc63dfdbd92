"""
Data types passed between the validator, the generators and the dispatcher
"""
from dataclasses import dataclass, fields
from typing import Any, Dict, NamedTuple, Optional

DEFAULT_NAME = "Unknown"
DEFAULT_ALPHABET = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz!@#$%^&*()_+-[]?;,."
DEFAULT_PASSWORD_LENGTH = 30

RESPONSE_KEY = "Response"


@dataclass(frozen=True)
class ValidatedContext:
    name: str
    public_key: Optional[str] = None
    alphabet: str = DEFAULT_ALPHABET
    password_length: int = DEFAULT_PASSWORD_LENGTH
    validation_error: Optional[Exception] = None


@dataclass
class ResponseSecret:
    key_length: Optional[int] = None
    private_key: Optional[str] = None
    public_key: Optional[str] = None
    password: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """
        Serializes the secret for the CloudFormation response data

        Fields that were not generated are left out rather than set to ``None``.

        :return Mapping: Populated fields keyed by their snake_case name
        """
        return {f.name: getattr(self, f.name) for f in fields(self) if getattr(self, f.name) is not None}


class GenerationResult(NamedTuple):
    """
    Outcome of a generator. A generated secret may come back together with the error raised while storing it.
    """
    response: Optional[ResponseSecret] = None
    error: Optional[Exception] = None


class ProcessResult(NamedTuple):
    physical_resource_id: str
    data: Dict[str, Any]
    error: Optional[Exception] = None
