"""
Common interface for the Custom::* resource generators
"""
from abc import ABC, abstractmethod

from .models import GenerationResult, ValidatedContext


class Generator(ABC):
    """
    Creates the secret for one CloudFormation resource type

    * `resource_type` - The full ResourceType handled, e.g. ``Custom::RSAKey``
    * `short_name` - Prefix of the PhysicalResourceId, e.g. ``RSAKey``
    """
    resource_type: str
    short_name: str

    @abstractmethod
    def generate(self, context: ValidatedContext) -> GenerationResult:
        """
        Returns the recorded validation fault as-is, without side effects, when the context carries one.

        :param context: Validated resource properties
        :return GenerationResult: Generated secret and/or error
        """

    def physical_resource_id(self, name: str) -> str:
        return f'{self.short_name}:{name}'
