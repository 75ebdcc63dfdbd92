import pytest
from botocore.exceptions import ClientError

FAIL_TO_CREATE = "FAIL_TO_CREATE"
FAIL_TO_IMPORT = "FAIL_TO_IMPORT"


def client_error(code, operation):
    return ClientError({"Error": {"Code": code, "Message": "error message"}}, operation)


STORE_ERROR = client_error("ParameterAlreadyExists", "PutParameter")
IMPORT_ERROR = client_error("InvalidKeyPair.Duplicate", "ImportKeyPair")


class FakeSSM:
    """Records put_parameter calls and fails for the FAIL_TO_CREATE name."""

    def __init__(self):
        self.calls = []

    def put_parameter(self, **kwargs):
        self.calls.append(kwargs)
        if kwargs["Name"] == FAIL_TO_CREATE:
            raise STORE_ERROR
        return {"Version": 1, "Tier": "Standard"}


class FakeEC2:
    """Records import_key_pair calls and fails for the FAIL_TO_IMPORT name."""

    def __init__(self):
        self.calls = []

    def import_key_pair(self, **kwargs):
        self.calls.append(kwargs)
        if kwargs["KeyName"] == FAIL_TO_IMPORT:
            raise IMPORT_ERROR
        return {"KeyFingerprint": "1f:51:ae:28", "KeyName": kwargs["KeyName"], "KeyPairId": "key-0123456789"}


@pytest.fixture
def ssm():
    return FakeSSM()


@pytest.fixture
def ec2():
    return FakeEC2()
