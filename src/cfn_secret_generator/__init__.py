"""
Custom::* Secret Generator for CloudFormation

Provides a Lambda-backed custom resource that creates secret material on demand

Supports the following ResourceTypes:

* Custom::RSAKey: Generates a 2048 bit RSA keypair. The PEM encoded private key is stored as an SSM SecureString
Parameter named after the `Name` property. Both keys are returned in the response data.

* Custom::KeyPair: Imports the `PublicKey` property as an EC2 KeyPair named after the `Name` property.

* Custom::Password: Generates a random password of `Length` characters drawn from `Alphabet` and stores it as an SSM
SecureString Parameter named after the `Name` property.

"""
