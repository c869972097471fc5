import boto3
import pytest


@pytest.fixture
def org_client():
    """A real Organizations client, only ever used behind a Stubber."""
    return boto3.client(
        'organizations',
        region_name='us-east-1',
        aws_access_key_id='testing',
        aws_secret_access_key='testing',
    )


@pytest.fixture
def sts_client():
    return boto3.client(
        'sts',
        region_name='eu-west-1',
        aws_access_key_id='testing',
        aws_secret_access_key='testing',
    )
