# sts_operations.py
# Builds sessions by assuming a delegated role in a target region
import logging
import traceback
from typing import Optional

import boto3

from config import ASSUME_ROLE_NAME, DEFAULT_REGION, SESSION_NAME

def resolve_region(session=None, region: Optional[str] = None) -> str:
    if region:
        return region
    if session is not None and session.region_name:
        return session.region_name
    return DEFAULT_REGION

def role_arn_for(account_id, role_name: str = ASSUME_ROLE_NAME) -> str:
    account_id = str(account_id)
    if not account_id.isdigit() or len(account_id) != 12:
        raise ValueError(f"Invalid account ID: {account_id}")
    return f"arn:aws:iam::{account_id}:role/{role_name}"

def assume_role(role_arn: str, region: Optional[str] = None, session_name: str = SESSION_NAME,
                base_session=None) -> boto3.Session:
    """Assume ``role_arn`` and return a session holding its temporary credentials.

    ``base_session`` supplies the credentials used to call STS; when omitted
    the default credential chain is used. The returned session is pinned to
    ``region``, falling back to the base session's region and then to
    ``DEFAULT_REGION``.
    """
    if base_session is None:
        base_session = boto3.Session()
    region = resolve_region(base_session, region)

    sts_client = base_session.client('sts', region_name=region)
    try:
        logging.info(f"Attempting to assume role: {role_arn}")
        assumed_role_object = sts_client.assume_role(
            RoleArn=role_arn,
            RoleSessionName=session_name
        )
    except Exception as e:
        logging.error(f"Error assuming role {role_arn}: {str(e)}")
        logging.debug(traceback.format_exc())
        raise

    credentials = assumed_role_object['Credentials']
    logging.info(f"Successfully assumed role {role_arn} in region {region}")

    return boto3.Session(
        aws_access_key_id=credentials['AccessKeyId'],
        aws_secret_access_key=credentials['SecretAccessKey'],
        aws_session_token=credentials['SessionToken'],
        region_name=region,
    )
