# org_operations.py
# Discovers the accounts of an AWS Organization and reads their classification tags
import logging
import concurrent.futures
from dataclasses import dataclass, asdict
from typing import Dict, Iterable, Iterator, List, Optional

from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from config import MAX_CONCURRENT_ACCOUNTS, MAX_RETRIES, RETRY_MODE, TAG_FIELDS
from sts_operations import resolve_region


class OrgError(Exception):
    """Base class for everything that can abort account discovery."""


class ListAccountsError(OrgError):
    def __init__(self, cause):
        super().__init__(f"failed to list accounts: {cause}")
        self.cause = cause


class ListTagsError(OrgError):
    def __init__(self, account_id, cause):
        super().__init__(f"failed to list tags for account {account_id}: {cause}")
        self.account_id = account_id
        self.cause = cause


class BadAccountsError(OrgError):
    def __init__(self):
        super().__init__("failed to extract accounts")


class BadAccountIdError(OrgError):
    def __init__(self):
        super().__init__("failed to extract account ID")


class BadTagsError(OrgError):
    def __init__(self, account_id):
        super().__init__(f"failed to extract tags for account {account_id}")
        self.account_id = account_id


class AccountTaskError(OrgError):
    def __init__(self, account_id, cause):
        super().__init__(f"tag lookup task for account {account_id} failed: {cause}")
        self.account_id = account_id
        self.cause = cause


@dataclass(frozen=True)
class Account:
    """An AWS account of the organization.

    ``environment`` usually maps to the account name but is read from a tag
    controlled in the management account. ``tier`` follows the tiering
    convention and ``domain`` is the short domain ID the account belongs to.
    """
    id: str
    environment: Optional[str] = None
    tier: Optional[str] = None
    domain: Optional[str] = None

    def __post_init__(self):
        if not self.id:
            raise ValueError("Account id must not be empty")

    def to_dict(self) -> Dict[str, Optional[str]]:
        return asdict(self)


def create_org_client(session, region: Optional[str] = None):
    retry_config = Config(retries={'max_attempts': MAX_RETRIES, 'mode': RETRY_MODE})
    return session.client(
        'organizations',
        region_name=resolve_region(session, region),
        config=retry_config
    )


def extract_tags(account_id: str, tags: Iterable[Dict]) -> Account:
    fields = dict.fromkeys(TAG_FIELDS.values())
    for tag in tags:
        field = TAG_FIELDS.get(tag.get('Key'))
        if field is None:
            continue
        fields[field] = tag.get('Value')
    return Account(id=account_id, **fields)


def read_account(org_client, account_id: str) -> Account:
    """Fetch the tags of one account and build its Account record.

    To use this the caller needs ``organizations:ListTagsForResource`` on the
    account.
    """
    try:
        response = org_client.list_tags_for_resource(ResourceId=account_id)
    except (ClientError, BotoCoreError) as e:
        raise ListTagsError(account_id, e) from e

    tags = response.get('Tags')
    if tags is None:
        raise BadTagsError(account_id)

    account = extract_tags(account_id, tags)
    logging.debug(f"Read account {account_id}: {account}")
    return account


def list_account_ids(org_client) -> Iterator[str]:
    """Yield account IDs page by page from the list_accounts paginator."""
    paginator = org_client.get_paginator('list_accounts')
    try:
        for page_number, page in enumerate(paginator.paginate(), 1):
            accounts = page.get('Accounts')
            if accounts is None:
                raise BadAccountsError()
            logging.debug(f"Fetched list_accounts page {page_number} with {len(accounts)} accounts")
            for account in accounts:
                account_id = account.get('Id')
                if not account_id:
                    raise BadAccountIdError()
                yield account_id
    except (ClientError, BotoCoreError) as e:
        raise ListAccountsError(e) from e


def discover_accounts_with_client(org_client, max_workers: Optional[int] = MAX_CONCURRENT_ACCOUNTS) -> List[Account]:
    futures = {}
    accounts = []

    with concurrent.futures.ThreadPoolExecutor(max_workers=max_workers) as executor:
        try:
            for account_id in list_account_ids(org_client):
                futures[executor.submit(read_account, org_client, account_id)] = account_id
        except OrgError as e:
            logging.error(f"Account listing failed after {len(futures)} accounts: {e}")
            executor.shutdown(wait=True, cancel_futures=True)
            raise

        logging.info(f"Discovered {len(futures)} accounts, waiting for tag lookups")

        for future in concurrent.futures.as_completed(futures):
            account_id = futures[future]
            try:
                accounts.append(future.result())
            except OrgError as e:
                logging.error(f"Tag lookup failed for account {account_id}: {e}")
                executor.shutdown(wait=True, cancel_futures=True)
                raise
            except Exception as e:
                logging.error(f"Tag lookup task crashed for account {account_id}: {e}")
                executor.shutdown(wait=True, cancel_futures=True)
                raise AccountTaskError(account_id, e) from e

    accounts.sort(key=lambda account: account.id)
    logging.info(f"Read tags for {len(accounts)} accounts")
    return accounts


def discover_accounts(session, max_workers: Optional[int] = MAX_CONCURRENT_ACCOUNTS,
                      region: Optional[str] = None) -> List[Account]:
    """Discover all accounts in the organization along with their classification tags.

    The credentials behind ``session`` must allow::

        {
          "Effect": "Allow",
          "Action": [
            "organizations:ListAccounts",
            "organizations:ListTagsForResource"
          ],
          "Resource": ["*"]
        }

    Tag lookups run concurrently on one shared client. The first failure is
    raised as an ``OrgError`` subclass; lookups not yet started are cancelled
    and those already running are allowed to finish. Accounts are returned
    sorted by ID.
    """
    org_client = create_org_client(session, region)
    return discover_accounts_with_client(org_client, max_workers=max_workers)
