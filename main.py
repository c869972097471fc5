# -*- coding: utf-8 -*-
# Entry point: discovers the organization's accounts, prints them and optionally exports a CSV
import argparse
import logging
import sys

import boto3

from config import SSO_PROFILE, SESSION_NAME, MAX_CONCURRENT_ACCOUNTS, LOG_FILE, LOG_LEVEL
from csv_operations import save_accounts_to_csv
from logging_config import setup_logging
from org_operations import OrgError, discover_accounts
from sts_operations import assume_role
from utils import get_csv_filename, format_account

def parse_args(argv=None):
    parser = argparse.ArgumentParser(description='Discover AWS Organization accounts and their classification tags')
    parser.add_argument('--profile', default=SSO_PROFILE, help='AWS profile name')
    parser.add_argument('--region', default=None, help='AWS region for the Organizations and STS clients')
    parser.add_argument('--role-arn', default=None, help='Role to assume before listing accounts')
    parser.add_argument('--session-name', default=SESSION_NAME, help='Role session name used with --role-arn')
    parser.add_argument('--max-workers', type=int, default=MAX_CONCURRENT_ACCOUNTS,
                        help='Maximum number of concurrent tag lookups')
    parser.add_argument('--csv', nargs='?', const='', default=None, metavar='FILE',
                        help='Export the accounts to CSV (timestamped file name when FILE is omitted)')
    parser.add_argument('--log-level', default=LOG_LEVEL, help='Logging level')
    parser.add_argument('--no-log-file', action='store_true', help=f'Do not write {LOG_FILE}')
    return parser.parse_args(argv)

def main(argv=None):
    args = parse_args(argv)
    setup_logging(level=args.log_level.upper(), log_file=None if args.no_log_file else LOG_FILE)

    session = boto3.Session(profile_name=args.profile)
    if args.role_arn:
        session = assume_role(args.role_arn, region=args.region, session_name=args.session_name,
                              base_session=session)

    try:
        accounts = discover_accounts(session, max_workers=args.max_workers, region=args.region)
    except OrgError as e:
        logging.error(f"Account discovery failed: {e}")
        if e.__cause__ is not None:
            logging.error(f"Caused by: {e.__cause__!r}")
        return 1

    print(f"Discovered {len(accounts)} accounts:")
    for account in accounts:
        print(f"- {format_account(account)}")

    if args.csv is not None:
        filename = args.csv or get_csv_filename("aws_accounts")
        save_accounts_to_csv(accounts, filename)
        print(f"Accounts saved to {filename}")

    return 0

if __name__ == "__main__":
    sys.exit(main())
