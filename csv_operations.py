# csv_operations.py
# Writes discovered accounts to CSV
import csv
import logging

from typing import List

from org_operations import Account

def save_accounts_to_csv(accounts: List[Account], filename: str) -> None:
    with open(filename, 'w', newline='', encoding='utf-8') as csvfile:
        fieldnames = ['Account ID', 'Environment', 'Tier', 'Domain']
        writer = csv.DictWriter(csvfile, fieldnames=fieldnames)

        writer.writeheader()
        for account in accounts:
            writer.writerow({
                'Account ID': account.id,
                'Environment': account.environment or '',
                'Tier': account.tier or '',
                'Domain': account.domain or ''
            })

    logging.info(f"Wrote {len(accounts)} accounts to {filename}")
