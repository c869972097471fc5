"""Tests for the CSV export."""

import csv

from csv_operations import save_accounts_to_csv
from org_operations import Account


def test_save_accounts_to_csv(tmp_path):
    filename = tmp_path / 'accounts.csv'
    accounts = [
        Account(id='11111', environment='development', tier='development', domain='testing'),
        Account(id='22222'),
    ]

    save_accounts_to_csv(accounts, str(filename))

    with open(filename, newline='', encoding='utf-8') as csvfile:
        rows = list(csv.DictReader(csvfile))

    assert rows == [
        {'Account ID': '11111', 'Environment': 'development', 'Tier': 'development', 'Domain': 'testing'},
        {'Account ID': '22222', 'Environment': '', 'Tier': '', 'Domain': ''},
    ]


def test_save_no_accounts_writes_header_only(tmp_path):
    filename = tmp_path / 'empty.csv'

    save_accounts_to_csv([], str(filename))

    assert filename.read_text(encoding='utf-8').splitlines() == ['Account ID,Environment,Tier,Domain']
