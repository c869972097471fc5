# utils.py
from datetime import datetime

def get_csv_filename(default_prefix):
    return f"{default_prefix}_{datetime.now().strftime('%Y%m%d%H%M%S')}.csv"

def format_account(account):
    return (f"{account.id} - environment: {account.environment or '-'}, "
            f"tier: {account.tier or '-'}, domain: {account.domain or '-'}")
