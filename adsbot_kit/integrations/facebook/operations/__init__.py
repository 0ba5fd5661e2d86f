"""
Facebook Ads Operations Package

Calls against the Graph API, one module per entity.
"""

from .accounts import (
    fetch_account_info,
    account_info_fields,
)
from .adsets import (
    fetch_adsets,
    update_adset_status,
    adset_list_fields,
)

__all__ = [
    # Accounts
    "fetch_account_info",
    "account_info_fields",
    # Ad Sets
    "fetch_adsets",
    "update_adset_status",
    "adset_list_fields",
]
