"""
Facebook Ads Testing Utilities

Raw Graph API payloads, ready-made models and a recording client for tests.
"""

from .mocks import (
    generate_mock_adset,
    generate_raw_adset,
    generate_raw_account,
    MockFacebookClient,
)

__all__ = [
    "generate_mock_adset",
    "generate_raw_adset",
    "generate_raw_account",
    "MockFacebookClient",
]
