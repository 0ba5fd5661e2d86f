import logging
import os
import re
from dataclasses import dataclass
from typing import Dict, List, Mapping, Optional, Union

from dotenv import load_dotenv

logger = logging.getLogger("config")


ADSBOT_SETUP_SCHEMA = [
    {
        "bs_name": "DISCORD_TOKEN",
        "bs_type": "string_long",
        "bs_default": "",
        "bs_group": "Discord",
        "bs_description": "Bot token from Discord developer portal.",
    },
    {
        "bs_name": "DISCORD_GUILD_ID",
        "bs_type": "string_short",
        "bs_default": "",
        "bs_group": "Discord",
        "bs_description": "Optional guild to sync slash commands to, global sync takes up to an hour to show up.",
    },
    {
        "bs_name": "META_ACCESS_TOKEN",
        "bs_type": "string_long",
        "bs_default": "",
        "bs_group": "Meta",
        "bs_description": "Marketing API access token with ads_read and ads_management.",
    },
    {
        "bs_name": "META_AD_ACCOUNT_ID",
        "bs_type": "string_short",
        "bs_default": "",
        "bs_group": "Meta",
        "bs_description": "Ad account, act_123... or just the digits.",
    },
    {
        "bs_name": "META_APP_ID",
        "bs_type": "string_short",
        "bs_default": "",
        "bs_group": "Meta",
        "bs_description": "App id, only reported by /ads api-test.",
    },
    {
        "bs_name": "META_APP_SECRET",
        "bs_type": "string_long",
        "bs_default": "",
        "bs_group": "Meta",
        "bs_description": "App secret, only reported by /ads api-test.",
    },
    {
        "bs_name": "META_API_VERSION",
        "bs_type": "string_short",
        "bs_default": "v19.0",
        "bs_group": "Meta",
        "bs_description": "Graph API version in request URLs.",
    },
    {
        "bs_name": "META_CURRENCY",
        "bs_type": "string_short",
        "bs_default": "JPY",
        "bs_group": "Meta",
        "bs_description": "Currency of the ad account, decides how budgets in minor units are read.",
    },
    {
        "bs_name": "META_TIMEOUT",
        "bs_type": "float",
        "bs_default": 30.0,
        "bs_group": "Meta",
        "bs_description": "HTTP transport timeout in seconds.",
    },
]


_TYPES = {"string_short": str, "string_long": str, "bool": bool, "int": int, "float": float}


def _coerce(key: str, bs_type: str, raw: str) -> Union[str, int, float, bool]:
    raw = raw.strip()
    if bs_type == "bool":
        if raw.lower() in ("1", "true", "yes", "on"):
            return True
        if raw.lower() in ("0", "false", "no", "off", ""):
            return False
        raise ValueError("Setup %s=%r is not a bool" % (key, raw))
    try:
        return _TYPES[bs_type](raw)
    except ValueError:
        raise ValueError("Setup %s=%r is not %s" % (key, raw, bs_type))


def setup_from_env(schema, environ: Optional[Mapping[str, str]] = None) -> Dict[str, Union[str, int, float, bool]]:
    """
    Returns setup dict for the bot to run with. If a value is not set in the environment,
    returns the default. Also validates the schema itself.
    """
    if environ is None:
        environ = os.environ
    result = dict()
    minimal_set = set(["bs_type", "bs_default", "bs_group", "bs_name"])
    full_set = minimal_set | set(["bs_description", "bs_order", "bs_placeholder", "bs_importance"])
    for d in schema:
        k = d["bs_name"]
        if not re.match(r'^[a-zA-Z][a-zA-Z0-9_]{1,39}$', k):
            raise ValueError("Bad key for setup %r" % k)
        if not set(d.keys()).issubset(full_set):
            raise ValueError("You have unrecognized keys in setup schema: %s" % (set(d.keys()) - full_set))
        if not set(d.keys()).issuperset(minimal_set):
            raise ValueError("You have missing keys in setup schema: %s" % (minimal_set - set(d.keys())))
        if d["bs_type"] not in _TYPES:
            raise ValueError("You have unrecognized type in setup schema: %s" % d["bs_type"])
        if not isinstance(d["bs_default"], _TYPES[d["bs_type"]]):
            raise ValueError("Default value %s for %s must be %s" % (d["bs_default"], k, d["bs_type"]))
        raw = environ.get(k)
        if raw is None or raw.strip() == "":
            result[k] = d["bs_default"]
        else:
            result[k] = _coerce(k, d["bs_type"], raw)
    return result


@dataclass(frozen=True)
class AdsBotConfig:
    discord_token: str
    discord_guild_id: str
    meta_access_token: str
    meta_ad_account_id: str
    meta_app_id: str
    meta_app_secret: str
    meta_api_version: str
    meta_currency: str
    meta_timeout: float

    @classmethod
    def from_setup(cls, setup: Mapping[str, Union[str, int, float, bool]]) -> "AdsBotConfig":
        return cls(
            discord_token=str(setup["DISCORD_TOKEN"]).strip(),
            discord_guild_id=str(setup["DISCORD_GUILD_ID"]).strip(),
            meta_access_token=str(setup["META_ACCESS_TOKEN"]).strip(),
            meta_ad_account_id=str(setup["META_AD_ACCOUNT_ID"]).strip(),
            meta_app_id=str(setup["META_APP_ID"]).strip(),
            meta_app_secret=str(setup["META_APP_SECRET"]).strip(),
            meta_api_version=str(setup["META_API_VERSION"]).strip(),
            meta_currency=str(setup["META_CURRENCY"]).strip().upper(),
            meta_timeout=float(setup["META_TIMEOUT"]),
        )

    @property
    def meta_settings_present(self) -> Dict[str, bool]:
        return {
            "META_APP_ID": bool(self.meta_app_id),
            "META_APP_SECRET": bool(self.meta_app_secret),
            "META_ACCESS_TOKEN": bool(self.meta_access_token),
            "META_AD_ACCOUNT_ID": bool(self.meta_ad_account_id),
        }

    @property
    def missing_meta_settings(self) -> List[str]:
        return [k for k, present in self.meta_settings_present.items() if not present]


def load_config(env_file: Optional[str] = None, environ: Optional[Mapping[str, str]] = None) -> AdsBotConfig:
    """
    Read .env (values already in the process environment win), mix with the
    schema defaults. Missing Meta settings are not an error, the bot runs on
    demo data then.
    """
    if environ is None:
        load_dotenv(env_file, override=False)
    config = AdsBotConfig.from_setup(setup_from_env(ADSBOT_SETUP_SCHEMA, environ))
    if config.missing_meta_settings:
        logger.info("Meta settings not configured: %s", ", ".join(config.missing_meta_settings))
    return config
