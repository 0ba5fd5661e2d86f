from __future__ import annotations
import math
from datetime import datetime
from enum import Enum
from typing import Any, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
class AdSetStatus(str, Enum):
    ACTIVE = "ACTIVE"
    PAUSED = "PAUSED"
    @property
    def label(self) -> str:
        return "Activated" if self is AdSetStatus.ACTIVE else "Paused"
    @classmethod
    def from_platform(cls, raw: Any) -> "AdSetStatus":
        # ARCHIVED, DELETED, IN_PROCESS, WITH_ISSUES: none of them deliver
        if isinstance(raw, AdSetStatus):
            return raw
        if str(raw or "").strip().upper() == "ACTIVE":
            return cls.ACTIVE
        return cls.PAUSED
class AccountStatus(int, Enum):
    ACTIVE = 1
    DISABLED = 2
    UNSETTLED = 3
    PENDING_RISK_REVIEW = 7
    PENDING_SETTLEMENT = 8
    IN_GRACE_PERIOD = 9
    PENDING_CLOSURE = 100
    CLOSED = 101
    TEMPORARILY_UNAVAILABLE = 201
def _number_or_none(v: Any) -> Optional[float]:
    if v is None or v == "" or isinstance(v, bool):
        return None
    try:
        f = float(v)
    except (TypeError, ValueError):
        return None
    if math.isnan(f) or math.isinf(f) or f < 0:
        return None
    return f
def _timestamp_or_none(v: Any) -> Optional[datetime]:
    if v is None or isinstance(v, datetime):
        return v
    s = str(v).strip()
    for parse in (lambda x: datetime.strptime(x, "%Y-%m-%dT%H:%M:%S%z"), datetime.fromisoformat):
        try:
            return parse(s)
        except ValueError:
            continue
    return None
class Insights(BaseModel):
    spend: Optional[float] = None
    impressions: Optional[int] = None
    clicks: Optional[int] = None
    reach: Optional[int] = None
    ctr: Optional[float] = None
    date_start: Optional[str] = None
    date_stop: Optional[str] = None
    model_config = ConfigDict(frozen=True, extra="ignore")
    @field_validator("impressions", "clicks", "reach", mode="before")
    @classmethod
    def coerce_count(cls, v):
        f = _number_or_none(v)
        return None if f is None else int(f)
    @field_validator("spend", "ctr", mode="before")
    @classmethod
    def coerce_amount(cls, v):
        return _number_or_none(v)
class AdSet(BaseModel):
    """
    One ad set as the bot sees it. Budgets are in the same unit as insight
    spend (major currency units), see utils.normalize_adset().
    """
    id: str = Field(..., min_length=1)
    name: str = ""
    status: AdSetStatus = AdSetStatus.PAUSED
    daily_budget: Optional[float] = None
    lifetime_budget: Optional[float] = None
    insights: Optional[Insights] = None
    spend_today: Optional[float] = None
    created_time: Optional[datetime] = None
    updated_time: Optional[datetime] = None
    model_config = ConfigDict(frozen=True, extra="ignore")
    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, v):
        return "" if v is None else str(v).strip()
    @field_validator("name", mode="before")
    @classmethod
    def coerce_name(cls, v):
        return "" if v is None else str(v)
    @field_validator("status", mode="before")
    @classmethod
    def coerce_status(cls, v):
        return AdSetStatus.from_platform(v)
    @field_validator("daily_budget", "lifetime_budget", "spend_today", mode="before")
    @classmethod
    def coerce_money(cls, v):
        return _number_or_none(v)
    @field_validator("created_time", "updated_time", mode="before")
    @classmethod
    def coerce_time(cls, v):
        return _timestamp_or_none(v)
    @property
    def is_active(self) -> bool:
        return self.status is AdSetStatus.ACTIVE
    @property
    def spend(self) -> float:
        if self.insights is not None and self.insights.spend is not None:
            return self.insights.spend
        if self.spend_today is not None:
            return self.spend_today
        return 0.0
    @property
    def budget(self) -> float:
        return self.daily_budget if self.daily_budget is not None else 0.0
    @property
    def impressions(self) -> int:
        if self.insights is not None and self.insights.impressions is not None:
            return self.insights.impressions
        return 0
    @property
    def clicks(self) -> int:
        if self.insights is not None and self.insights.clicks is not None:
            return self.insights.clicks
        return 0
    @property
    def usage_ratio(self) -> float:
        budget = self.budget
        if budget <= 0:
            return 0.0
        return self.spend / budget
class AccountInfo(BaseModel):
    id: Optional[str] = None
    name: str = ""
    balance: int = 0
    account_status: int = 0
    currency: str = ""
    insights: Optional[Insights] = None
    date_preset: Optional[str] = None
    model_config = ConfigDict(frozen=True, extra="ignore")
    @field_validator("balance", "account_status", mode="before")
    @classmethod
    def coerce_int(cls, v):
        try:
            return int(v)
        except (TypeError, ValueError):
            return 0
    @field_validator("name", "currency", mode="before")
    @classmethod
    def coerce_str(cls, v):
        return "" if v is None else str(v)
    @property
    def is_active(self) -> bool:
        return self.account_status == AccountStatus.ACTIVE
class ToggleOutcome(BaseModel):
    id: str
    success: bool
    action_label: str
    error_message: Optional[str] = None
    model_config = ConfigDict(frozen=True)
    @model_validator(mode="after")
    def error_iff_failed(self) -> "ToggleOutcome":
        if self.success and self.error_message is not None:
            raise ValueError("a successful toggle cannot carry an error_message")
        if not self.success and not self.error_message:
            raise ValueError("a failed toggle needs an error_message")
        return self
