from enum import Enum


class TeamSizeBucket(str, Enum):
    SOLO_TO_FIVE = "1-5"
    FIVE_TO_FIFTEEN = "5-15"
    FIFTEEN_TO_FIFTY = "15-50"
    FIFTY_PLUS = "50+"


class ChannelsBucket(str, Enum):
    ONE_TO_TWO = "1-2"
    THREE_TO_FIVE = "3-5"
    SIX_TO_TEN = "6-10"
    TEN_PLUS = "10+"


class PainPoint(str, Enum):
    AGENCY_COST = "agency-cost"
    MANUAL_WORK = "manual-work"
    SCALING_PROBLEM = "scaling-problem"
    CHANNEL_OVERLOAD = "channel-overload"
    CONTENT_BOTTLENECK = "content-bottleneck"
    HIRING_LIMITATION = "hiring-limitation"


class Industry(str, Enum):
    ECOMMERCE = "ecommerce"
    SAAS = "saas"
    AGENCY = "agency"
    OTHER = "other"


class ICPTier(str, Enum):
    ENTERPRISE = "enterprise"
    STRATEGIC = "strategic"
    STANDARD = "standard"
    DISCOVERY = "discovery"


class MaturityLevel(int, Enum):
    NONE = 0
    BASIC = 25
    STRUCTURED = 50
    ADVANCED = 75
    OPTIMIZED = 100
