from enum import Enum

# =====================================================
# 🔐 USERS / ACCESS
# =====================================================
class UserStatusEnum(str, Enum):
    a = "a"  # Active
    i = "i"  # Inactive


# =====================================================
# 🐝 HIVES
# =====================================================
class HiveStatusEnum(str, Enum):
    active = "active"
    queenless = "queenless"
    retired = "retired"


class MarkingColorEnum(str, Enum):
    white = "White"
    yellow = "Yellow"
    red = "Red"
    green = "Green"
    blue = "Blue"
    none = "None"


# =====================================================
# 👑 QUEENS
# =====================================================
class QueenStatusEnum(str, Enum):
    active = "active"
    retired = "retired"
    dead = "dead"


class QueenSourceEnum(str, Enum):
    bred = "bred"
    purchased = "purchased"
    swarm = "swarm"


# =====================================================
# 🥚 QUEENCRAFT BATCHES
# =====================================================
class BatchStatusEnum(str, Enum):
    grafted = "grafted"
    emerged = "emerged"
    mated = "mated"
    completed = "completed"


# =====================================================
# 📋 INSPECTIONS
# =====================================================
class HoneyStoresEnum(str, Enum):
    low = "Low"
    medium = "Medium"
    good = "Good"
    excellent = "Excellent"


class InspectionPeriodEnum(str, Enum):
    all = "all"
    three_months = "3months"
    six_months = "6months"
    one_year = "1year"
    custom = "custom"


# =====================================================
# 🍯 FEEDING / HARVEST
# =====================================================
class QuantityUnitEnum(str, Enum):
    kg = "kg"
    liters = "liters"


# =====================================================
# 🦠 VARROA
# =====================================================
class InfestationLevelEnum(str, Enum):
    na = "N/A"
    low = "Low"
    moderate = "Moderate"
    high = "High"
    critical = "Critical"


# =====================================================
# 🛟 SUPPORT
# =====================================================
class TicketTypeEnum(str, Enum):
    problem = "problem"
    suggestion = "suggestion"


class TicketStatusEnum(str, Enum):
    open = "open"
    in_progress = "in_progress"
    resolved = "resolved"
    closed = "closed"


class TicketPriorityEnum(str, Enum):
    low = "low"
    normal = "normal"
    high = "high"
    urgent = "urgent"
