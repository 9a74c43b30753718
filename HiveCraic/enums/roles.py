from enum import Enum

class Role(str, Enum):
    user = "User"      # Manages their own beekeeping records
    admin = "Admin"    # Also manages users, support tickets and dropdown settings
