# models/__init__.py
from utils.db import Base  # re-export
from .user import UserProfile
from .password_reset import PasswordResetToken
from .apiary import Apiary
from .queen import Queen
from .hive import Hive
from .inspection import Inspection
from .feeding import Feeding
from .harvest import Harvest
from .varroa import VarroaCheck, VarroaTreatment
from .rearing_batch import RearingBatch
from .support_ticket import SupportTicket
from .dropdown import DropdownCategory, DropdownValue
