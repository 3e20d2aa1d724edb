from enum import Enum

class ReservationStatus(str, Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"

class ContactStatus(str, Enum):
    NEW = "new"
    READ = "read"
    REPLIED = "replied"

class TokenType(str, Enum):
    ACCESS = "access"
    REFRESH = "refresh"

class AdminRole(str, Enum):
    ADMIN = "admin"
