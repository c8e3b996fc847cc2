# util/enums.py
from enum import Enum
from typing import NamedTuple
from fastapi import status


class Color(str, Enum):
    RESET = "\033[0m"
    RED = "\033[31m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    BLUE = "\033[34m"
    MAGENTA = "\033[35m"
    CYAN = "\033[36m"
    BOLD = "\033[1m"

    def __str__(self):
        return self.value


class Environment(str, Enum):
    DEV = "dev"
    TEST = "test"
    PROD = "prod"


class ScheduleState(str, Enum):
    unvested = "unvested"
    partially_vested = "partially_vested"
    fully_vested = "fully_vested"


class ErrorInfo(NamedTuple):
    code: str
    message: str
    http_status: int


class ErrorMessage(Enum):
    # Codes are surfaced verbatim to callers; never rename them.
    DUPLICATE_COMPANY = ErrorInfo(
        "DuplicateCompany",
        "A vesting account already exists for this company",
        status.HTTP_409_CONFLICT,
    )
    DUPLICATE_SCHEDULE = ErrorInfo(
        "DuplicateSchedule",
        "An employee account already exists for this beneficiary",
        status.HTTP_409_CONFLICT,
    )
    DUPLICATE_ACCOUNT = ErrorInfo(
        "DuplicateAccount", "Account already exists", status.HTTP_409_CONFLICT
    )
    INVALID_VESTING_PERIOD = ErrorInfo(
        "InvalidVestingPeriod",
        "Invalid vesting period",
        status.HTTP_400_BAD_REQUEST,
    )
    INVALID_AMOUNT = ErrorInfo(
        "InvalidAmount", "Amount must be positive", status.HTTP_400_BAD_REQUEST
    )
    INVALID_COMPANY_NAME = ErrorInfo(
        "InvalidCompanyName",
        "Company name must be 1 to 32 bytes",
        status.HTTP_400_BAD_REQUEST,
    )
    CLAIM_NOT_AVAILABLE_YET = ErrorInfo(
        "ClaimNotAvailableYet",
        "Claiming is not available yet",
        status.HTTP_400_BAD_REQUEST,
    )
    NOTHING_TO_CLAIM = ErrorInfo(
        "NothingToClaim", "There is nothing to claim", status.HTTP_400_BAD_REQUEST
    )
    UNAUTHORIZED = ErrorInfo(
        "Unauthorized", "Unauthorized", status.HTTP_403_FORBIDDEN
    )
    ACCOUNT_NOT_FOUND = ErrorInfo(
        "AccountNotFound", "Account not found", status.HTTP_404_NOT_FOUND
    )
    MINT_MISMATCH = ErrorInfo(
        "MintMismatch",
        "Token account does not belong to this mint",
        status.HTTP_400_BAD_REQUEST,
    )
    INSUFFICIENT_FUNDS = ErrorInfo(
        "InsufficientFunds", "Insufficient funds", status.HTTP_409_CONFLICT
    )
    CONCURRENT_MODIFICATION = ErrorInfo(
        "ConcurrentModification",
        "Account was modified concurrently, retry",
        status.HTTP_409_CONFLICT,
    )
