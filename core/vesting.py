# core/vesting.py
"""
Linear vesting with a cliff gate.

    vested = floor((min(now, end) - start) * total / (end - start))

Nothing is claimable before the cliff; after `end` the full amount is vested.
All arithmetic is integer; the only rounding is the final floor.
"""
from model.accounts import EmployeeSchedule
from core.entities import VestingSnapshot
from util.constants import U64_MAX
from util.enums import ErrorMessage, ScheduleState
from util.errors import VestingError


def validate_terms(start_time: int, end_time: int, cliff_time: int, total_amount: int) -> None:
    if end_time <= start_time:
        raise VestingError(
            ErrorMessage.INVALID_VESTING_PERIOD, "End time must be after start time"
        )
    # A cliff outside the window would make the schedule degenerate; reject it.
    if not start_time <= cliff_time <= end_time:
        raise VestingError(
            ErrorMessage.INVALID_VESTING_PERIOD,
            "Cliff time must lie within [start time, end time]",
        )
    if total_amount <= 0 or total_amount > U64_MAX:
        raise VestingError(ErrorMessage.INVALID_AMOUNT)


def vested_amount(schedule: EmployeeSchedule, now: int) -> int:
    if now < schedule.cliffTime:
        return 0
    span = schedule.endTime - schedule.startTime
    if span <= 0:
        raise VestingError(ErrorMessage.INVALID_VESTING_PERIOD)
    elapsed = max(0, min(now, schedule.endTime) - schedule.startTime)
    return elapsed * schedule.totalAmount // span


def claimable_amount(schedule: EmployeeSchedule, now: int) -> int:
    return max(0, vested_amount(schedule, now) - schedule.totalWithdrawn)


def schedule_state(schedule: EmployeeSchedule, now: int) -> ScheduleState:
    if now < schedule.cliffTime:
        return ScheduleState.unvested
    if now < schedule.endTime:
        return ScheduleState.partially_vested
    return ScheduleState.fully_vested


def snapshot(schedule: EmployeeSchedule, now: int) -> VestingSnapshot:
    return VestingSnapshot(
        state=schedule_state(schedule, now),
        now=now,
        vested=vested_amount(schedule, now),
        claimable=claimable_amount(schedule, now),
    )


def release_amount(schedule: EmployeeSchedule, now: int) -> int:
    """
    Amount the next claim releases. Raises ClaimNotAvailableYet before the
    cliff and NothingToClaim when everything vested is already withdrawn.
    """
    if now < schedule.cliffTime:
        raise VestingError(ErrorMessage.CLAIM_NOT_AVAILABLE_YET)
    claimable = vested_amount(schedule, now) - schedule.totalWithdrawn
    if claimable <= 0:
        raise VestingError(ErrorMessage.NOTHING_TO_CLAIM)
    return claimable
