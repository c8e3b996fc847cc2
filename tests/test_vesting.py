import pytest
from solders.keypair import Keypair

from core import vesting
from model.accounts import EmployeeSchedule
from util.enums import ScheduleState
from util.errors import VestingError
from conftest import CLIFF, DAY, NOW, TOKENS, YEAR


def make_schedule(start, end, cliff, total=TOKENS, withdrawn=0) -> EmployeeSchedule:
    return EmployeeSchedule(
        beneficiary=str(Keypair().pubkey()),
        registry=str(Keypair().pubkey()),
        startTime=start,
        endTime=end,
        cliffTime=cliff,
        totalAmount=total,
        totalWithdrawn=withdrawn,
        bump=255,
    )


class TestValidateTerms:
    def test_accepts_cliff_on_either_boundary(self):
        vesting.validate_terms(NOW, NOW + YEAR, NOW, TOKENS)
        vesting.validate_terms(NOW, NOW + YEAR, NOW + YEAR, TOKENS)

    @pytest.mark.parametrize(
        "start,end,cliff",
        [
            (NOW, NOW, NOW),  # zero-length window
            (NOW, NOW - 1, NOW),  # inverted window
            (NOW, NOW + YEAR, NOW - 1),  # cliff before start
            (NOW, NOW + YEAR, NOW + YEAR + 1),  # cliff after end
        ],
    )
    def test_rejects_bad_periods(self, start, end, cliff):
        with pytest.raises(VestingError) as exc:
            vesting.validate_terms(start, end, cliff, TOKENS)
        assert exc.value.code == "InvalidVestingPeriod"

    def test_rejects_zero_amount(self):
        with pytest.raises(VestingError) as exc:
            vesting.validate_terms(NOW, NOW + YEAR, NOW, 0)
        assert exc.value.code == "InvalidAmount"


class TestVestedAmount:
    def test_nothing_before_cliff(self):
        s = make_schedule(NOW, NOW + YEAR, NOW + CLIFF)
        assert vesting.vested_amount(s, NOW + CLIFF - 1) == 0

    def test_cliff_releases_time_since_start(self):
        # Vesting accrues from start; the cliff only gates access.
        s = make_schedule(NOW, NOW + YEAR, NOW + CLIFF)
        assert vesting.vested_amount(s, NOW + CLIFF) == CLIFF * TOKENS // YEAR

    def test_half_way(self):
        s = make_schedule(NOW - YEAR, NOW + YEAR, NOW - CLIFF)
        assert vesting.vested_amount(s, NOW) == 500 * 10**9

    def test_capped_after_end(self):
        s = make_schedule(NOW, NOW + YEAR, NOW)
        assert vesting.vested_amount(s, NOW + 10 * YEAR) == TOKENS

    def test_floor_division(self):
        s = make_schedule(0, 3, 0, total=10)
        assert vesting.vested_amount(s, 1) == 3
        assert vesting.vested_amount(s, 2) == 6
        assert vesting.vested_amount(s, 3) == 10

    def test_large_amounts_do_not_lose_precision(self):
        total = 2**64 - 1
        s = make_schedule(0, 3, 0, total=total)
        assert vesting.vested_amount(s, 1) == total // 3


class TestRelease:
    def test_before_cliff(self):
        s = make_schedule(NOW, NOW + YEAR, NOW + CLIFF)
        with pytest.raises(VestingError) as exc:
            vesting.release_amount(s, NOW)
        assert exc.value.code == "ClaimNotAvailableYet"

    def test_subtracts_withdrawn(self):
        s = make_schedule(NOW - YEAR, NOW + YEAR, NOW - CLIFF, withdrawn=100)
        assert vesting.release_amount(s, NOW) == 500 * 10**9 - 100

    def test_nothing_left(self):
        s = make_schedule(NOW - YEAR, NOW + YEAR, NOW - CLIFF, withdrawn=500 * 10**9)
        with pytest.raises(VestingError) as exc:
            vesting.release_amount(s, NOW)
        assert exc.value.code == "NothingToClaim"

    def test_fully_vested_and_fully_withdrawn(self):
        s = make_schedule(NOW - YEAR, NOW, NOW - YEAR, withdrawn=TOKENS)
        with pytest.raises(VestingError) as exc:
            vesting.release_amount(s, NOW + DAY)
        assert exc.value.code == "NothingToClaim"


class TestStateMachine:
    def test_transitions(self):
        s = make_schedule(NOW, NOW + YEAR, NOW + CLIFF)
        assert vesting.schedule_state(s, NOW) == ScheduleState.unvested
        assert vesting.schedule_state(s, NOW + CLIFF) == ScheduleState.partially_vested
        assert vesting.schedule_state(s, NOW + YEAR) == ScheduleState.fully_vested

    def test_snapshot(self):
        s = make_schedule(NOW - YEAR, NOW + YEAR, NOW - CLIFF, withdrawn=1)
        snap = vesting.snapshot(s, NOW)
        assert snap.state == ScheduleState.partially_vested
        assert snap.vested == 500 * 10**9
        assert snap.claimable == 500 * 10**9 - 1
        assert snap.now == NOW
