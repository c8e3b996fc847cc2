# core/entities.py
from dataclasses import dataclass
from typing import Tuple
from solders.pubkey import Pubkey
from util.enums import ScheduleState


@dataclass(frozen=True)
class DerivedAddress:
    """
    Program-derived address plus the bump seed that pushed it off the curve.
    """

    address: Pubkey
    bump: int

    def __str__(self) -> str:
        return str(self.address)


@dataclass(frozen=True)
class ProgramSigner:
    """
    Authority proof for a program-owned account: the seeds and bump that
    re-derive its address under the program id. There is no private key.
    """

    program_id: Pubkey
    seeds: Tuple[bytes, ...]
    bump: int

    def address(self) -> Pubkey:
        return Pubkey.create_program_address(
            [*self.seeds, bytes([self.bump])], self.program_id
        )


@dataclass
class VestingSnapshot:
    state: ScheduleState
    now: int
    vested: int
    claimable: int


@dataclass
class ClaimResult:
    amount: int
    total_withdrawn: int
    destination: str
    state: ScheduleState
