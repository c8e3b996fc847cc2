import pytest
from solders.keypair import Keypair
from solders.pubkey import Pubkey

from core import derivation
from core.authority import custodian_signer, verify_program_authority
from core.entities import ProgramSigner
from model.accounts import VestingRegistry
from util.errors import VestingError
from conftest import COMPANY


def test_registry_uses_raw_name_seed():
    derived = derivation.registry_address(COMPANY)
    expected, bump = Pubkey.find_program_address([b"TestCompany"], derivation.program_id())
    assert derived.address == expected
    assert derived.bump == bump


def test_custodian_seed_layout():
    derived = derivation.custodian_address(COMPANY)
    expected, _ = Pubkey.find_program_address(
        [b"vesting_treasury", b"TestCompany"], derivation.program_id()
    )
    assert derived.address == expected
    assert derived.address != derivation.registry_address(COMPANY).address


def test_schedule_seed_layout():
    beneficiary = Keypair().pubkey()
    registry = derivation.registry_address(COMPANY).address
    derived = derivation.schedule_address(beneficiary, registry)
    expected, _ = Pubkey.find_program_address(
        [b"employee_vesting", bytes(beneficiary), bytes(registry)], derivation.program_id()
    )
    assert derived.address == expected


def test_schedule_address_is_per_pair():
    registry = derivation.registry_address(COMPANY).address
    other = derivation.registry_address("OtherCompany").address
    alice, bob = Keypair().pubkey(), Keypair().pubkey()
    addrs = {
        derivation.schedule_address(alice, registry).address,
        derivation.schedule_address(bob, registry).address,
        derivation.schedule_address(alice, other).address,
    }
    assert len(addrs) == 3


def test_bump_recreates_address():
    derived = derivation.custodian_address(COMPANY)
    recreated = Pubkey.create_program_address(
        [b"vesting_treasury", COMPANY.encode(), bytes([derived.bump])],
        derivation.program_id(),
    )
    assert recreated == derived.address


@pytest.mark.parametrize("name", ["", "x" * 33, "é" * 17, "Acme/EU"])
def test_name_must_fit_one_seed(name):
    with pytest.raises(VestingError) as exc:
        derivation.registry_address(name)
    assert exc.value.code == "InvalidCompanyName"


def _registry(**overrides) -> VestingRegistry:
    custodian = derivation.custodian_address(COMPANY)
    fields = dict(
        owner=str(Keypair().pubkey()),
        mint=str(Keypair().pubkey()),
        custodian=str(custodian.address),
        name=COMPANY,
        bump=derivation.registry_address(COMPANY).bump,
        custodianBump=custodian.bump,
    )
    fields.update(overrides)
    return VestingRegistry(**fields)


def test_custodian_signer_rederives_from_name():
    registry = _registry()
    signer = custodian_signer(registry)
    assert str(signer.address()) == registry.custodian
    verify_program_authority(signer, registry.custodian)


def test_custodian_signer_rejects_foreign_reference():
    registry = _registry(custodian=str(Keypair().pubkey()))
    with pytest.raises(VestingError) as exc:
        custodian_signer(registry)
    assert exc.value.code == "Unauthorized"


def test_proof_must_match_owner():
    signer = custodian_signer(_registry())
    with pytest.raises(VestingError) as exc:
        verify_program_authority(signer, str(Keypair().pubkey()))
    assert exc.value.code == "Unauthorized"


def test_proof_from_other_program_is_rejected():
    good = custodian_signer(_registry())
    forged = ProgramSigner(program_id=Keypair().pubkey(), seeds=good.seeds, bump=good.bump)
    custodian = str(good.address())
    with pytest.raises(VestingError) as exc:
        verify_program_authority(forged, custodian)
    assert exc.value.code == "Unauthorized"


def test_associated_token_address_is_stable():
    owner, mint = Keypair().pubkey(), Keypair().pubkey()
    assert derivation.associated_token_address(owner, mint) == derivation.associated_token_address(
        owner, mint
    )
