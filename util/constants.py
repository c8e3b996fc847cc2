# util/constants.py
class InternalURIs:
    API = "/api"
    V1 = API + "/v1"
    VESTING_ACCOUNTS = V1 + "/vesting-accounts"
    VESTING_ACCOUNT = VESTING_ACCOUNTS + "/{name}"
    EMPLOYEE_ACCOUNTS = VESTING_ACCOUNT + "/employees"
    EMPLOYEE_ACCOUNT = EMPLOYEE_ACCOUNTS + "/{beneficiary}"
    CLAIM_TOKENS = VESTING_ACCOUNT + "/claim"
    MINTS = V1 + "/mints"
    MINT_TO = MINTS + "/{mint}/mint-to"
    TOKEN_ACCOUNT = V1 + "/token-accounts/{address}"


class Seeds:
    TREASURY = b"vesting_treasury"
    EMPLOYEE = b"employee_vesting"


class ProgramIds:
    TOKEN_PROGRAM = "TokenkegQfeZyiNwAJbNbGKPFXCWuBvf9Ss623VQ5DA"
    ASSOCIATED_TOKEN_PROGRAM = "ATokenGPvbdGVxr1b2hvZbsiqW5xWH25efTNsLJA8knL"


MAX_SEED_BYTES = 32
U64_MAX = 2**64 - 1
I64_MIN = -(2**63)
I64_MAX = 2**63 - 1
