"""
Script Verification Flags

Flags that control script verification behavior, and sighash types.
These are consensus-critical values.

Reference: Radiant-Core src/script/script_flags.h
"""

from typing import List


class ScriptFlags:
    SCRIPT_VERIFY_NONE = 0

    # Evaluate P2SH subscripts (BIP16)
    SCRIPT_VERIFY_P2SH = 1 << 0
    # Non-strict-DER signature or undefined hashtype fails checksig
    SCRIPT_VERIFY_STRICTENC = 1 << 1
    # Non-strict-DER signature fails checksig (BIP62 rule 1)
    SCRIPT_VERIFY_DERSIG = 1 << 2
    # S > order/2 fails checksig (BIP62 rule 5)
    SCRIPT_VERIFY_LOW_S = 1 << 3
    # Non-push operator in scriptSig fails (BIP62 rule 2)
    SCRIPT_VERIFY_SIGPUSHONLY = 1 << 5
    # Minimal push encodings (BIP62 rules 3 and 4)
    SCRIPT_VERIFY_MINIMALDATA = 1 << 6
    SCRIPT_VERIFY_DISCOURAGE_UPGRADABLE_NOPS = 1 << 7
    # Exactly one stack element after evaluation (BIP62 rule 6)
    SCRIPT_VERIFY_CLEANSTACK = 1 << 8
    SCRIPT_VERIFY_CHECKLOCKTIMEVERIFY = 1 << 9     # BIP65
    SCRIPT_VERIFY_CHECKSEQUENCEVERIFY = 1 << 10    # BIP112
    # OP_IF/NOTIF argument must be exactly 0x01 or empty
    SCRIPT_VERIFY_MINIMALIF = 1 << 13
    # Failed CHECK(MULTI)SIG requires empty signatures
    SCRIPT_VERIFY_NULLFAIL = 1 << 14
    SCRIPT_ENABLE_SIGHASH_FORKID = 1 << 16
    SCRIPT_DISALLOW_SEGWIT_RECOVERY = 1 << 20
    SCRIPT_ENABLE_SCHNORR_MULTISIG = 1 << 21
    SCRIPT_VERIFY_INPUT_SIGCHECKS = 1 << 22
    SCRIPT_ENFORCE_SIGCHECKS = 1 << 23
    SCRIPT_64_BIT_INTEGERS = 1 << 24
    SCRIPT_NATIVE_INTROSPECTION = 1 << 25
    SCRIPT_ENHANCED_REFERENCES = 1 << 26
    SCRIPT_PUSH_TX_STATE = 1 << 27


# Standard script verification flags for Radiant mainnet
STANDARD_SCRIPT_VERIFY_FLAGS = (
    ScriptFlags.SCRIPT_VERIFY_P2SH
    | ScriptFlags.SCRIPT_VERIFY_STRICTENC
    | ScriptFlags.SCRIPT_VERIFY_DERSIG
    | ScriptFlags.SCRIPT_VERIFY_LOW_S
    | ScriptFlags.SCRIPT_VERIFY_SIGPUSHONLY
    | ScriptFlags.SCRIPT_VERIFY_MINIMALDATA
    | ScriptFlags.SCRIPT_VERIFY_DISCOURAGE_UPGRADABLE_NOPS
    | ScriptFlags.SCRIPT_VERIFY_CLEANSTACK
    | ScriptFlags.SCRIPT_VERIFY_CHECKLOCKTIMEVERIFY
    | ScriptFlags.SCRIPT_VERIFY_CHECKSEQUENCEVERIFY
    | ScriptFlags.SCRIPT_VERIFY_MINIMALIF
    | ScriptFlags.SCRIPT_VERIFY_NULLFAIL
    | ScriptFlags.SCRIPT_ENABLE_SIGHASH_FORKID
    | ScriptFlags.SCRIPT_64_BIT_INTEGERS
    | ScriptFlags.SCRIPT_NATIVE_INTROSPECTION
    | ScriptFlags.SCRIPT_ENHANCED_REFERENCES
)

# Mandatory script verification flags (consensus)
MANDATORY_SCRIPT_VERIFY_FLAGS = (
    ScriptFlags.SCRIPT_VERIFY_P2SH
    | ScriptFlags.SCRIPT_ENABLE_SIGHASH_FORKID
)


class SigHashType:
    SIGHASH_ALL = 0x01
    SIGHASH_NONE = 0x02
    SIGHASH_SINGLE = 0x03
    SIGHASH_FORKID = 0x40
    SIGHASH_ANYONECANPAY = 0x80


DEFAULT_SIGHASH_TYPE = SigHashType.SIGHASH_ALL | SigHashType.SIGHASH_FORKID

_FLAG_BITS = [
    (name, value) for name, value in vars(ScriptFlags).items()
    if name.startswith('SCRIPT_') and value
]


def has_flag(flags: int, flag: int) -> bool:
    return (flags & flag) != 0


def set_flag(flags: int, flag: int) -> int:
    return flags | flag


def clear_flag(flags: int, flag: int) -> int:
    return flags & ~flag


def get_flag_names(flags: int) -> List[str]:
    """Get the names of all flags set in a flags value, lowest bit first."""
    return [name for name, value in _FLAG_BITS if flags & value == value]
