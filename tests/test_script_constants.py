"""
Opcode, limit and script flag table tests.
"""

from decimal import Decimal

import pytest

from rxdconstants.lib.opcodes import (
    Opcodes,
    OPCODE_NAMES,
    get_opcode_name,
    is_radiant_opcode,
    is_introspection_opcode,
    is_reference_opcode,
    is_state_separator_opcode,
    is_push_opcode,
    is_reenabled_opcode,
)
from rxdconstants.lib.limits import (
    Limits,
    ScriptConstants,
    exceeds_element_size,
    exceeds_script_size,
    exceeds_stack_size,
    exceeds_op_count,
    to_photons,
    to_rxd,
)
from rxdconstants.lib.flags import (
    ScriptFlags,
    SigHashType,
    STANDARD_SCRIPT_VERIFY_FLAGS,
    MANDATORY_SCRIPT_VERIFY_FLAGS,
    DEFAULT_SIGHASH_TYPE,
    has_flag,
    set_flag,
    clear_flag,
    get_flag_names,
)


class TestOpcodes:

    def test_values(self):
        assert Opcodes.OP_0 == Opcodes.OP_FALSE == 0x00
        assert Opcodes.OP_RETURN == 0x6a
        assert Opcodes.OP_CAT == 0x7e
        assert Opcodes.OP_STATESEPARATOR == 0xbd
        assert Opcodes.OP_PUSHINPUTREFSINGLETON == 0xd8
        assert Opcodes.OP_PUSH_TX_STATE == 0xed
        assert Opcodes.INVALIDOPCODE == 0xff

    def test_names_prefer_first_definition(self):
        assert get_opcode_name(0x00) == 'OP_0'
        assert get_opcode_name(0x51) == 'OP_1'
        assert get_opcode_name(0xb1) == 'OP_CHECKLOCKTIMEVERIFY'
        assert get_opcode_name(0xb2) == 'OP_CHECKSEQUENCEVERIFY'
        assert get_opcode_name(0xff) == 'INVALIDOPCODE'

    def test_unknown_name(self):
        assert get_opcode_name(0xee) == 'UNKNOWN_0xee'
        assert get_opcode_name(0x01) == 'UNKNOWN_0x01'

    def test_reverse_table_consistent(self):
        for value, name in OPCODE_NAMES.items():
            assert getattr(Opcodes, name) == value

    def test_radiant_opcodes(self):
        assert is_radiant_opcode(Opcodes.OP_STATESEPARATOR)
        assert is_radiant_opcode(Opcodes.OP_PUSH_TX_STATE)
        assert is_radiant_opcode(Opcodes.OP_CHECKDATASIG)
        assert is_radiant_opcode(Opcodes.OP_REVERSEBYTES)
        assert not is_radiant_opcode(Opcodes.OP_CHECKSIG)
        assert not is_radiant_opcode(0xee)

    def test_ranges(self):
        assert is_introspection_opcode(Opcodes.OP_INPUTINDEX)
        assert is_introspection_opcode(Opcodes.OP_OUTPUTBYTECODE)
        assert not is_introspection_opcode(Opcodes.OP_SHA512_256)
        assert is_reference_opcode(Opcodes.OP_PUSHINPUTREF)
        assert not is_reference_opcode(Opcodes.OP_HASH512_256)
        assert is_state_separator_opcode(Opcodes.OP_STATESEPARATORINDEX_OUTPUT)
        assert not is_state_separator_opcode(Opcodes.OP_INPUTINDEX)

    def test_push_opcodes(self):
        assert is_push_opcode(Opcodes.OP_0)
        assert is_push_opcode(0x4b)
        assert is_push_opcode(Opcodes.OP_PUSHDATA4)
        assert not is_push_opcode(Opcodes.OP_1NEGATE)

    def test_reenabled(self):
        assert is_reenabled_opcode(Opcodes.OP_CAT)
        assert is_reenabled_opcode(Opcodes.OP_MUL)
        assert not is_reenabled_opcode(Opcodes.OP_ADD)


class TestLimits:

    def test_values(self):
        assert Limits.MAX_SCRIPT_ELEMENT_SIZE_LEGACY == 520
        assert Limits.MAX_SCRIPT_SIZE == 32_000_000
        assert Limits.REF_SIZE == 36
        assert Limits.COIN == 100_000_000
        assert Limits.MAX_MONEY == 2_100_000_000_000_000_000

    def test_script_constants(self):
        assert ScriptConstants.EMPTY_SCRIPT == b''
        assert ScriptConstants.OP_RETURN_PREFIX == bytes([Opcodes.OP_FALSE, Opcodes.OP_RETURN])

    def test_exceeds(self):
        assert not exceeds_element_size(Limits.MAX_SCRIPT_ELEMENT_SIZE)
        assert exceeds_element_size(Limits.MAX_SCRIPT_ELEMENT_SIZE + 1)
        assert exceeds_script_size(Limits.MAX_SCRIPT_SIZE + 1)
        assert not exceeds_stack_size(1000)
        assert exceeds_op_count(Limits.MAX_OPS_PER_SCRIPT + 1)

    @pytest.mark.parametrize('rxd, photons', [
        (1, 100_000_000),
        (0.1, 10_000_000),
        ('21.5', 2_150_000_000),
        (Decimal('0.00000001'), 1),
        (0.000000005, 1),
        (0, 0),
    ])
    def test_to_photons(self, rxd, photons):
        assert to_photons(rxd) == photons

    def test_to_rxd(self):
        assert to_rxd(150_000_000) == 1.5
        assert to_rxd(to_photons(3)) == 3


class TestScriptFlags:

    def test_bits(self):
        assert ScriptFlags.SCRIPT_VERIFY_NONE == 0
        assert ScriptFlags.SCRIPT_VERIFY_P2SH == 1
        assert ScriptFlags.SCRIPT_ENABLE_SIGHASH_FORKID == 1 << 16
        assert ScriptFlags.SCRIPT_PUSH_TX_STATE == 1 << 27

    def test_mandatory_subset_of_standard(self):
        assert STANDARD_SCRIPT_VERIFY_FLAGS & MANDATORY_SCRIPT_VERIFY_FLAGS == \
            MANDATORY_SCRIPT_VERIFY_FLAGS

    def test_standard_excludes_push_tx_state(self):
        assert not has_flag(STANDARD_SCRIPT_VERIFY_FLAGS, ScriptFlags.SCRIPT_PUSH_TX_STATE)

    def test_set_and_clear(self):
        flags = set_flag(ScriptFlags.SCRIPT_VERIFY_NONE, ScriptFlags.SCRIPT_VERIFY_LOW_S)
        assert has_flag(flags, ScriptFlags.SCRIPT_VERIFY_LOW_S)
        flags = clear_flag(flags, ScriptFlags.SCRIPT_VERIFY_LOW_S)
        assert flags == 0
        assert clear_flag(0, ScriptFlags.SCRIPT_VERIFY_P2SH) == 0

    def test_flag_names(self):
        assert get_flag_names(MANDATORY_SCRIPT_VERIFY_FLAGS) == [
            'SCRIPT_VERIFY_P2SH', 'SCRIPT_ENABLE_SIGHASH_FORKID',
        ]
        assert get_flag_names(0) == []
        assert len(get_flag_names(STANDARD_SCRIPT_VERIFY_FLAGS)) == 16

    def test_sighash(self):
        assert DEFAULT_SIGHASH_TYPE == 0x41
        assert DEFAULT_SIGHASH_TYPE & SigHashType.SIGHASH_FORKID
