"""
Network parameter table tests.
"""

import dataclasses

import pytest

import rxdconstants
from rxdconstants.lib.networks import (
    MAINNET,
    TESTNET,
    REGTEST,
    NETWORKS,
    ELECTRUM_SERVERS,
    NetworkParams,
    get_network,
    get_network_by_magic,
    is_mainnet,
    is_testnet,
    is_regtest,
)


class TestNetworkParams:

    def test_mainnet(self):
        assert MAINNET.pubkey_hash == 0x00
        assert MAINNET.script_hash == 0x05
        assert MAINNET.port == 7333
        assert MAINNET.network_magic == bytes([0xf9, 0xbe, 0xb4, 0xd9])
        assert 'seed.radiantblockchain.org' in MAINNET.dns_seeds

    def test_testnet_and_regtest_share_prefixes(self):
        assert TESTNET.pubkey_hash == REGTEST.pubkey_hash == 0x6f
        assert TESTNET.port == 17333
        assert REGTEST.port == 18444
        assert REGTEST.dns_seeds == ()

    def test_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            MAINNET.port = 1

    def test_livenet_alias(self):
        assert NETWORKS['livenet'] is MAINNET
        assert MAINNET.alias == 'livenet'

    def test_electrum_servers(self):
        assert set(ELECTRUM_SERVERS) == {'mainnet', 'testnet', 'regtest'}
        assert all(s['protocol'] == 'ssl' for s in ELECTRUM_SERVERS['mainnet'])


class TestNetworkLookup:

    def test_by_name(self):
        assert get_network('mainnet') is MAINNET
        assert get_network('TestNet') is TESTNET
        assert get_network('livenet') is MAINNET
        assert get_network('nosuchnet') is None

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv('NET', 'regtest')
        assert get_network() is REGTEST

    def test_env_default(self, monkeypatch):
        monkeypatch.delenv('NET', raising=False)
        assert get_network() is MAINNET

    def test_explicit_name_overrides_env(self, monkeypatch):
        monkeypatch.setenv('NET', 'regtest')
        assert get_network('testnet') is TESTNET

    def test_by_magic(self):
        assert get_network_by_magic(bytes.fromhex('0b110907')) is TESTNET
        assert get_network_by_magic(bytearray.fromhex('fabfb5da')) is REGTEST
        assert get_network_by_magic(b'\x00\x00\x00\x00') is None

    def test_predicates(self):
        assert is_mainnet(MAINNET)
        assert is_mainnet('livenet')
        assert not is_mainnet(TESTNET)
        assert is_testnet('testnet')
        assert is_regtest(REGTEST)
        assert not is_regtest('mainnet')


class TestPackageExports:

    def test_version(self):
        assert rxdconstants.version_short == '1.0.0'

    def test_lazy_exports(self):
        assert rxdconstants.get_network is get_network
        assert rxdconstants.NetworkParams is NetworkParams
        assert rxdconstants.validate_wave_name('alice') == (True, None)

    def test_unknown_attribute(self):
        with pytest.raises(AttributeError):
            rxdconstants.no_such_thing
