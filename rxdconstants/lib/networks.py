"""
Network parameters for the Radiant blockchain.

Reference: Radiant-Core src/chainparams.cpp

get_network() with no name follows the NET environment variable, the same
variable an ElectrumX deployment uses to pick its network.
"""

import logging
import os
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple, Union


logger = logging.getLogger(__name__)

DEFAULT_NET = 'mainnet'


@dataclass(frozen=True)
class NetworkParams:
    """Address prefixes, magic and peer defaults for one network."""
    name: str
    alias: str
    pubkey_hash: int
    script_hash: int
    private_key: int
    xpubkey: int
    xprivkey: int
    network_magic: bytes
    port: int
    dns_seeds: Tuple[str, ...] = field(default_factory=tuple)


MAINNET = NetworkParams(
    name='mainnet',
    alias='livenet',
    pubkey_hash=0x00,
    script_hash=0x05,
    private_key=0x80,
    xpubkey=0x0488b21e,
    xprivkey=0x0488ade4,
    network_magic=bytes.fromhex('f9beb4d9'),
    port=7333,
    dns_seeds=(
        'seed.radiantblockchain.org',
        'seed.radiant.ovh',
    ),
)

TESTNET = NetworkParams(
    name='testnet',
    alias='testnet',
    pubkey_hash=0x6f,
    script_hash=0xc4,
    private_key=0xef,
    xpubkey=0x043587cf,
    xprivkey=0x04358394,
    network_magic=bytes.fromhex('0b110907'),
    port=17333,
    dns_seeds=(
        'testnet-seed.radiantblockchain.org',
    ),
)

REGTEST = NetworkParams(
    name='regtest',
    alias='regtest',
    pubkey_hash=0x6f,
    script_hash=0xc4,
    private_key=0xef,
    xpubkey=0x043587cf,
    xprivkey=0x04358394,
    network_magic=bytes.fromhex('fabfb5da'),
    port=18444,
)

NETWORKS: Dict[str, NetworkParams] = {
    'mainnet': MAINNET,
    'testnet': TESTNET,
    'regtest': REGTEST,
    'livenet': MAINNET,
}

# Default Electrum servers for each network
ELECTRUM_SERVERS: Dict[str, List[Dict[str, Union[str, int]]]] = {
    'mainnet': [
        {'host': 'electrum.radiant.ovh', 'port': 50002, 'protocol': 'ssl'},
        {'host': 'electrum.radiantblockchain.org', 'port': 50002, 'protocol': 'ssl'},
    ],
    'testnet': [
        {'host': 'testnet-electrum.radiant.ovh', 'port': 50002, 'protocol': 'ssl'},
    ],
    'regtest': [],
}


def get_network(name: Optional[str] = None) -> Optional[NetworkParams]:
    """Get network parameters by name, or from $NET when no name is given."""
    if name is None:
        name = os.getenv('NET', DEFAULT_NET)
    params = NETWORKS.get(name.strip().lower())
    if params is None:
        logger.debug(f'Unknown network: {name!r}')
    return params


def get_network_by_magic(magic: bytes) -> Optional[NetworkParams]:
    for network in (MAINNET, TESTNET, REGTEST):
        if network.network_magic == bytes(magic):
            return network
    return None


def _network_name(network: Union[NetworkParams, str]) -> str:
    if isinstance(network, NetworkParams):
        return network.name
    return network


def is_mainnet(network: Union[NetworkParams, str]) -> bool:
    return _network_name(network) in ('mainnet', 'livenet')


def is_testnet(network: Union[NetworkParams, str]) -> bool:
    return _network_name(network) == 'testnet'


def is_regtest(network: Union[NetworkParams, str]) -> bool:
    return _network_name(network) == 'regtest'
