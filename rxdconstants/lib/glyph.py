"""
Glyph v2 Token Standard Constants

Protocol identifiers, envelope constants, size limits and the protocol
combination rules for Glyph v2 tokens on the Radiant blockchain.

Reference: https://github.com/Radiant-Core/Glyph-Token-Standards
"""

import logging
from typing import Optional, Dict, Any, Iterable, List, Tuple

import cbor2


logger = logging.getLogger(__name__)

# Glyph magic bytes
GLYPH_MAGIC = b'gly'
GLYPH_MAGIC_HEX = '676c79'

# Protocol versions
class GlyphVersion:
    V1 = 0x01
    V2 = 0x02

# Protocol IDs
class GlyphProtocol:
    GLYPH_FT = 1         # Fungible Token
    GLYPH_NFT = 2        # Non-Fungible Token
    GLYPH_DAT = 3        # Data Storage
    GLYPH_DMINT = 4      # Decentralized Minting
    GLYPH_MUT = 5        # Mutable State
    GLYPH_BURN = 6       # Explicit Burn
    GLYPH_CONTAINER = 7  # Container/Collection
    GLYPH_ENCRYPTED = 8  # Encrypted Content
    GLYPH_TIMELOCK = 9   # Timelocked Reveal
    GLYPH_AUTHORITY = 10 # Issuer Authority
    GLYPH_WAVE = 11      # WAVE Naming


# Token types for indexing / API
class GlyphTokenType:
    UNKNOWN = 0
    FT = 1
    NFT = 2
    DAT = 3
    DMINT = 4
    WAVE = 5
    CONTAINER = 6
    AUTHORITY = 7

# Canonical short names, used in validation messages
PROTOCOL_KEYS = {
    GlyphProtocol.GLYPH_FT: 'FT',
    GlyphProtocol.GLYPH_NFT: 'NFT',
    GlyphProtocol.GLYPH_DAT: 'DAT',
    GlyphProtocol.GLYPH_DMINT: 'DMINT',
    GlyphProtocol.GLYPH_MUT: 'MUT',
    GlyphProtocol.GLYPH_BURN: 'BURN',
    GlyphProtocol.GLYPH_CONTAINER: 'CONTAINER',
    GlyphProtocol.GLYPH_ENCRYPTED: 'ENCRYPTED',
    GlyphProtocol.GLYPH_TIMELOCK: 'TIMELOCK',
    GlyphProtocol.GLYPH_AUTHORITY: 'AUTHORITY',
    GlyphProtocol.GLYPH_WAVE: 'WAVE',
}

_PROTOCOL_IDS = {key: pid for pid, key in PROTOCOL_KEYS.items()}

# Protocol names for logging/display
PROTOCOL_NAMES = {
    1: 'Fungible Token',
    2: 'Non-Fungible Token',
    3: 'Data Storage',
    4: 'Decentralized Minting',
    5: 'Mutable State',
    6: 'Burn',
    7: 'Container',
    8: 'Encrypted',
    9: 'Timelock',
    10: 'Authority',
    11: 'WAVE Name',
}

# Related REPs for each protocol
PROTOCOL_REPS = {
    GlyphProtocol.GLYPH_FT: 'REP-3001',
    GlyphProtocol.GLYPH_NFT: 'REP-3001',
    GlyphProtocol.GLYPH_DAT: 'REP-3001',
    GlyphProtocol.GLYPH_DMINT: 'REP-3010',
    GlyphProtocol.GLYPH_MUT: 'REP-3001',
    GlyphProtocol.GLYPH_BURN: 'REP-3014',
    GlyphProtocol.GLYPH_CONTAINER: 'REP-3013',
    GlyphProtocol.GLYPH_ENCRYPTED: 'REP-3006',
    GlyphProtocol.GLYPH_TIMELOCK: 'REP-3009',
    GlyphProtocol.GLYPH_AUTHORITY: 'REP-3015',
    GlyphProtocol.GLYPH_WAVE: 'REP-3011',
}

# Envelope flags
class EnvelopeFlags:
    HAS_CONTENT_ROOT = 1 << 0
    HAS_CONTROLLER = 1 << 1
    HAS_PROFILE_HINT = 1 << 2
    IS_REVEAL = 1 << 7

# dMint Algorithm IDs
class DmintAlgorithm:
    SHA256D = 0x00
    BLAKE3 = 0x01
    K12 = 0x02
    ARGON2ID_LIGHT = 0x03
    RANDOMX_LIGHT = 0x04     # CLI only

# DAA Mode IDs
class DaaMode:
    FIXED = 0x00
    EPOCH = 0x01
    ASERT = 0x02
    LWMA = 0x03
    SCHEDULE = 0x04

# Recommended minimum difficulty per algorithm, to keep collisions rare
RECOMMENDED_MIN_DIFFICULTY = {
    DmintAlgorithm.SHA256D: 500_000,
    DmintAlgorithm.BLAKE3: 2_500_000,
    DmintAlgorithm.K12: 2_000_000,
    DmintAlgorithm.ARGON2ID_LIGHT: 50_000,
}


class GlyphLimits:
    """Glyph size limits, in bytes unless noted."""
    MAX_NAME_SIZE = 256
    MAX_DESC_SIZE = 4096
    MAX_PATH_SIZE = 512
    MAX_MIME_SIZE = 128
    MAX_METADATA_SIZE = 262144            # 256 KB
    MAX_COMMIT_ENVELOPE_SIZE = 102400     # 100 KB
    MAX_REVEAL_ENVELOPE_A_SIZE = 102400   # 100 KB
    MAX_REVEAL_ENVELOPE_B_SIZE = 12582912 # 12 MB, consensus limited
    MAX_UPDATE_ENVELOPE_SIZE = 65536      # 64 KB
    MAX_INLINE_FILE_SIZE = 1048576        # 1 MB
    MAX_TOTAL_INLINE_SIZE = 10485760      # 10 MB
    MAX_PROTOCOLS = 16                    # items in the 'p' array


class ContainerType:
    COLLECTION = 'collection'
    ALBUM = 'album'
    BUNDLE = 'bundle'
    SERIES = 'series'


class AuthorityType:
    ISSUER = 'issuer'
    MANAGER = 'manager'
    DELEGATE = 'delegate'
    BADGE = 'badge'      # verification only, no permissions


class AuthorityPermission:
    MINT = 'mint'
    UPDATE = 'update'
    BURN = 'burn'
    DELEGATE = 'delegate'


# Mutable update operations
class UpdateOperation:
    REPLACE = 'replace'
    MERGE = 'merge'
    APPEND = 'append'
    REMOVE = 'remove'


class StorageType:
    INLINE = 'inline'
    REF = 'ref'
    IPFS = 'ipfs'


class EncryptionAlgorithm:
    AEAD = {
        'XCHACHA20_POLY1305': 'xchacha20poly1305',
        'AES_256_GCM': 'aes-256-gcm',
        'CHACHA20_POLY1305': 'chacha20poly1305',
    }
    KDF = {
        'SCRYPT': 'scrypt',
        'HKDF_SHA256': 'hkdf-sha256',
    }
    KEY_WRAP = {
        'X25519_HKDF_AES256GCM': 'x25519-hkdf-aes256gcm',
    }


class EncryptionMinimums:
    SCRYPT = {
        'MIN_N': 131072,            # 2^17
        'RECOMMENDED_N': 1048576,   # 2^20
        'MIN_R': 8,
        'MIN_P': 1,
        'MIN_SALT_LENGTH': 16,
        'RECOMMENDED_SALT_LENGTH': 32,
    }
    NONCE_LENGTHS = {
        'XCHACHA20_POLY1305': 24,
        'AES_256_GCM': 12,
        'CHACHA20_POLY1305': 12,
    }


class GlyphDefaults:
    FT_DECIMALS = 8
    BURN_CONFIRMATIONS = 6
    ASERT_HALFLIFE = 3600     # seconds
    TARGET_MINT_TIME = 60     # seconds
    MAX_SUBDOMAIN_DEPTH = 5


# ------------------------------------------------------------------
# Protocol combination rules (Glyph v2 spec Section 3.5)
# ------------------------------------------------------------------

PROTOCOL_REQUIREMENTS: Dict[int, List[int]] = {
    GlyphProtocol.GLYPH_DMINT: [GlyphProtocol.GLYPH_FT],
    GlyphProtocol.GLYPH_MUT: [GlyphProtocol.GLYPH_NFT],
    GlyphProtocol.GLYPH_CONTAINER: [GlyphProtocol.GLYPH_NFT],
    GlyphProtocol.GLYPH_ENCRYPTED: [GlyphProtocol.GLYPH_NFT],
    GlyphProtocol.GLYPH_TIMELOCK: [GlyphProtocol.GLYPH_ENCRYPTED],
    GlyphProtocol.GLYPH_AUTHORITY: [GlyphProtocol.GLYPH_NFT],
    GlyphProtocol.GLYPH_WAVE: [GlyphProtocol.GLYPH_NFT, GlyphProtocol.GLYPH_MUT],
}

PROTOCOL_EXCLUSIONS: List[Tuple[int, int]] = [
    (GlyphProtocol.GLYPH_FT, GlyphProtocol.GLYPH_NFT),
]

# Modifiers and action markers that are not token types on their own
PROTOCOLS_REQUIRE_BASE = frozenset((
    GlyphProtocol.GLYPH_DMINT,
    GlyphProtocol.GLYPH_MUT,
    GlyphProtocol.GLYPH_BURN,
    GlyphProtocol.GLYPH_CONTAINER,
    GlyphProtocol.GLYPH_ENCRYPTED,
    GlyphProtocol.GLYPH_TIMELOCK,
    GlyphProtocol.GLYPH_AUTHORITY,
    GlyphProtocol.GLYPH_WAVE,
))


def get_protocol_key(protocol_id: int) -> Optional[str]:
    """Get the canonical short name (e.g. 'NFT') for a protocol ID."""
    return PROTOCOL_KEYS.get(protocol_id)


def get_protocol_id(name: str) -> Optional[int]:
    """Look up a protocol ID by short name ('nft') or constant name ('GLYPH_NFT')."""
    key = name.strip().upper()
    if key.startswith('GLYPH_'):
        key = key[len('GLYPH_'):]
    return _PROTOCOL_IDS.get(key)


def get_protocol_name(protocol_id: int) -> str:
    """Get human-readable name for a protocol ID."""
    return PROTOCOL_NAMES.get(protocol_id, f'Unknown({protocol_id})')


def _key(protocol_id: int) -> str:
    return PROTOCOL_KEYS.get(protocol_id, str(protocol_id))


def validate_protocols(protocols: Iterable[int]) -> Tuple[bool, Optional[str]]:
    """
    Validate a protocol combination per Glyph v2 spec Section 3.5.

    Rules are checked in order and the first failure is returned:
    exclusions, requirements, standalone modifiers, then the BURN marker.
    Duplicate IDs are ignored and an empty combination is valid.

    Returns (valid, error_message).
    """
    # Distinct IDs, first-seen order
    ordered = list(dict.fromkeys(protocols))
    present = set(ordered)

    for a, b in PROTOCOL_EXCLUSIONS:
        if a in present and b in present:
            return False, f'Protocols {_key(a)} and {_key(b)} are mutually exclusive'

    for protocol in ordered:
        for required in PROTOCOL_REQUIREMENTS.get(protocol, ()):
            if required not in present:
                return False, f'Protocol {_key(protocol)} requires {_key(required)}'

    if len(ordered) == 1 and ordered[0] in PROTOCOLS_REQUIRE_BASE:
        return False, f'Protocol {_key(ordered[0])} cannot exist alone'

    # BURN is an action marker; it only makes sense on a token type
    if GlyphProtocol.GLYPH_BURN in present:
        if GlyphProtocol.GLYPH_FT not in present and GlyphProtocol.GLYPH_NFT not in present:
            return False, 'BURN must accompany FT or NFT'

    return True, None


# ------------------------------------------------------------------
# Protocol classification
# ------------------------------------------------------------------

# Most specific first; a valid combination takes the first entry it contains
_TOKEN_TYPES: List[Tuple[Tuple[int, ...], int, str]] = [
    ((GlyphProtocol.GLYPH_FT, GlyphProtocol.GLYPH_DMINT), GlyphTokenType.DMINT, 'dMint FT'),
    ((GlyphProtocol.GLYPH_FT,), GlyphTokenType.FT, 'Fungible Token'),
    ((GlyphProtocol.GLYPH_NFT, GlyphProtocol.GLYPH_WAVE), GlyphTokenType.WAVE, 'WAVE Name'),
    ((GlyphProtocol.GLYPH_NFT, GlyphProtocol.GLYPH_CONTAINER), GlyphTokenType.CONTAINER, 'Container'),
    ((GlyphProtocol.GLYPH_NFT, GlyphProtocol.GLYPH_AUTHORITY), GlyphTokenType.AUTHORITY, 'Authority'),
    ((GlyphProtocol.GLYPH_NFT, GlyphProtocol.GLYPH_ENCRYPTED), GlyphTokenType.NFT, 'Encrypted NFT'),
    ((GlyphProtocol.GLYPH_NFT, GlyphProtocol.GLYPH_MUT), GlyphTokenType.NFT, 'Mutable NFT'),
    ((GlyphProtocol.GLYPH_NFT,), GlyphTokenType.NFT, 'NFT'),
    ((GlyphProtocol.GLYPH_DAT,), GlyphTokenType.DAT, 'Data'),
]


def has_protocol(protocols: Iterable[int], protocol_id: int) -> bool:
    return protocol_id in set(protocols)


def _classify(protocols: Iterable[int]) -> Tuple[int, str]:
    present = set(protocols)
    valid, error = validate_protocols(present)
    if not valid:
        logger.debug(f'Unclassifiable protocols {sorted(present)}: {error}')
        return GlyphTokenType.UNKNOWN, 'Unknown'
    for required, type_id, label in _TOKEN_TYPES:
        if present.issuperset(required):
            return type_id, label
    return GlyphTokenType.UNKNOWN, 'Unknown'


def get_token_type_id(protocols: Iterable[int]) -> int:
    """Map a protocol combination to a stable token type ID.

    Combinations rejected by validate_protocols map to UNKNOWN.
    """
    return _classify(protocols)[0]


def get_token_type(protocols: Iterable[int]) -> str:
    """Display label for a protocol combination, 'Unknown' if invalid."""
    return _classify(protocols)[1]


# ------------------------------------------------------------------
# Metadata payloads and refs
# ------------------------------------------------------------------

def encode_metadata(metadata: Dict[str, Any]) -> bytes:
    """Encode a metadata dict as the CBOR payload carried in a reveal.

    Raises ValueError if the payload exceeds MAX_METADATA_SIZE.
    """
    payload = cbor2.dumps(metadata)
    if len(payload) > GlyphLimits.MAX_METADATA_SIZE:
        raise ValueError(f'Metadata is {len(payload):,d} bytes, '
                         f'limit is {GlyphLimits.MAX_METADATA_SIZE:,d}')
    return payload


def decode_cbor_metadata(data: bytes) -> Optional[Dict[str, Any]]:
    """Decode raw CBOR bytes into a metadata dict.

    Returns None if data is invalid CBOR or not a dict.
    """
    try:
        result = cbor2.loads(data)
    except cbor2.CBORDecodeError as e:
        logger.debug(f'Undecodable Glyph metadata: {e}')
        return None
    if not isinstance(result, dict):
        return None
    return result


def format_ref(txid_hex: str, vout: int) -> str:
    """Format a ref string as txid_vout."""
    return f'{txid_hex}_{vout}'


def parse_ref(ref_str: str) -> Tuple[str, int]:
    """Parse a ref string formatted as txid_vout."""
    txid_hex, sep, vout_str = ref_str.rpartition('_')
    if not sep or not txid_hex:
        raise ValueError(f'Invalid ref: {ref_str!r}')
    return txid_hex, int(vout_str)
