"""
WAVE Naming System Constants and Utilities

Implements REP-3011: WAVE Protocol - A Peer-to-Peer Radiant Blockchain Name System

WAVE names are registered along a prefix tree where each character maps to an
output index of the registration transaction:
- Character set: a-z (0-25), 0-9 (26-35), hyphen (36)
- Output 0: Claim Token
- Outputs 1-37: Branch outputs for child names
- Output index = char_index + 1

The character order is consensus-adjacent: indexers derive the branch output
for each character from it, so it must never change.
"""

import hashlib
import logging
from typing import Optional, Dict, Any, List, Tuple

from rxdconstants.lib.glyph import GlyphProtocol, GlyphVersion, UpdateOperation


logger = logging.getLogger(__name__)

# WAVE character set (37 characters)
WAVE_CHARS = 'abcdefghijklmnopqrstuvwxyz0123456789-'
WAVE_OUTPUT_COUNT = 38  # 1 claim + 37 branches

PUNYCODE_PREFIX = 'xn--'
ZONE_PATH = '/app/data/zone'
UPDATE_SCHEMA = 'glyph_update_v1'


class WaveError(ValueError):
    """Invalid input to a WAVE codec or builder."""


class WaveLimits:
    MIN_NAME_LENGTH = 1
    MAX_NAME_LENGTH = 63        # DNS label limit
    MAX_SUBDOMAIN_DEPTH = 127
    CHAR_COUNT = len(WAVE_CHARS)


# Glyph protocol combinations for WAVE names
class WaveProtocols:
    WAVE_NAME = (GlyphProtocol.GLYPH_NFT, GlyphProtocol.GLYPH_MUT, GlyphProtocol.GLYPH_WAVE)
    WAVE_NAME_IMMUTABLE = (GlyphProtocol.GLYPH_NFT, GlyphProtocol.GLYPH_WAVE)


# Metadata schema identifiers
class WaveSchema:
    NAMESPACE = 'rxd.wave'
    VERSION = 'wave_name_v1'
    TYPE = 'wave_name'


class ZoneRecordType:
    ADDRESS = 'address'      # Radiant payment address
    AVATAR = 'avatar'        # Avatar URL or content hash
    DISPLAY = 'display'      # Display name (Unicode)
    DESCRIPTION = 'desc'
    URL = 'url'
    EMAIL = 'email'
    A = 'A'                  # IPv4 address
    AAAA = 'AAAA'            # IPv6 address
    CNAME = 'CNAME'
    TXT = 'TXT'              # list of strings
    MX = 'MX'                # list of {priority, host}
    NS = 'NS'                # list of hosts
    CUSTOM_PREFIX = 'x-'


# Subdomain delegation permissions
class WavePermission:
    REGISTER = 'register'
    UPDATE = 'update'
    DELEGATE = 'delegate'
    TRANSFER = 'transfer'
    REVOKE = 'revoke'


# ------------------------------------------------------------------
# Character codec
# ------------------------------------------------------------------

def char_to_index(char: str) -> int:
    """Convert a character to its WAVE index (0-36)."""
    if not isinstance(char, str) or len(char) != 1:
        raise WaveError(f'Expected single character, got: {char!r}')
    idx = WAVE_CHARS.find(char.lower())
    if idx == -1:
        raise WaveError(f'Invalid WAVE character: {char!r}')
    return idx


def index_to_char(index: int) -> str:
    """Convert a WAVE index (0-36) to its character."""
    if index < 0 or index >= len(WAVE_CHARS):
        raise WaveError(f'Invalid WAVE index: {index} (must be 0-36)')
    return WAVE_CHARS[index]


def char_to_output_index(char: str) -> int:
    """Get the output index for a character's branch (1-37)."""
    return char_to_index(char) + 1


def output_index_to_char(output_index: int) -> str:
    """Get the character for a branch output index."""
    if output_index < 1 or output_index > WaveLimits.CHAR_COUNT:
        raise WaveError(f'Invalid branch output index: {output_index} (must be 1-37)')
    return index_to_char(output_index - 1)


# ------------------------------------------------------------------
# Names and domains
# ------------------------------------------------------------------

def is_punycode(name: str) -> bool:
    """Check if a name is a Punycode-encoded internationalized name."""
    return name.lower().startswith(PUNYCODE_PREFIX)


def validate_wave_name(name: str) -> Tuple[bool, Optional[str]]:
    """Validate a single WAVE label. Returns (valid, error_message)."""
    if not name:
        return False, 'Name cannot be empty'

    if len(name) > WaveLimits.MAX_NAME_LENGTH:
        return False, f'Name exceeds maximum length of {WaveLimits.MAX_NAME_LENGTH}'

    if name.startswith('-'):
        return False, 'Name cannot start with hyphen'

    if name.endswith('-'):
        return False, 'Name cannot end with hyphen'

    # Check for consecutive hyphens (except Punycode prefix)
    if '--' in name and not is_punycode(name):
        return False, 'Name cannot contain consecutive hyphens (except Punycode prefix)'

    # Check all characters are valid
    for char in name.lower():
        if char not in WAVE_CHARS:
            return False, f'Invalid character: {char}'

    return True, None


validate_label = validate_wave_name


def parse_labels(domain: str) -> List[str]:
    """Split a domain into labels, most specific first ('mail.alice' -> ['mail', 'alice'])."""
    return [label for label in domain.split('.') if label]


def join_labels(labels: List[str]) -> str:
    return '.'.join(labels)


def validate_domain(domain: str) -> Tuple[bool, Optional[str]]:
    """Validate a full domain including subdomains. Returns (valid, error_message)."""
    labels = parse_labels(domain)

    if not labels:
        return False, 'Domain cannot be empty'

    if len(labels) > WaveLimits.MAX_SUBDOMAIN_DEPTH:
        return False, f'Domain exceeds maximum depth of {WaveLimits.MAX_SUBDOMAIN_DEPTH}'

    for label in labels:
        valid, error = validate_wave_name(label)
        if not valid:
            return False, f'Invalid label "{label}": {error}'

    return True, None


def normalize_name(name: str) -> str:
    """Normalize a WAVE name (lowercase, strip whitespace)."""
    return name.lower().strip()


def name_to_hash(name: str) -> bytes:
    """Hash a normalized name for index lookup."""
    return hashlib.sha256(normalize_name(name).encode('utf-8')).digest()[:16]


def _check_name(name: str):
    valid, error = validate_wave_name(name)
    if not valid:
        logger.debug(f'Rejected WAVE name {name!r}: {error}')
        raise WaveError(f'Invalid name: {error}')


def get_character_path(name: str) -> List[Dict[str, Any]]:
    """
    Calculate the prefix-tree path for a name.

    Each step names the character, its alphabet index and the branch output
    that spends towards the next character.
    """
    _check_name(name)
    return [
        {
            'char': char,
            'index': char_to_index(char),
            'output_index': char_to_output_index(char),
        }
        for char in name.lower()
    ]


def estimate_resolution_size(name: str, update_count: int = 0) -> int:
    """
    Estimate the data size in bytes needed to resolve a name.

    Based on REP-3011: ~1KB per transaction in the path (one per character
    plus the claim) and ~500 bytes per zone update.
    """
    base_size = 1024
    update_size = update_count * 500
    return (len(name) + 1) * base_size + update_size


# ------------------------------------------------------------------
# Metadata builders
# ------------------------------------------------------------------

def create_wave_metadata(name: str, parent_ref: Optional[str],
                         zone: Optional[Dict[str, Any]] = None, *,
                         mutable: bool = True,
                         controller_ref: Optional[str] = None,
                         description: Optional[str] = None,
                         registered: Optional[int] = None,
                         delegations: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """
    Create Glyph metadata for a WAVE name registration.

    A mutable name (the default) carries protocols [NFT, MUT, WAVE] and a
    mutable block allowing zone updates; an immutable one carries
    [NFT, WAVE] only. parent_ref is None for a top-level name.

    Raises WaveError if the name is invalid.
    """
    _check_name(name)

    mutable = mutable is not False
    protocols = WaveProtocols.WAVE_NAME if mutable else WaveProtocols.WAVE_NAME_IMMUTABLE

    data: Dict[str, Any] = {
        'name': name,
        'parent': parent_ref,
    }
    if registered is not None:
        data['registered'] = registered
    data['zone'] = dict(zone or {})
    if delegations:
        data['delegations'] = dict(delegations)

    metadata: Dict[str, Any] = {
        'v': GlyphVersion.V2,
        'type': WaveSchema.TYPE,
        'p': list(protocols),
        'name': name,
        'app': {
            'namespace': WaveSchema.NAMESPACE,
            'schema': WaveSchema.VERSION,
            'data': data,
        },
    }

    if description:
        metadata['desc'] = description

    if mutable:
        metadata['mutable'] = {
            'allowed': True,
            'fields': [ZONE_PATH],
        }
        if controller_ref:
            metadata['mutable']['controller'] = controller_ref

    logger.debug(f'Built WAVE metadata for "{name}" with protocols {metadata["p"]}')
    return metadata


def create_zone_update(target_ref: str, updates: Dict[str, Any],
                       controller_ref: str) -> Dict[str, Any]:
    """Create a zone record update payload merging updates into a name's zone."""
    return {
        'v': GlyphVersion.V2,
        'schema': UPDATE_SCHEMA,
        'target': target_ref,
        'update': {
            'op': UpdateOperation.MERGE,
            'path': ZONE_PATH,
            'value': updates,
        },
        'auth': {
            'controller': controller_ref,
        },
    }
