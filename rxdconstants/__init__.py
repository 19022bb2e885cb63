version = 'rxdconstants 1.0.0'
version_short = version.split()[-1]

# Top-level names resolved lazily from their lib module
_EXPORTS = {
    'Opcodes': 'opcodes',
    'get_opcode_name': 'opcodes',
    'Limits': 'limits',
    'ScriptFlags': 'flags',
    'SigHashType': 'flags',
    'get_network': 'networks',
    'NetworkParams': 'networks',
    'GlyphProtocol': 'glyph',
    'validate_protocols': 'glyph',
    'encode_metadata': 'glyph',
    'validate_wave_name': 'wave',
    'validate_domain': 'wave',
    'get_character_path': 'wave',
    'create_wave_metadata': 'wave',
    'create_zone_update': 'wave',
    'WaveError': 'wave',
}


def _lazy_import(name):
    """Lazy import so a single table does not pull in every module."""
    import importlib
    module = _EXPORTS.get(name)
    if module is None:
        raise AttributeError(f'module {__name__!r} has no attribute {name!r}')
    mod = importlib.import_module(f'rxdconstants.lib.{module}')
    return getattr(mod, name)


def __getattr__(name):
    return _lazy_import(name)
