"""UTF-8 decoding and rune stepping over byte strings."""

UTF_INVALID = 0xFFFD
UTF_SIZ = 4

_BYTE = (0x80, 0x00, 0xC0, 0xE0, 0xF0)
_MASK = (0xC0, 0x80, 0xE0, 0xF0, 0xF8)
_MIN = (0, 0, 0x80, 0x800, 0x10000)
_MAX = (0x10FFFF, 0x7F, 0x7FF, 0xFFFF, 0x10FFFF)


def _byte_at(data, index):
    """Byte at *index*, with anything past either end reading as NUL."""
    if 0 <= index < len(data):
        return data[index]
    return 0


def _decode_byte(byte):
    """Return the payload bits of *byte* and its kind.

    Kind 0 is a continuation byte, 1..4 a lead byte of that sequence length,
    and 5 a byte that fits no pattern.
    """
    for kind, (mask, pattern) in enumerate(zip(_MASK, _BYTE)):
        if byte & mask == pattern:
            return byte & ~mask & 0xFF, kind
    return 0, len(_MASK)


def _validate(value, length):
    if not _MIN[length] <= value <= _MAX[length] or 0xD800 <= value <= 0xDFFF:
        return UTF_INVALID
    return value


def decode(data, limit=UTF_SIZ):
    """Decode one code point from the start of *data*.

    Returns ``(codepoint, consumed)``. Malformed input yields UTF_INVALID;
    ``consumed`` is 0 when the sequence does not fit within *limit* bytes.
    """
    if not limit:
        return UTF_INVALID, 0
    value, length = _decode_byte(_byte_at(data, 0))
    if not 1 <= length <= UTF_SIZ:
        return UTF_INVALID, 1
    consumed = 1
    while consumed < limit and consumed < length:
        part, kind = _decode_byte(_byte_at(data, consumed))
        value = (value << 6) | part
        if kind:
            return UTF_INVALID, consumed
        consumed += 1
    if consumed < length:
        return UTF_INVALID, 0
    return _validate(value, length), length


def next_rune(data, pos, inc):
    """Return the offset of the neighbouring rune start from *pos*.

    *inc* is +1 to step forward or -1 to step back.
    """
    n = pos + inc
    while n + inc >= 0 and _byte_at(data, n) & 0xC0 == 0x80:
        n += inc
    return n