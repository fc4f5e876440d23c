def format_byte(value: int) -> str:
    """
    Human-readable form of a byte value.
    Printable ASCII is shown as the character itself, anything else as 0xNN.
    """
    if 0x21 <= value <= 0x7E:
        return chr(value)
    return f"0x{value:02x}"
