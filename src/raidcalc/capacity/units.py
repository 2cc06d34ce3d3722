# 1 TB as advertised by drive manufacturers
TB_TO_BYTES_DECIMAL = 1000000000000
# 1 TiB as reported by operating systems
TB_TO_BYTES_BINARY = 1099511627776


def to_binary_units(tb: float) -> float:
    """
    Convert an advertised (decimal) TB figure into binary TiB.
    Example: 12 TB is roughly 10.91 TiB.
    """
    return tb * TB_TO_BYTES_DECIMAL / TB_TO_BYTES_BINARY


def to_decimal_units(tib: float) -> float:
    """Convert a TiB figure back to its decimal TB equivalent."""
    return tib * TB_TO_BYTES_BINARY / TB_TO_BYTES_DECIMAL
