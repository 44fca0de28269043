BYTES_PER_KIB = 1024
BYTES_PER_MIB = BYTES_PER_KIB**2
BYTES_PER_GIB = BYTES_PER_KIB**3


def format_size(num_bytes: int) -> str:
    """Render a byte count in the largest binary unit it fills (B, KiB, MiB, GiB)."""
    if num_bytes >= BYTES_PER_GIB:
        return f"{num_bytes / BYTES_PER_GIB:.2f} GiB"
    if num_bytes >= BYTES_PER_MIB:
        return f"{num_bytes / BYTES_PER_MIB:.2f} MiB"
    if num_bytes >= BYTES_PER_KIB:
        return f"{num_bytes / BYTES_PER_KIB:.2f} KiB"
    return f"{num_bytes} B"
