from solders.pubkey import Pubkey  # type: ignore[import-untyped]


class InvalidMintAddressError(ValueError):
    """Raised before any network call when a mint address is not a public key."""

    def __init__(self, address: str) -> None:
        super().__init__(f"Invalid Solana address: {address!r}")
        self.address = address


def is_valid_public_key(address: str) -> bool:
    """True for any 32-byte base58 key, on-curve or not (PDAs, program ids)."""
    if not isinstance(address, str) or not address:
        return False
    try:
        Pubkey.from_string(address)
    except Exception:
        return False
    return True
