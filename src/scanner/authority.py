"""Mint / freeze authority checks against the raw mint account.

Mint account prefix as read by this decoder (72 bytes):

    offset  size  field
    0       1     mint authority tag     (0 = None, 1 = Some)
    1       3     padding
    4       32    mint authority pubkey
    36      1     freeze authority tag   (0 = None, 1 = Some)
    37      3     padding
    40      32    freeze authority pubkey

Each authority is a COption<Pubkey> (``<B3x32s``). The buffer length is
validated before any field is read.

Token-2022 mints are not decoded here: their TLV extension layout is out
of scope, so they report safe with an explicit "not fully parsed" caveat.
"""

import struct
from dataclasses import dataclass

from loguru import logger
from solders.pubkey import Pubkey  # type: ignore[import-untyped]

from src.scanner.models import CheckResult, MintAccountSnapshot

TOKEN_2022_PROGRAM_ID = "TokenzQdBNbLqP5VEhdkAS6EUHtk1fMnhnWHSLpJwtsEg"

COPTION_PUBKEY = struct.Struct("<B3x32s")
MINT_LAYOUT_SIZE = 2 * COPTION_PUBKEY.size  # 72

OPTION_NONE = 0
OPTION_SOME = 1

NOT_PARSED_DETAIL = "Token-2022 mint: layout not fully parsed"


class MintLayoutError(ValueError):
    pass


@dataclass(frozen=True)
class AuthorityField:
    name: str
    offset: int
    weight: int


MINT_AUTHORITY_FIELD = AuthorityField(name="Mint Authority", offset=0, weight=30)
FREEZE_AUTHORITY_FIELD = AuthorityField(name="Freeze Authority", offset=36, weight=20)


def decode_authority(data: bytes, field: AuthorityField) -> str | None:
    """Decode one COption<Pubkey> authority. Returns base58 key or None."""
    end = field.offset + COPTION_PUBKEY.size
    if len(data) < max(end, MINT_LAYOUT_SIZE):
        raise MintLayoutError(
            f"Mint data too short: {len(data)} bytes, need {max(end, MINT_LAYOUT_SIZE)}"
        )

    tag, key = COPTION_PUBKEY.unpack_from(data, field.offset)
    if tag == OPTION_NONE:
        return None
    if tag != OPTION_SOME:
        raise MintLayoutError(f"{field.name}: invalid option tag {tag}")
    return str(Pubkey.from_bytes(key))


def _check_authority(
    snapshot: MintAccountSnapshot | None, field: AuthorityField
) -> CheckResult:
    if snapshot is None:
        return CheckResult(field.name, safe=False, detail="Account not found", weight=field.weight)

    try:
        if snapshot.owner == TOKEN_2022_PROGRAM_ID:
            return CheckResult(field.name, safe=True, detail=NOT_PARSED_DETAIL, weight=field.weight)

        authority = decode_authority(snapshot.data, field)
        if authority is None:
            return CheckResult(field.name, safe=True, detail="Disabled", weight=field.weight)
        return CheckResult(
            field.name,
            safe=False,
            detail=f"Enabled ({authority[:8]}...)",
            weight=field.weight,
        )
    except Exception as e:
        logger.debug(f"[AUTHORITY] {field.name} check failed: {e}")
        return CheckResult(
            field.name, safe=True, detail="Check unavailable", weight=field.weight, errored=True
        )


async def check_mint_authority(snapshot: MintAccountSnapshot | None) -> CheckResult:
    """Active mint authority means supply can still be inflated."""
    return _check_authority(snapshot, MINT_AUTHORITY_FIELD)


async def check_freeze_authority(snapshot: MintAccountSnapshot | None) -> CheckResult:
    """Active freeze authority means holder accounts can be frozen."""
    return _check_authority(snapshot, FREEZE_AUTHORITY_FIELD)
