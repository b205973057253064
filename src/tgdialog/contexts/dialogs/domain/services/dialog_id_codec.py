from __future__ import annotations

from typing import Any

from tgdialog.shared_kernel.primitives import PeerKind, PeerRef, to_safe_integer

from .dialog_id_ranges import band_for_kind, find_band_by_dialog_id


def decode_dialog_id(dialog_id: Any) -> PeerRef | None:
    """
    Decode flat Bot API dialog id into typed peer reference.

    Args:
        dialog_id: Candidate dialog id, usually `chat_id` from a JSON payload.
    Returns:
        PeerRef | None: Peer kind and scoped id, or None for holes, values outside
        every band and non-safe-integer input.
    Assumptions:
        Integral floats are treated as their exact integer value.
    Raises:
        None.
    Side Effects:
        None.
    """
    exact = to_safe_integer(dialog_id)
    if exact is None:
        return None
    band = find_band_by_dialog_id(exact)
    if band is None:
        return None
    return PeerRef(kind=band.kind, id=band.to_peer_id(exact))


def decode_peer_id(kind: PeerKind | str, dialog_id: Any) -> int | None:
    """
    Decode dialog id and return scoped id only when it belongs to requested kind.

    Args:
        kind: Expected peer kind (member or wire tag).
        dialog_id: Candidate dialog id.
    Returns:
        int | None: Scoped peer id, or None on kind mismatch, hole or unsafe input.
    Assumptions:
        Callers use this to narrow dialog kind, so mismatch is not an error.
    Raises:
        None.
    Side Effects:
        None.
    """
    expected_kind = _parse_kind(kind)
    if expected_kind is None:
        return None
    ref = decode_dialog_id(dialog_id)
    if ref is None or ref.kind is not expected_kind:
        return None
    return ref.id


def encode_peer_id(kind: PeerKind | str, peer_id: Any) -> int | None:
    """
    Encode scoped peer id of given kind into flat Bot API dialog id.

    Args:
        kind: Peer kind (member or wire tag).
        peer_id: Candidate id inside kind's own id space.
    Returns:
        int | None: Dialog id, or None when id is not a safe integer, is outside
        kind's domain, or the encoded value would not be a safe integer.
    Assumptions:
        Kind domains are derived from the range table.
    Raises:
        None.
    Side Effects:
        None.
    """
    parsed_kind = _parse_kind(kind)
    if parsed_kind is None:
        return None
    exact = to_safe_integer(peer_id)
    if exact is None:
        return None
    band = band_for_kind(parsed_kind)
    if not band.contains_peer_id(exact):
        return None
    # Защита от переполнения, если константы когда-нибудь поменяются.
    return to_safe_integer(band.to_dialog_id(exact))


def _parse_kind(kind: Any) -> PeerKind | None:
    try:
        return PeerKind.parse(kind)
    except ValueError:
        return None


__all__ = [
    "decode_dialog_id",
    "decode_peer_id",
    "encode_peer_id",
]
