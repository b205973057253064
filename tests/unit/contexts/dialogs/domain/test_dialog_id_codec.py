from __future__ import annotations

import pytest

from tgdialog.contexts.dialogs.domain import (
    DIALOG_ID_BANDS,
    DIALOG_ID_HOLES,
    DialogIdBand,
    decode_dialog_id,
    decode_peer_id,
    encode_peer_id,
)
from tgdialog.contexts.dialogs.domain.services import dialog_id_codec
from tgdialog.shared_kernel.primitives import MAX_SAFE_INTEGER, MIN_SAFE_INTEGER, PeerKind, PeerRef

_UNSAFE_VALUES = [
    MAX_SAFE_INTEGER + 1,
    MIN_SAFE_INTEGER - 1,
    float("inf"),
    float("-inf"),
    float("nan"),
    10.2,
    123.456,
    True,
]

_RANGE_EDGES = [
    (-4_000_000_000_000, PeerKind.MONOFORUM, 3_000_000_000_000),
    (-2_002_147_483_649, PeerKind.MONOFORUM, 1_002_147_483_649),
    (-2_002_147_483_648, PeerKind.SECRET_CHAT, -2_147_483_648),
    (-1_997_852_516_353, PeerKind.SECRET_CHAT, 2_147_483_647),
    (-1_997_852_516_352, PeerKind.SUPERGROUP, 997_852_516_352),
    (-1_000_000_000_001, PeerKind.SUPERGROUP, 1),
    (-999_999_999_999, PeerKind.GROUP, 999_999_999_999),
    (-1, PeerKind.GROUP, 1),
    (1, PeerKind.USER, 1),
    (1_099_511_627_775, PeerKind.USER, 1_099_511_627_775),
]

_INNER_VALUES = [
    (500_000_000_000, PeerKind.USER, 500_000_000_000),
    (-500_000_000_000, PeerKind.GROUP, 500_000_000_000),
    (-1_500_000_000_000, PeerKind.SUPERGROUP, 500_000_000_000),
    (-3_500_000_000_000, PeerKind.MONOFORUM, 2_500_000_000_000),
    (-2_000_000_000_000, PeerKind.SECRET_CHAT, 0),
]


@pytest.mark.parametrize(("dialog_id", "kind", "peer_id"), _RANGE_EDGES + _INNER_VALUES)
def test_decode_dialog_id_maps_value_to_peer_ref(
    dialog_id: int,
    kind: PeerKind,
    peer_id: int,
) -> None:
    assert decode_dialog_id(dialog_id) == PeerRef(kind=kind, id=peer_id)


@pytest.mark.parametrize(("dialog_id", "kind", "peer_id"), _RANGE_EDGES + _INNER_VALUES)
def test_encode_peer_id_is_inverse_of_decode(dialog_id: int, kind: PeerKind, peer_id: int) -> None:
    assert encode_peer_id(kind, peer_id) == dialog_id
    assert encode_peer_id(kind.value, peer_id) == dialog_id


@pytest.mark.parametrize(("dialog_id", "kind", "peer_id"), _RANGE_EDGES + _INNER_VALUES)
def test_decode_peer_id_returns_id_for_matching_kind(
    dialog_id: int,
    kind: PeerKind,
    peer_id: int,
) -> None:
    assert decode_peer_id(kind, dialog_id) == peer_id


def test_decode_dialog_id_returns_none_for_holes() -> None:
    """
    Verify both unassigned dialog ids never decode to a peer.

    Args:
        None.
    Returns:
        None.
    Assumptions:
        Holes are `0` and `-10**12`.
    Raises:
        AssertionError: If a hole decodes to some peer.
    Side Effects:
        None.
    """
    assert DIALOG_ID_HOLES == (-1_000_000_000_000, 0)
    assert decode_dialog_id(0) is None
    assert decode_dialog_id(-1_000_000_000_000) is None
    for kind in PeerKind:
        assert decode_peer_id(kind, 0) is None
        assert decode_peer_id(kind, -1_000_000_000_000) is None


@pytest.mark.parametrize("dialog_id", [1_099_511_627_776, -4_000_000_000_001, 2**52])
def test_decode_dialog_id_returns_none_outside_every_band(dialog_id: int) -> None:
    assert decode_dialog_id(dialog_id) is None


@pytest.mark.parametrize("value", _UNSAFE_VALUES)
def test_every_operation_rejects_non_safe_integers(value: object) -> None:
    assert decode_dialog_id(value) is None
    for kind in PeerKind:
        assert decode_peer_id(kind, value) is None
        assert encode_peer_id(kind, value) is None


def test_operations_accept_integral_float_input() -> None:
    assert decode_dialog_id(-1.0) == PeerRef(kind=PeerKind.GROUP, id=1)
    assert encode_peer_id(PeerKind.USER, 42.0) == 42


@pytest.mark.parametrize(
    ("kind", "peer_id"),
    [
        (PeerKind.USER, 0),
        (PeerKind.USER, 1_099_511_627_776),
        (PeerKind.USER, -5),
        (PeerKind.GROUP, 0),
        (PeerKind.GROUP, 1_000_000_000_000),
        (PeerKind.SUPERGROUP, 0),
        (PeerKind.SUPERGROUP, 997_852_516_353),
        (PeerKind.MONOFORUM, 1_002_147_483_648),
        (PeerKind.MONOFORUM, 3_000_000_000_001),
        (PeerKind.SECRET_CHAT, -2_147_483_649),
        (PeerKind.SECRET_CHAT, 2_147_483_648),
    ],
)
def test_encode_peer_id_returns_none_outside_kind_domain(kind: PeerKind, peer_id: int) -> None:
    assert encode_peer_id(kind, peer_id) is None


def test_encode_and_decode_peer_id_reject_unknown_kind() -> None:
    assert encode_peer_id("channel", 1) is None
    assert decode_peer_id("channel", -1) is None


@pytest.mark.parametrize(
    ("kind", "dialog_id"),
    [
        (PeerKind.USER, -1),
        (PeerKind.GROUP, 1),
        (PeerKind.SUPERGROUP, -1),
        (PeerKind.MONOFORUM, -1),
        (PeerKind.SECRET_CHAT, -1),
        (PeerKind.GROUP, -1_000_000_000_001),
        (PeerKind.SUPERGROUP, -2_000_000_000_000),
        (PeerKind.SECRET_CHAT, -3_000_000_000_000),
        (PeerKind.MONOFORUM, 1),
    ],
)
def test_decode_peer_id_returns_none_for_mismatched_kind(kind: PeerKind, dialog_id: int) -> None:
    assert decode_peer_id(kind, dialog_id) is None


@pytest.mark.parametrize(
    ("kind", "peer_id"),
    [
        (PeerKind.USER, 9_091_348_234),
        (PeerKind.GROUP, 43_138_491),
        (PeerKind.SUPERGROUP, 12_729_042_939),
        (PeerKind.MONOFORUM, 2_987_658_076_159),
        (PeerKind.SECRET_CHAT, 2_140_000_000),
    ],
)
def test_peer_id_roundtrips_through_dialog_id(kind: PeerKind, peer_id: int) -> None:
    encoded = encode_peer_id(kind, peer_id)

    assert encoded is not None
    assert decode_peer_id(kind, encoded) == peer_id


def test_every_band_edge_roundtrips_and_stays_in_kind_domain() -> None:
    """
    Verify decode/encode symmetry on both edges and just outside every band.

    Args:
        None.
    Returns:
        None.
    Assumptions:
        Range table is the single source of truth for kind domains.
    Raises:
        AssertionError: If any edge fails to round-trip or neighbour leaks into band.
    Side Effects:
        None.
    """
    for band in DIALOG_ID_BANDS:
        for dialog_id in (band.min_dialog_id, band.max_dialog_id):
            ref = decode_dialog_id(dialog_id)
            assert ref is not None
            assert ref.kind is band.kind
            assert band.min_peer_id <= ref.id <= band.max_peer_id
            assert encode_peer_id(ref.kind, ref.id) == dialog_id
        for peer_id in (band.min_peer_id - 1, band.max_peer_id + 1):
            assert encode_peer_id(band.kind, peer_id) is None
        below = decode_dialog_id(band.min_dialog_id - 1)
        above = decode_dialog_id(band.max_dialog_id + 1)
        assert below is None or below.kind is not band.kind
        assert above is None or above.kind is not band.kind


def test_encode_peer_id_returns_none_when_encoded_value_is_not_safe_integer(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """
    Verify encoder rejects dialog id that overflows safe-integer boundary.

    Args:
        monkeypatch: pytest monkeypatch fixture.
    Returns:
        None.
    Assumptions:
        Real range table never overflows, so an oversized band is injected.
    Raises:
        AssertionError: If encoder returns value beyond `2**53 - 1`.
    Side Effects:
        None.
    """
    oversized_band = DialogIdBand(
        kind=PeerKind.USER,
        min_dialog_id=MAX_SAFE_INTEGER - 4,
        max_dialog_id=MAX_SAFE_INTEGER + 5,
        to_peer_id=lambda dialog_id: dialog_id - MAX_SAFE_INTEGER + 5,
        to_dialog_id=lambda peer_id: peer_id + MAX_SAFE_INTEGER - 5,
    )
    monkeypatch.setattr(dialog_id_codec, "band_for_kind", lambda kind: oversized_band)

    assert encode_peer_id(PeerKind.USER, 5) == MAX_SAFE_INTEGER
    assert encode_peer_id(PeerKind.USER, 6) is None
    assert encode_peer_id(PeerKind.USER, 10) is None
