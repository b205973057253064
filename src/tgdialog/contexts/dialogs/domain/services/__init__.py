from .dialog_id_codec import decode_dialog_id, decode_peer_id, encode_peer_id
from .dialog_id_ranges import (
    DIALOG_ID_BANDS,
    DIALOG_ID_HOLES,
    DialogIdBand,
    band_for_kind,
    find_band_by_dialog_id,
)

__all__ = [
    "DIALOG_ID_BANDS",
    "DIALOG_ID_HOLES",
    "DialogIdBand",
    "band_for_kind",
    "decode_dialog_id",
    "decode_peer_id",
    "encode_peer_id",
    "find_band_by_dialog_id",
]
