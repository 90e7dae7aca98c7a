# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-09-16
# Description: EmbeddingRecord
# -----------------------------------------------------------------------------
from dataclasses import dataclass

import numpy as np

from records.types import RecordKind


@dataclass
class EmbeddingRecord:
    """Embedding vector + the canonical text it was computed from."""
    record_id: str
    kind: RecordKind
    vector: np.ndarray
    text: str
