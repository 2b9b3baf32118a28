"""JSON documents for generated boards.

A document carries the parameters, the board descriptor and, for random
boards, the forward solution recovered from generation, so a frontend can
rebuild the game without running the generator again.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional

from ..core.models import ForwardMove, GameParams
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


def build_document(
    params: GameParams,
    description: str,
    *,
    seed: Optional[int] = None,
    attempts: Optional[int] = None,
    solution: Optional[List[ForwardMove]] = None,
) -> Dict[str, Any]:
    width = params.width
    return {
        "created_at": datetime.now(timezone.utc).isoformat(),
        "params": params.encode(full=True),
        "width": params.width,
        "height": params.height,
        "board_type": params.board_type.value,
        "seed": seed,
        "attempts": attempts,
        "description": description,
        "rows": [description[y * width:(y + 1) * width] for y in range(params.height)],
        "solution": [move.encode() for move in solution] if solution is not None else None,
    }


def save_document(doc: Dict[str, Any], path: Path | str) -> Path:
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(json.dumps(doc, indent=2), encoding="utf-8")
    LOGGER.info("Board saved: %s", target)
    return target


def load_document(path: Path | str) -> Dict[str, Any]:
    return json.loads(Path(path).read_text(encoding="utf-8"))
