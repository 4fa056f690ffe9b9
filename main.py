"""
main.py
--------
Furniture arrangement entrypoint

Modes:
1️⃣ HTTP API (FastAPI `app`): POST /arrange, GET /archetype, GET /health
2️⃣ CLI: python main.py --input request.json [--out result.json] [--preview preview.png]

Both take a room label plus the placed objects and return ground-plane
(x, z) positions keyed by object id. Height and rotation stay with the caller.
"""

import os
import json
import logging
import argparse
import traceback
from typing import List, Optional, Tuple

from dotenv import load_dotenv
from fastapi import Depends, FastAPI, HTTPException
from pydantic import BaseModel, Field, field_validator

from arrange import (
    LayoutConfig,
    PlacedObject,
    arrange_objects,
    default_assets,
    load_config,
    select_archetype,
)
from common.io_utils import log, read_json, setup_logging, write_json
from common.plot_utils import visualize_arrangement

# -----------------------------------------------------
# Environment setup
# -----------------------------------------------------

load_dotenv()

ARRANGE_CONFIG_PATH = os.getenv("ARRANGE_CONFIG")

# -----------------------------------------------------
# Request / response models
# -----------------------------------------------------

class ArrangeItem(BaseModel):
    id: str
    asset_identity: str
    scale: Tuple[float, float, float] = (1.0, 1.0, 1.0)


class ArrangeRequest(BaseModel):
    room_label: str = ""
    items: List[ArrangeItem] = Field(default_factory=list)

    @field_validator("items")
    @classmethod
    def _unique_ids(cls, items):
        seen = set()
        for item in items:
            if item.id in seen:
                raise ValueError(f"duplicate item id: {item.id}")
            seen.add(item.id)
        return items


class ArrangeResponse(BaseModel):
    archetype: str
    positions: dict
    iterations: int
    converged: bool
    residual_overlaps: List[List[str]]
    message: Optional[str] = None
    preview_image: Optional[str] = None

# -----------------------------------------------------
# Core pipeline
# -----------------------------------------------------

def run_arrangement(
    request: ArrangeRequest,
    config: LayoutConfig,
    preview_path: Optional[str] = None,
) -> dict:
    """
    Arrange the request's items and return a JSON-ready result.
    Writes a preview PNG when preview_path is given and there is something to draw.
    """
    objects = [PlacedObject(item.id, item.asset_identity, item.scale) for item in request.items]
    result = arrange_objects(request.room_label, objects, config)

    payload = result.as_dict()
    if result.is_empty:
        payload["message"] = "nothing to arrange"
    elif preview_path:
        payload["preview_image"] = visualize_arrangement(result, config, preview_path)
    return payload

# -----------------------------------------------------
# FastAPI setup
# -----------------------------------------------------

app = FastAPI(title="Furniture Arrange API", version="0.1.0")


def get_config() -> LayoutConfig:
    return load_config(ARRANGE_CONFIG_PATH)


@app.get("/health")
async def health():
    return {"status": "ok"}


@app.get("/archetype")
async def archetype_api(room_label: str = "", config: LayoutConfig = Depends(get_config)):
    """Archetype for a room label and the starter assets suggested for it."""
    archetype = select_archetype(room_label, config.archetype_rules)
    return {"room_label": room_label, "archetype": archetype.value, "default_assets": default_assets(archetype)}


@app.post("/arrange", response_model=ArrangeResponse)
async def arrange_api(request: ArrangeRequest, config: LayoutConfig = Depends(get_config)):
    """Arrange placed objects for a room label."""
    try:
        return run_arrangement(request, config)
    except Exception as e:
        log(f"❌ Arrangement failed: {e}", "ERROR")
        raise HTTPException(status_code=500, detail=str(e))

# -----------------------------------------------------
# CLI mode
# -----------------------------------------------------

def main(argv: Optional[List[str]] = None) -> dict:
    parser = argparse.ArgumentParser(description="Arrange placed furniture for a room label")
    parser.add_argument("--input", required=True, help="Path to request JSON ({room_label, items})")
    parser.add_argument("--config", default=ARRANGE_CONFIG_PATH, help="Optional layout config JSON")
    parser.add_argument("--out", default=None, help="Write the result JSON here")
    parser.add_argument("--preview", default=None, help="Write a PNG preview here")
    parser.add_argument("--verbose", action="store_true", help="Debug logging")
    args = parser.parse_args(argv)

    setup_logging(logging.DEBUG if args.verbose else logging.INFO)

    try:
        request = ArrangeRequest(**read_json(args.input))
        config = load_config(args.config)
        results = run_arrangement(request, config, args.preview)
    except Exception as e:
        log(f"❌ Arrangement failed: {e}", "ERROR")
        traceback.print_exc()
        raise

    if args.out:
        write_json(results, args.out)
        log(f"✅ Result saved → {args.out}", "OK")
    return results


if __name__ == "__main__":
    results = main()
    print(json.dumps(results, indent=2))
