"""
service/api.py
==============
Optional FastAPI server that exposes the obstacle-avoidance computation as a
REST endpoint.

Start the server::

    python -m service.api          # → http://localhost:8000/wheel-command

The ``/wheel-command`` endpoint accepts a JSON body with ``readings`` (each
``{intensity, bearing_deg}``) and optional named ``params`` and returns the
clamped wheel velocities plus the intermediate brake / steer terms.

.. note::

   This server is **not** required to run the simulation.
   It exists for external integrations and testing.
"""

from __future__ import annotations

import logging
import math
from typing import List, Optional

import uvicorn
from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from avoidance.engine import explain_wheel_command
from avoidance.errors import ConfigurationError
from avoidance.params import ControllerParams
from avoidance.types import SensorReading

log = logging.getLogger("api")

# ── Pydantic request / response schemas ──────────────────────────────────────


class ReadingModel(BaseModel):
    """Single proximity reading."""
    intensity: float = Field(ge=0.0)
    bearing_deg: float


class ParamsModel(BaseModel):
    """Named controller parameters; omitted fields keep their defaults."""
    alpha: Optional[float] = None
    delta: Optional[float] = None
    velocity: Optional[float] = None


class WheelCommandRequest(BaseModel):
    readings: List[ReadingModel] = Field(default_factory=list)
    params: Optional[ParamsModel] = None


class ResultantModel(BaseModel):
    length: float
    angle_deg: float


class WheelCommandResponse(BaseModel):
    left: float
    right: float
    brake: float
    steer: float
    bias: float
    resultant: ResultantModel


# ── FastAPI application ──────────────────────────────────────────────────────

app = FastAPI(
    title="Foot-bot Obstacle Avoidance API",
    description="Fuses proximity readings into differential wheel velocities.",
    version="1.0",
)


@app.get("/params")
def default_params() -> dict:
    """Default controller parameters."""
    return ControllerParams().as_dict()


@app.post("/wheel-command", response_model=WheelCommandResponse)
def wheel_command(req: WheelCommandRequest) -> WheelCommandResponse:
    """Run one control cycle on the submitted readings."""
    try:
        named = req.params.model_dump(exclude_none=True) if req.params else {}
        params = ControllerParams.from_mapping(named)
    except ConfigurationError as exc:
        raise HTTPException(status_code=422, detail=str(exc))

    readings = [SensorReading.from_degrees(r.intensity, r.bearing_deg) for r in req.readings]
    resultant, terms, cmd = explain_wheel_command(readings, params)
    log.debug("wheel-command n=%d → L=%.2f R=%.2f", len(readings), cmd.left, cmd.right)
    return WheelCommandResponse(
        left=cmd.left,
        right=cmd.right,
        brake=terms.brake,
        steer=terms.steer,
        bias=terms.bias,
        resultant=ResultantModel(
            length=resultant.length,
            angle_deg=math.degrees(resultant.angle),
        ),
    )


# ── Standalone entry point ───────────────────────────────────────────────────

if __name__ == "__main__":
    print("Starting obstacle-avoidance API on http://0.0.0.0:8000 …")
    uvicorn.run(app, host="0.0.0.0", port=8000)
