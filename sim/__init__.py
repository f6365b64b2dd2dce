"""
sim — Simulation host
=====================

Modules
-------
world
    :class:`World` robot manager and two-phase tick loop.
robot
    :class:`FootBot` pose, drive and controller wiring.
proximity
    :class:`ProximitySensorRing` ray-cast proximity sensors.
arena
    :class:`Arena` walls and cylinders.
sim_bridge
    :class:`SimBridge` background-thread orchestrator.
experiment
    Headless runs and pandas telemetry.
physics
    Low-level kinematics and ray-casting helpers.
"""
