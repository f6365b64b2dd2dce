"""
service — Optional HTTP front-end
=================================

Modules
-------
api
    FastAPI application exposing the wheel-command computation.
"""
