"""Game domain services: evaluation, turns and the simulated opponent.

This package contains the game mechanics imported by the Socket.IO
handlers, keeping transport concerns separated from core game rules.
"""
