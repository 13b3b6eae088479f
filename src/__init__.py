"""
Package marker for source code under `src`.
It holds the car price dashboard and the shared settings and logging helpers under one import path.
"""
