"""
Local inference client package.

Provides:
- An async client for a local inference server's /api/generate endpoint
- A command-line runner for one-off generations
- A FastAPI proxy exposing the client over HTTP
"""
