"""
Script Relay package.

Provides:
- A stateless relay that forwards anecdote text to the Claude Messages API
- FastAPI app exposing the relay at /generate-script
- A small client and CLI for calling a running relay
"""
