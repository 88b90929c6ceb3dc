"""
Shared service utilities.

- http.py - requests session with retry/backoff used by every remote source
"""
