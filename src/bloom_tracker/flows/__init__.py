"""
Prefect flows for the report pipeline.

Flows:
- phenology: fetch (or reuse cached) yearly series, compute the multi-year
  bloom summary and the latest season's vegetation analysis, save both

Usage (local):
    python -m bloom_tracker.flows.phenology

Usage (Prefect):
    prefect server start  # Optional, for dashboard
    prefect deployment run 'phenology-report/default'
"""
