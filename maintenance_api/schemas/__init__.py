"""Pydantic schemas package.

Folder intent:
  common.py          — ApiModel base + HealthResponse (all schemas inherit ApiModel)
  vehicle.py         — Vehicle response model
  service_record.py  — Maintenance record request/response models
"""
