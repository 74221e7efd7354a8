"""Routers package — HTTP endpoint definitions.

Files:
  vehicles.py — /vehicles and /vehicle/* routes (vehicles and their maintenance records)

Rule: Routers only handle HTTP (request parsing, response shaping).
      All business logic delegates to maintenance_api/services/.
"""
