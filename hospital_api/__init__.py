"""
Hospital dashboard API.

REST endpoints for patients, doctors, appointments, medical records and
administration, persisted as one JSON file per collection.
"""
