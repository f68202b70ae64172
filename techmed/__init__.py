"""
TechMed

A FastAPI-based backend for clinic management: clients, professionals,
clinics, specialties, schedules and medical records.
"""

__version__ = "1.0.0"
