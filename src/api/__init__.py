"""
HTTP front ends (JSON API and web form) served by FastAPI.
"""
