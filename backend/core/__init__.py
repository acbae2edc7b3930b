"""Core backend infrastructure for the MentorMe backend.

Configuration, logging, database session management, the exception
hierarchy and argument checks shared by services and routes.
"""
