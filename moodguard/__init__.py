"""
MoodGuard Gateway - Emotion-Aware Personal Finance Service

A FastAPI-based service that keeps an in-memory finance session and holds
outgoing transactions for manual review when the detected emotional state
makes an impulsive decision likely.
"""

__version__ = "0.1.0"
