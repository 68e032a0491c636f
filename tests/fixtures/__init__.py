"""Shared test fixtures for the commitcheck test suite.

runners.py
    WorkingTreeRunner, scripted_runner() and the capture_console fixture.
"""
