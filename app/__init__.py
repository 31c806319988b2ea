"""Notifications API for the digital learning platform."""
