"""Utility modules for findr."""
