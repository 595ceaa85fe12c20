from .generator import generate_summary

__all__ = ["generate_summary"]
