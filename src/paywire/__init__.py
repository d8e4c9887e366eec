"""Typed async clients for the Stripe and GitHub REST APIs."""

__version__ = "0.1.0"
