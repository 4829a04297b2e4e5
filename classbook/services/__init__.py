"""
Services Package

Business logic shared by the API blueprints and the CLI.
"""

from classbook.services import accounts, audit, booking, catalog, tokens

__all__ = ['accounts', 'audit', 'booking', 'catalog', 'tokens']
