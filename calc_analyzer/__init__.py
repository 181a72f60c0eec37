"""Interactive Calculator & Data Analyzer."""

__version__ = "0.1.0"
