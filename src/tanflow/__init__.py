"""tanflow - strong customer authentication flows for FinTS sessions."""

__version__ = "0.1.0"
