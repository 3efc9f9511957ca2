"""Entities for banking domain."""

from tanflow.domain.banking.entities.banking_action import BankingAction

__all__ = ["BankingAction"]
