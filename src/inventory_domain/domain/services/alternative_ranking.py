# src/inventory_domain/domain/services/alternative_ranking.py
"""Ranking strategies for substitute products offered when an item is out of stock.

A strategy only orders candidates. Eligibility (same category, in stock, not the
product itself) and the result size are decided by the alert service.
"""
from abc import ABC, abstractmethod

from src.inventory_domain.domain.entities.product import Product


class IAlternativeRankingStrategy(ABC):

    @abstractmethod
    def rank(self, candidates: list[Product]) -> list[Product]:
        """Returns the candidates in preference order."""
        pass


class CatalogOrderRankingStrategy(IAlternativeRankingStrategy):
    """First match wins: keeps catalog order."""

    def rank(self, candidates: list[Product]) -> list[Product]:
        return list(candidates)


class LowestPriceRankingStrategy(IAlternativeRankingStrategy):
    """Cheapest substitute first; ties keep catalog order."""

    def rank(self, candidates: list[Product]) -> list[Product]:
        return sorted(candidates, key=lambda p: p.price)


class HighestStockRankingStrategy(IAlternativeRankingStrategy):
    """Best-stocked substitute first; ties keep catalog order."""

    def rank(self, candidates: list[Product]) -> list[Product]:
        return sorted(candidates, key=lambda p: p.stock, reverse=True)
