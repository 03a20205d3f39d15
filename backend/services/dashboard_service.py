"""
dashboard_service.py — Dashboard aggregates
Category totals, overall income vs. expenses and the monthly trend, all
computed in SQL and optionally scoped to one user.

The three queries share a session but no snapshot: a write landing between
them can show up in a later part and not an earlier one.
"""

import logging
from decimal import Decimal

from sqlalchemy import select, func, case, extract
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from exceptions import PersistenceError
from models.category import Category
from models.item import Item
from schemas import CategoryTotal, OverallTotals, MonthlyTotal, DashboardData

logger = logging.getLogger(__name__)

ZERO = Decimal("0")


def _sum_of(item_type: str):
    return func.coalesce(func.sum(case((Item.type == item_type, Item.cost), else_=0)), 0)


def _scoped(stmt, user_id: int | None):
    # None means every user; any integer, even one with no items, filters.
    if user_id is not None:
        stmt = stmt.where(Item.user_id == user_id)
    return stmt


def _money(value) -> Decimal:
    return ZERO if value is None else Decimal(str(value))


def _execute(db: Session, stmt, name: str):
    try:
        return db.execute(stmt).all()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error while getting {name} data: {e}")
        raise PersistenceError(f"dashboard query '{name}' failed", query=name) from e


class DashboardAggregator:
    @staticmethod
    def category_totals(db: Session, user_id: int | None = None) -> list[CategoryTotal]:
        """Expenses and income per category that has at least one item."""
        stmt = _scoped(
            select(
                Category.name.label("category"),
                _sum_of("debit").label("expenses"),
                _sum_of("credit").label("income"),
            )
            .join(Category, Item.category_id == Category.id)
            .group_by(Category.name),
            user_id,
        )
        rows = _execute(db, stmt, "categories")
        return [
            CategoryTotal(category=r.category, expenses=_money(r.expenses), income=_money(r.income))
            for r in rows
        ]

    @staticmethod
    def overall_totals(db: Session, user_id: int | None = None) -> OverallTotals:
        """One row of totals; zeros when nothing matches."""
        stmt = _scoped(
            select(
                _sum_of("debit").label("expenses"),
                _sum_of("credit").label("income"),
            ).select_from(Item),
            user_id,
        )
        row = _execute(db, stmt, "incomeVsExpenses")[0]
        return OverallTotals(expenses=_money(row.expenses), income=_money(row.income))

    @staticmethod
    def monthly_trend(db: Session, user_id: int | None = None) -> list[MonthlyTotal]:
        """Totals per calendar month of created_at, oldest first."""
        year = extract("year", Item.created_at).label("year")
        month = extract("month", Item.created_at).label("month")
        stmt = _scoped(
            select(
                year,
                month,
                _sum_of("debit").label("expenses"),
                _sum_of("credit").label("income"),
            )
            .group_by(year, month)
            .order_by(year, month),
            user_id,
        )
        rows = _execute(db, stmt, "monthly")
        return [
            MonthlyTotal(
                month=f"{int(r.month):02d}",
                year=f"{int(r.year):04d}",
                expenses=_money(r.expenses),
                income=_money(r.income),
            )
            for r in rows
        ]

    @staticmethod
    def get_dashboard(db: Session, user_id: int | None = None) -> DashboardData:
        """All three aggregates, or PersistenceError naming the part that failed."""
        return DashboardData(
            categories=DashboardAggregator.category_totals(db, user_id),
            income_vs_expenses=DashboardAggregator.overall_totals(db, user_id),
            monthly=DashboardAggregator.monthly_trend(db, user_id),
        )
