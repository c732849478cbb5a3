"""
Aggregate statistics over the citizen registry.

Every call recomputes the figures. The four sub-queries do not depend on each
other, so ``summary`` runs each one on its own worker thread, and therefore on
its own store connection taken from the pool, and only assembles the result
once all of them have returned; if any one fails the whole call fails.

Sub-queries read committed data through their own connections, so they do not
see rows written inside a caller's still-open transaction.
"""

import asyncio
import logging

from asgiref.sync import sync_to_async
from django.db import connection
from django.db.models import Count
from django.utils import timezone

from registry.models import Citizen

logger = logging.getLogger(__name__)


def _run_on_own_connection(query, *args):
    try:
        return query(*args)
    finally:
        # Worker threads are reused; hand the connection back to the pool
        connection.close()


class StatisticsService:
    """Service computing registry-wide counts and distributions."""

    async def summary(self) -> dict:
        """
        Return total citizens, today's registrations and the distributions by
        state of origin and by gender.

        "Today" is the current date in the configured ``TIME_ZONE``. Both
        distributions include a ``None`` group for records without a value,
        so each of them sums to ``total_citizens``.
        """
        today = timezone.localdate()

        total, today_count, states, genders = await asyncio.gather(
            self._query(Citizen.objects.count),
            self._query(Citizen.objects.filter(created_at__date=today).count),
            self._query(self._distribution, "state_of_origin"),
            self._query(self._distribution, "gender"),
        )

        logger.debug(f"Computed statistics: total={total} today={today_count}")
        return {
            "total_citizens": total,
            "today_registrations": today_count,
            "state_distribution": states,
            "gender_distribution": genders,
        }

    async def _query(self, query, *args):
        return await sync_to_async(_run_on_own_connection, thread_sensitive=False)(query, *args)

    def _distribution(self, field: str) -> list:
        rows = Citizen.objects.values(field).annotate(count=Count("id")).order_by(field)
        return [{field: row[field], "count": row["count"]} for row in rows]
