from __future__ import annotations

from datetime import date
from typing import Any
from typing import Iterable
from typing import List
from typing import Optional

from pydantic import ValidationError

from zocal import LOGGER
from zocal.entities.constants import CalendarVariant
from zocal.entities.constants import TODAY
from zocal.entities.event import Event
from zocal.entities.event import ReminderStatus
from zocal.use_cases.event_recurrence import DEFAULT_RECURRENCE
from zocal.use_cases.event_recurrence import EventRecurrence
from zocal.utils.exceptions import InvalidDateError


class ReminderPlanner:
    """Decides which events are due an e-mail reminder on a given day.

    Sending and scheduling belong to the caller; this only compares the
    days left until the Zoroastrian occurrence with the event's lead time.
    """

    def __init__(self, recurrence: EventRecurrence):
        self.recurrence = recurrence

    def reminder_status(
        self, event: Any, variant: CalendarVariant, today: Optional[date] = None
    ) -> ReminderStatus:
        variant = CalendarVariant.parse(variant)
        source = Event.coerce(event)
        days_until = self.recurrence.days_until_next_occurrence(source, variant, today)

        if days_until == TODAY:
            numeric_days: Optional[int] = 0
        elif isinstance(days_until, int):
            numeric_days = days_until
        else:
            numeric_days = None

        enabled = source.reminder_days > 0
        return ReminderStatus(
            event_id=source.id,
            event_name=source.name,
            event_date=source.event_date,
            reminder_days=source.reminder_days,
            days_until=days_until,
            due_today=enabled and numeric_days == source.reminder_days,
            send_immediately=(
                enabled
                and numeric_days is not None
                and 0 <= numeric_days <= source.reminder_days
            ),
            calendar_type=variant,
        )

    def upcoming_reminders(
        self,
        events: Iterable[Any],
        variant: CalendarVariant,
        today: Optional[date] = None,
    ) -> List[ReminderStatus]:
        """Status of every event with reminders enabled; unreadable events are skipped."""
        statuses = []
        for event in events:
            try:
                status = self.reminder_status(event, variant, today)
            except (ValidationError, InvalidDateError) as e:
                LOGGER.error(f"Failed to process reminder for event {event!r}: {e}")
                continue
            if status.reminder_days > 0:
                statuses.append(status)
        return statuses


DEFAULT_REMINDER_PLANNER = ReminderPlanner(DEFAULT_RECURRENCE)
