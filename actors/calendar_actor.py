"""
Calendar Actor - owns the consumption store and answers day/month queries
"""
from thespian.actors import Actor, ActorExitRequest
from billing.monthly_summary import summarize_month
from models.calendar_month import InvalidDateError, month_index, month_name, validate_date
from reports.text_report import format_day_report, format_month_report
from storage.consumption_store import ConsumptionStore
from visualization.plotter import CalendarPlotter
import logging

logger = logging.getLogger(__name__)


class CalendarActor(Actor):
    """
    Single owner of a ConsumptionStore.
    Every lookup is handled in receiveMessage, one message at a time.
    """

    def __init__(self):
        super().__init__()
        self.store = ConsumptionStore()
        self.plot_dir = "plots"
        self.plotter = None  # created on first plot request

    def receiveMessage(self, message, sender):
        """Handle incoming messages"""
        if isinstance(message, ActorExitRequest):
            logger.info(f"Calendar actor stopping with {len(self.store)} cached days")
            return

        # Application messages must be dicts
        if not isinstance(message, dict):
            logger.warning(f"Received unknown message type: {type(message)}")
            return

        msg_type = message.get("type")

        try:
            if msg_type == "init":
                self._handle_init(message, sender)
            elif msg_type == "get_day":
                self._send_day(message, sender)
            elif msg_type == "get_month_summary":
                self._send_month_summary(message, sender)
            elif msg_type == "plot_day":
                self._plot_day(message, sender)
            elif msg_type == "plot_month":
                self._plot_month(message, sender)
            else:
                logger.warning(f"Ignoring message with unknown type: {msg_type!r}")
        except InvalidDateError as e:
            logger.warning(f"Rejected {msg_type}: {e}")
            self.send(sender, {"type": "error", "request": msg_type, "reason": str(e)})

    def _handle_init(self, message, sender):
        """Start a fresh session: new store, optional seed and plot directory"""
        seed = message.get("seed")
        self.store = ConsumptionStore(seed=seed)
        self.plot_dir = message.get("plot_dir", self.plot_dir)
        self.plotter = None
        logger.info(f"Calendar session initialized (seed={seed}, plot_dir={self.plot_dir})")
        self.send(sender, {"type": "ready", "seed": seed})

    def _send_day(self, message, sender):
        consumption = self.store.get_or_generate(*self._date_from(message))

        reply = consumption.to_dict()
        reply["type"] = "day_report"
        reply["text"] = format_day_report(consumption)
        self.send(sender, reply)

    def _send_month_summary(self, message, sender):
        month = self._month_from(message)
        summary = summarize_month(self.store, month)

        reply = summary.to_dict()
        reply["type"] = "month_summary"
        reply["text"] = format_month_report(summary)
        self.send(sender, reply)

    def _plot_day(self, message, sender):
        consumption = self.store.get_or_generate(*self._date_from(message))
        path = self._get_plotter().plot_day(consumption)
        self.send(sender, {"type": "plot_saved", "paths": [path]})

    def _plot_month(self, message, sender):
        month = self._month_from(message)
        summary = summarize_month(self.store, month)
        days = [self.store.get_or_generate(month, day) for day in range(1, summary.days + 1)]

        plotter = self._get_plotter()
        paths = [
            plotter.plot_month_totals(days, summary),
            plotter.plot_month_heatmap(days),
        ]
        self.send(sender, {"type": "plot_saved", "paths": [p for p in paths if p]})

    def _date_from(self, message):
        try:
            day = int(message.get("day", 0))
        except (TypeError, ValueError):
            raise InvalidDateError(f"Day must be a number, got {message.get('day')!r}")
        return validate_date(message.get("month") or "", day), day

    def _month_from(self, message) -> str:
        # canonical name, so "march" and "March" share cache entries
        return month_name(month_index(message.get("month") or ""))

    def _get_plotter(self) -> CalendarPlotter:
        if self.plotter is None:
            self.plotter = CalendarPlotter(output_dir=self.plot_dir)
        return self.plotter
