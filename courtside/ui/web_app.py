"""
Web application module for the Courtside schedule viewer.

This module contains the Flask web server that renders the schedule page and
provides JSON API endpoints for the filter actions. It is the presentation
adapter of the viewer: it subscribes to the ScheduleSession and renders
whatever the session last published.
"""
import logging
import os
import threading
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional

from flask import Flask, jsonify, redirect, render_template, request, url_for

from ..models import ScheduleEntry
from ..services import ScheduleLoadError, ScheduleSession, ServiceFactory
from ..utils import fmt_clock, now_dt
from ..utils import constants

logger = logging.getLogger(__name__)


class WebAppState:
    """
    State holder for the web application.

    Loads the schedule once, owns the viewing session and keeps the latest
    render published by it. A load failure is kept as a single error message
    and the session stays None.
    """

    def __init__(self, factory: ServiceFactory, schedule_path: Optional[str]):
        self.factory = factory
        self.preferences = factory.get_preferences_service()
        self.config = factory.get_config()
        self.session: Optional[ScheduleSession] = None
        self.load_error: Optional[str] = None
        self.clock_text = fmt_clock(factory.clock())
        self.lock = threading.RLock()
        self._render: Dict[str, Any] = {}
        self._tickers = []

        try:
            if not schedule_path:
                raise ScheduleLoadError("No schedule file configured")
            self.session = factory.create_session_from_file(schedule_path)
        except ScheduleLoadError as e:
            logger.error("Error loading schedule data: %s", e)
            self.load_error = constants.MSG_LOAD_FAILED
            return

        self.session.subscribe(self._on_render)
        self.session.start()

    # ------------------------------------------------------------------
    # Session listener
    # ------------------------------------------------------------------
    def _on_render(self, entries: List[ScheduleEntry], hint: str, payload: Dict[str, Any]) -> None:
        self._render = {
            "entries": entries,
            "hint": hint,
            "upcoming": payload.get("upcoming", []),
            "available_courts": payload["available_courts"],
            "state": payload["state"],
        }

    def render(self) -> Dict[str, Any]:
        """Latest render published by the session."""
        return dict(self._render)

    # ------------------------------------------------------------------
    # Periodic ticks
    # ------------------------------------------------------------------
    def tick(self) -> None:
        """Coarse tick: keep the "now" view fresh."""
        if self.session is None:
            return
        with self.lock:
            self.session.tick()

    def update_clock(self) -> None:
        """Fine tick: refresh the clock display."""
        self.clock_text = fmt_clock(self.factory.clock())

    def start_tickers(self) -> None:
        self._tickers = [
            self.factory.create_now_ticker(self.tick),
            self.factory.create_clock_ticker(self.update_clock),
        ]
        for ticker in self._tickers:
            ticker.start()

    def stop_tickers(self) -> None:
        for ticker in self._tickers:
            ticker.stop()
        self._tickers = []


def create_app(
    schedule_path: Optional[str] = None,
    config_path: Optional[str] = None,
    preferences_path: str = constants.DEFAULT_PREFERENCES_FILE,
    clock: Callable[[], datetime] = now_dt,
    start_tickers: bool = False,
) -> Flask:
    """
    Create and configure the Flask application with API endpoints.

    Args:
        schedule_path: JSON or HTML file with the schedule records
        config_path: Optional tournament config file
        preferences_path: File holding the theme preference
        clock: Callable returning the current time
        start_tickers: Start the periodic refresh threads

    Returns:
        Configured Flask application instance
    """
    app = Flask(__name__)
    factory = ServiceFactory(config_path=config_path, preferences_path=preferences_path, clock=clock)
    app_state = WebAppState(factory, schedule_path)
    app.config["APP_STATE"] = app_state

    if start_tickers and app_state.session is not None:
        app_state.start_tickers()

    @app.before_request
    def refuse_when_not_loaded():
        """Every route reports the load failure instead of a partial page."""
        if app_state.load_error is None:
            return None
        if request.path.startswith("/api/"):
            return jsonify({"success": False, "error": app_state.load_error}), 503
        return render_template(
            "index.html",
            title=constants.APP_TITLE,
            tournament=app_state.config.name,
            load_error=app_state.load_error,
            theme=app_state.preferences.resolve_theme(),
            saved_theme=app_state.preferences.load_theme(),
            clock=app_state.clock_text,
        ), 503

    # ==================== Page ==================== #

    @app.route("/")
    def index():
        """Render the schedule page from the latest session render."""
        with app_state.lock:
            view = app_state.render()

        response = app.make_response(render_template(
            "index.html",
            title=constants.APP_TITLE,
            tournament=app_state.config.name,
            load_error=None,
            view=view,
            days=app_state.config.days,
            theme=app_state.preferences.resolve_theme(),
            saved_theme=app_state.preferences.load_theme(),
            clock=app_state.clock_text,
            refresh_seconds=constants.NOW_REFRESH_SECONDS,
            messages=constants,
        ))
        response.headers['Cache-Control'] = 'no-cache, no-store, must-revalidate'
        return response

    @app.route("/filter/mode", methods=["POST"])
    def form_set_mode():
        try:
            with app_state.lock:
                app_state.session.set_mode(request.form.get("mode", ""))
        except ValueError as e:
            logger.warning("Rejected mode change: %s", e)
        return redirect(url_for("index"))

    @app.route("/filter/day", methods=["POST"])
    def form_select_day():
        day = request.form.get("day")
        if day:
            with app_state.lock:
                app_state.session.select_day(day)
        return redirect(url_for("index"))

    @app.route("/filter/court", methods=["POST"])
    def form_toggle_court():
        court = request.form.get("court")
        if court:
            with app_state.lock:
                app_state.session.toggle_court(court)
        return redirect(url_for("index"))

    @app.route("/theme/toggle", methods=["POST"])
    def form_toggle_theme():
        app_state.preferences.toggle_theme(request.form.get("system"))
        return redirect(url_for("index"))

    # ==================== API Endpoints ==================== #

    def _build_render_data(view: Dict[str, Any]) -> Dict[str, Any]:
        return {
            "success": True,
            "hint": view["hint"],
            "state": view["state"],
            "entries": [entry.to_json() for entry in view["entries"]],
            "upcoming": [entry.to_json() for entry in view["upcoming"]],
            "available_courts": view["available_courts"],
        }

    @app.route("/api/state", methods=["GET"])
    def get_state():
        """Get the current filter state and visible entries."""
        with app_state.lock:
            return jsonify(_build_render_data(app_state.render()))

    @app.route("/api/filter/mode", methods=["POST"])
    def set_mode():
        """Switch between the now, day and all views."""
        data = request.get_json(silent=True) or {}
        try:
            with app_state.lock:
                app_state.session.set_mode(data.get("mode", ""))
                return jsonify(_build_render_data(app_state.render()))
        except ValueError as e:
            return jsonify({"success": False, "error": str(e)}), 400

    @app.route("/api/filter/day", methods=["POST"])
    def select_day():
        """Select the day shown in the day view."""
        data = request.get_json(silent=True) or {}
        day = data.get("day")
        if not isinstance(day, str) or not day:
            return jsonify({"success": False, "error": "'day' is required"}), 400

        with app_state.lock:
            app_state.session.select_day(day)
            return jsonify(_build_render_data(app_state.render()))

    @app.route("/api/filter/court", methods=["POST"])
    def toggle_court():
        """Toggle a court in the court filter."""
        data = request.get_json(silent=True) or {}
        court = data.get("court")
        if not isinstance(court, str) or not court:
            return jsonify({"success": False, "error": "'court' is required"}), 400

        with app_state.lock:
            app_state.session.toggle_court(court)
            return jsonify(_build_render_data(app_state.render()))

    @app.route("/api/clock", methods=["GET"])
    def get_clock():
        """Current clock display text."""
        app_state.update_clock()
        return jsonify({"success": True, "clock": app_state.clock_text})

    @app.route("/api/theme", methods=["GET"])
    def get_theme():
        system_theme = request.args.get("system")
        return jsonify({"success": True, "theme": app_state.preferences.resolve_theme(system_theme)})

    @app.route("/api/theme", methods=["POST"])
    def set_theme():
        """Save a theme, or toggle it when no theme is given."""
        data = request.get_json(silent=True) or {}
        try:
            theme = data.get("theme")
            if theme:
                app_state.preferences.save_theme(theme)
            else:
                theme = app_state.preferences.toggle_theme(data.get("system"))
            return jsonify({"success": True, "theme": theme})
        except ValueError as e:
            return jsonify({"success": False, "error": str(e)}), 400
        except OSError as e:
            logger.error("Could not save theme preference: %s", e)
            return jsonify({"success": False, "error": str(e)}), 500

    return app


def run_web_app(
    schedule_path: str,
    config_path: Optional[str] = None,
    host: str = "127.0.0.1",
    port: int = 7122,
    preferences_path: str = constants.DEFAULT_PREFERENCES_FILE,
) -> None:
    """
    Run the web application.

    Args:
        schedule_path: JSON or HTML file with the schedule records
        config_path: Optional tournament config file
        host: Host address to bind to (default: localhost only)
        port: Port number to listen on
        preferences_path: File holding the theme preference
    """
    app = create_app(
        schedule_path,
        config_path=config_path,
        preferences_path=os.path.abspath(preferences_path),
        start_tickers=True,
    )
    try:
        app.run(host=host, port=port, debug=False)
    finally:
        app.config["APP_STATE"].stop_tickers()
