import os
import logging

from dotenv import load_dotenv
from flask import Flask, render_template, request, flash, jsonify

import weather_api as weather_api
import advice as advice
from search import run_search
from models import SearchState


# Reads the first non-empty environment variable among `names`.
def _env(*names, default=None):
    for name in names:
        value = os.environ.get(name)
        if value:
            return value
    return default


# App factory: reads configuration from the environment and registers routes.
def create_app():
    load_dotenv()

    app = Flask(__name__)
    app.config["SECRET_KEY"] = _env("SECRET_KEY", default="dev-secret")
    app.config["OPEN_WEATHER_KEY"] = _env("OPEN_WEATHER_KEY", "VITE_OPEN_WEATHER_KEY")
    app.config["GEMINI_KEY"] = _env("GEMINI_KEY", "VITE_GEMINI_KEY")
    app.config["GEMINI_MODEL"] = _env("GEMINI_MODEL", default=advice.MODEL_NAME)
    app.config["WEATHER_URL"] = _env("WEATHER_URL", default=weather_api.WEATHER_URL)
    app.config["WEATHER_TIMEOUT"] = float(_env("WEATHER_TIMEOUT", default=weather_api.DEFAULT_TIMEOUT))
    app.config["LOG_LEVEL"] = _env("LOG_LEVEL", default="INFO").upper()

    logging.basicConfig(
        level=app.config["LOG_LEVEL"],
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    def fetch_weather(city):
        return weather_api.fetch_current_weather(
            city,
            api_key=app.config["OPEN_WEATHER_KEY"],
            url=app.config["WEATHER_URL"],
            timeout=app.config["WEATHER_TIMEOUT"],
        )

    # One generator (and one SDK client) per app, shared by every request.
    app.extensions["advice"] = advice.AdviceGenerator(
        api_key=app.config["GEMINI_KEY"],
        model=app.config["GEMINI_MODEL"],
    )

    def get_advice(description):
        return app.extensions["advice"](description)

    @app.route("/", methods=["GET"])
    def index():
        return render_template("index.html", state=SearchState())

    # Search route: one query cycle per POST; errors are flashed and the page is re-rendered.
    @app.route("/", methods=["POST"])
    def search():
        city = request.form.get("city") or ""
        state = run_search(city, fetch_weather, get_advice)
        if state.error:
            flash(state.error, "error")
        return render_template("index.html", state=state, city=city)

    @app.route("/healthz", methods=["GET"])
    def healthz():
        return jsonify(status="ok")

    return app

if __name__ == "__main__":
    app = create_app()
    app.run(debug=True)
