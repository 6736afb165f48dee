from datetime import datetime
import os
import re

from flask import Flask, jsonify, abort
from flask_sqlalchemy import SQLAlchemy
from sqlalchemy.exc import SQLAlchemyError
from werkzeug.exceptions import HTTPException

import config           # LOG_LEVEL, SEED_DEFAULT_RULES
import public_holidays  # DEFAULT_RULES list
from holiday_engine import HolidayError, HolidayQueryService, HolidayRule, InvalidInput

# ---------------------------
# App & DB config
# ---------------------------

app = Flask(__name__)
app.logger.setLevel(config.LOG_LEVEL)

# Holiday names are Spanish; keep accents readable in responses
app.json.ensure_ascii = False

# Prefer DATABASE_URL (Postgres in production), fall back to SQLite locally
database_url = os.environ.get("DATABASE_URL")

if not database_url:
    # Local development fallback: SQLite file next to app.py
    default_db_path = os.path.join(os.path.dirname(__file__), "festivos.db")
    database_url = f"sqlite:///{default_db_path}"

# Optional: normalise old postgres:// URLs, just in case
if database_url.startswith("postgres://"):
    database_url = database_url.replace("postgres://", "postgresql://", 1)

app.config["SQLALCHEMY_DATABASE_URI"] = database_url
app.config["SQLALCHEMY_TRACK_MODIFICATIONS"] = False

# Make the DB pool resilient to idle timeouts
app.config["SQLALCHEMY_ENGINE_OPTIONS"] = {
    "pool_pre_ping": True,   # check connections before using them
    "pool_recycle": 300,     # recycle connections every 5 minutes
}

db = SQLAlchemy(app)

# ---------------------------
# Models
# ---------------------------

class Holiday(db.Model):
    """
    A holiday rule. Column names follow the existing "festivo" table so
    a database created by the previous service can be reused as-is.
    """
    __tablename__ = "festivo"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column("nombre", db.String(100), nullable=False)

    # Only used by fixed rules (types 1 and 2)
    day = db.Column("dia", db.Integer, nullable=True)
    month = db.Column("mes", db.Integer, nullable=True)

    # Only used by Easter rules (types 3 and 4); may be negative
    easter_offset_days = db.Column("diaspascua", db.Integer, nullable=False, default=0)

    # 1 = fixed, 2 = fixed + next Monday, 3 = Easter, 4 = Easter + next Monday
    rule_type = db.Column("idtipo", db.Integer, nullable=False)

    def to_rule(self) -> HolidayRule:
        return HolidayRule(
            name=self.name,
            rule_type=self.rule_type,
            day=self.day,
            month=self.month,
            easter_offset_days=self.easter_offset_days,
            id=self.id,
        )

    def __repr__(self):
        return f"<Holiday {self.name} type={self.rule_type}>"


def seed_default_rules():
    """Insert the Colombian holiday rules, in listing order."""
    for rule in public_holidays.DEFAULT_RULES:
        db.session.add(Holiday(
            name=rule.name,
            day=rule.day,
            month=rule.month,
            easter_offset_days=rule.easter_offset_days,
            rule_type=int(rule.rule_type),
        ))
    db.session.commit()
    app.logger.info("Seeded %d default holiday rules", len(public_holidays.DEFAULT_RULES))


def ensure_holiday_rules():
    """
    Ensure DB tables exist and, unless SEED_DEFAULT_RULES is off, that
    the rule table is not empty.
    """
    with app.app_context():
        db.create_all()

        if config.SEED_DEFAULT_RULES and Holiday.query.first() is None:
            seed_default_rules()

ensure_holiday_rules()

# ---------------------------
# Helpers
# ---------------------------

def load_rules():
    """
    Snapshot of the rule table, in insertion order.
    The engine only ever sees plain HolidayRule values, never ORM rows.
    """
    return [row.to_rule() for row in Holiday.query.order_by(Holiday.id).all()]


holiday_service = HolidayQueryService(load_rules)


# Plain decimal numbers only; int() alone would also take "1_2"
NUMBER_RE = re.compile(r"[+-]?[0-9]+")


def internal_error():
    return jsonify({"success": False, "error": "Error interno del servidor"}), 500


@app.errorhandler(HTTPException)
def handle_http_error(e):
    return jsonify({"success": False, "error": e.description}), e.code

# ---------------------------
# Routes
# ---------------------------

@app.route("/initdb")
def initdb():
    """
    Protected DB initialisation route.

    Disabled by default so random people can't hit it. To enable
    temporarily, set ENABLE_INITDB=true in the environment, call this
    route once, then turn it off.
    """
    enable_initdb = os.environ.get("ENABLE_INITDB", "false").lower() == "true"
    if not enable_initdb:
        abort(404)

    db.create_all()
    if Holiday.query.first() is None:
        seed_default_rules()
    return "Database initialised. You can now turn off ENABLE_INITDB."

@app.route("/festivos/verificar/<year>/<month>/<day>")
def check_date(year, month, day):
    if not all(NUMBER_RE.fullmatch(part) for part in (year, month, day)):
        app.logger.error("Year, month or day is not a number. Input: %s/%s/%s", year, month, day)
        return jsonify({
            "success": False,
            "error": "Año, mes o día no son números válidos.",
        }), 400

    # Make sure month and day have two digits (e.g. 2 -> 02)
    date_str = f"{year}-{int(month):02d}-{int(day):02d}"

    app.logger.info("Parsing date string (YYYY-MM-DD): %s", date_str)

    try:
        d = datetime.strptime(date_str, "%Y-%m-%d").date()
    except ValueError as e:
        # Not a real date (e.g. 2025-02-30)
        app.logger.error("Invalid date %s - %s", date_str, e)
        return jsonify({"success": False, "error": "Fecha no válida"}), 400

    try:
        result = holiday_service.is_holiday(d)
    except InvalidInput as e:
        app.logger.error("Invalid date %s - %s", d, e)
        return jsonify({"success": False, "error": "Fecha no válida"}), 400
    except HolidayError as e:
        app.logger.error("Holiday rules could not be resolved for %s: %s", d, e)
        return internal_error()
    except SQLAlchemyError:
        app.logger.exception("Failed to load holiday rules for %s", d)
        return internal_error()

    return jsonify({
        "success": True,
        "date": d.isoformat(),
        "is_holiday": result.is_holiday,
        "name": result.name,
        "message": "Es festivo" if result.is_holiday else "No es festivo",
    })

@app.route("/festivos/listar/<int:year>")
def list_holidays(year):
    try:
        holidays = holiday_service.list_year(year)
    except InvalidInput as e:
        app.logger.error("Invalid year %s - %s", year, e)
        return jsonify({"success": False, "error": "Año no válido"}), 400
    except HolidayError as e:
        app.logger.error("Holiday rules could not be resolved for %s: %s", year, e)
        return internal_error()
    except SQLAlchemyError:
        app.logger.exception("Failed to load holiday rules for %s", year)
        return internal_error()

    return jsonify([h.to_dict() for h in holidays])


# ---------------------------
# Run (for local development)
# ---------------------------

if __name__ == "__main__":
    app.run(debug=True)
