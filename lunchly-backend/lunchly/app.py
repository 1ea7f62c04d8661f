import logging
import random
from datetime import datetime, timedelta
import click
from flask import Flask, jsonify
from flask.cli import with_appcontext
from flask_cors import CORS
from sqlalchemy import delete
from .extensions import db
from .config import Config
from .errors import LunchlyError
from .http import jerror
from .blueprints.customers import bp as customers_bp
from .blueprints.reservations import bp as reservations_bp
from .models import Customer, Reservation
from .tables import customers, reservations

logger = logging.getLogger(__name__)

SAMPLE_NAMES = [
    ("Anthony", "Gonzales"), ("Jennifer", "Lloyd"), ("Sarah", "Kim"),
    ("Walter", "Miller"), ("Ashley", "Chen"), ("Michael", "Brown"),
    ("Dana", "Ortiz"), ("Kevin", "Nguyen"), ("Laura", "Patel"),
    ("Roberto", "Silva"), ("Emily", "Walsh"), ("Omar", "Haddad"),
]


def create_app(config_object=Config):
    app = Flask(__name__)
    if isinstance(config_object, dict):
        app.config.from_object(Config)
        app.config.update(config_object)
    else:
        app.config.from_object(config_object)

    logging.basicConfig(
        level=app.config.get("LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    CORS(app)

    db.init_app(app)

    app.register_blueprint(customers_bp, url_prefix="/api/customers")
    app.register_blueprint(reservations_bp, url_prefix="/api/reservations")

    @app.errorhandler(LunchlyError)
    def handle_lunchly_error(err: LunchlyError):
        logger.warning("%s: %s", err.code, err.message)
        return jerror(err.status, err.code, err.message)

    @app.get("/health")
    def health():
        return jsonify(status="ok")

    @click.command("seed")
    @with_appcontext
    def seed_command():
        """Replaces all customers and reservations with sample data."""
        db.session.execute(delete(reservations))
        db.session.execute(delete(customers))
        db.session.commit()
        print("Cleared existing data.")

        created = []
        for i, (first_name, last_name) in enumerate(SAMPLE_NAMES):
            customer = Customer(
                first_name=first_name,
                last_name=last_name,
                phone=f"555-010-{i:04d}",
                notes=random.choice([None, "Prefers a window table.", "Regular."]),
            )
            customer.save()
            created.append(customer)
        print(f"Created {len(created)} customers.")

        today = datetime.now().replace(hour=0, minute=0, second=0, microsecond=0)
        count = 0
        for _ in range(40):
            customer = random.choice(created)
            start_at = today + timedelta(
                days=random.randint(-30, 30),
                hours=random.randint(11, 21),
                minutes=random.choice([0, 15, 30, 45]),
            )
            Reservation(
                customer_id=customer.id,
                num_guests=random.randint(1, 8),
                start_at=start_at,
                notes=random.choice(["", "Birthday.", "High chair needed."]),
            ).save()
            count += 1
        print(f"Created {count} reservations.")
        print("Database seeded!")

    app.cli.add_command(seed_command)

    return app
